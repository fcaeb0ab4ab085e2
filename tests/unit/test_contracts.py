"""Tests for data contracts."""

import json
from datetime import datetime, timezone
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from steam_ladder.contracts import (
    Badges,
    Bans,
    Game,
    Ladder,
    SteamProfile,
    SteamUser,
)


class TestSteamUser:
    """Tests for SteamUser contract."""

    def test_wire_names_map_to_attributes(self, profile_response: dict[str, Any]) -> None:
        """Test that aliased wire names populate the Python attributes."""
        user = SteamUser.model_validate(profile_response["steam_user"])

        assert user.name == "Robin"
        assert user.id == "76561197960287930"
        assert user.profile_url == "https://steamladder.com/profile/76561197960287930/"
        assert user.join_date == datetime(2003, 9, 12, tzinfo=timezone.utc)
        assert user.country_code == "US"
        assert user.is_private is False

    def test_dump_uses_wire_names(self, profile_response: dict[str, Any]) -> None:
        """Test that by_alias dumps reproduce the API field names exactly."""
        raw = profile_response["steam_user"]
        user = SteamUser.model_validate(raw)

        assert set(user.model_dump(by_alias=True)) == set(raw)

    def test_records_are_immutable(self, profile_response: dict[str, Any]) -> None:
        """Test that decoded records cannot be modified."""
        user = SteamUser.model_validate(profile_response["steam_user"])

        with pytest.raises(PydanticValidationError):
            user.name = "Someone else"  # type: ignore[misc]

    def test_missing_required_field(self, profile_response: dict[str, Any]) -> None:
        """Test that a missing required field is rejected, not defaulted."""
        raw = dict(profile_response["steam_user"])
        del raw["steam_join_date"]

        with pytest.raises(PydanticValidationError):
            SteamUser.model_validate(raw)


class TestBans:
    """Tests for Bans contract."""

    def test_null_last_ban_day_is_none(self, profile_response: dict[str, Any]) -> None:
        """Test that a null ban date decodes to None, not an epoch date."""
        bans = Bans.model_validate(profile_response["steam_stats"]["bans"])

        assert bans.last_ban_day is None
        assert bans.has_bans is False

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2015-06-21T14:30:00Z", datetime(2015, 6, 21, 14, 30, tzinfo=timezone.utc)),
            ("2015-06-21T14:30:00", datetime(2015, 6, 21, 14, 30)),
            ("2015-06-21T00:00:00Z", datetime(2015, 6, 21, tzinfo=timezone.utc)),
            ("2015-06-21", datetime(2015, 6, 21)),
        ],
    )
    def test_last_ban_day_parsed(self, raw: str, expected: datetime) -> None:
        """Test that ban timestamps keep their time of day."""
        bans = Bans(
            vac_bans=2,
            game_bans=0,
            last_ban_day=raw,
            is_vac_banned=True,
            is_community_banned=False,
            economy_status="none",
        )

        assert bans.last_ban_day == expected
        assert bans.has_bans is True

    def test_ban_time_in_full_profile(self, profile_response: dict[str, Any]) -> None:
        """Test that a profile whose last ban has a time of day decodes."""
        profile_response["steam_stats"]["bans"]["last_ban_day"] = "2015-06-21T14:30:00Z"

        profile = SteamProfile.model_validate(profile_response)

        assert profile.steam_stats.bans.last_ban_day == datetime(
            2015, 6, 21, 14, 30, tzinfo=timezone.utc
        )


class TestBadgesAndGames:
    """Tests for Badges and Games contracts."""

    def test_badges_keep_api_order(self, profile_response: dict[str, Any]) -> None:
        """Test that tracked badges keep API order and positions."""
        badges = Badges.model_validate(profile_response["steam_stats"]["badges"])

        assert [b.position for b in badges.tracking] == [1, 2, 3]
        assert [b.name for b in badges.foil_badges] == ["Steam Summer Sale 2023"]

    def test_playtime_hours(self) -> None:
        """Test minutes to hours conversion."""
        game = Game(pos=1, id=730, name="Counter-Strike 2", playtime_min=90)

        assert game.position == 1
        assert game.playtime_hours == pytest.approx(1.5)


class TestSteamProfile:
    """Tests for SteamProfile contract."""

    def test_full_profile(self, profile_response: dict[str, Any]) -> None:
        """Test decoding a complete profile response."""
        profile = SteamProfile.model_validate(profile_response)

        assert profile.steam_user.name == "Robin"
        assert profile.steam_ladder_info.is_winter_18 is True
        assert profile.steam_ladder_info.patreon_tier is None
        assert profile.steam_stats.level == 112
        assert profile.steam_stats.games.most_played[0].id == 730
        assert profile.ladder_rank.region.region_xp == 3012
        assert profile.ladder_rank.country.country_games == 1001

    def test_round_trip(self, profile_response: dict[str, Any]) -> None:
        """Test that dumping with wire names and re-decoding yields an equal record."""
        profile = SteamProfile.model_validate(profile_response)

        dumped = profile.model_dump_json(by_alias=True)
        again = SteamProfile.model_validate_json(dumped)

        assert again == profile
        assert set(json.loads(dumped)["steam_user"]) == set(profile_response["steam_user"])

    def test_wrong_type_rejected(self, profile_response: dict[str, Any]) -> None:
        """Test that a mismatched shape raises instead of returning a partial record."""
        profile_response["ladder_rank"]["worldwide_xp"] = "not a number"

        with pytest.raises(PydanticValidationError):
            SteamProfile.model_validate(profile_response)


class TestLadder:
    """Tests for Ladder contract."""

    def test_region_ladder_null_country(self, region_ladder_response: dict[str, Any]) -> None:
        """Test regional ladder with country_code null."""
        ladder = Ladder.model_validate(region_ladder_response)

        assert ladder.country_code is None
        assert ladder.is_country_ladder is False
        assert ladder.type_url == "xp"
        assert [e.position for e in ladder.entries] == [1, 2]
        assert ladder.entries[1].steam_stats.bans.last_ban_day == datetime(
            2015, 6, 21, 14, 30, tzinfo=timezone.utc
        )

    def test_country_ladder(self, country_ladder_response: dict[str, Any]) -> None:
        """Test country ladder with country_code set."""
        ladder = Ladder.model_validate(country_ladder_response)

        assert ladder.country_code == "DE"
        assert ladder.is_country_ladder is True
        assert len(ladder.entries) == 1

    def test_entries_not_resorted(self, region_ladder_response: dict[str, Any]) -> None:
        """Test that entries keep API order even when positions disagree."""
        region_ladder_response["ladder"].reverse()

        ladder = Ladder.model_validate(region_ladder_response)

        assert [e.position for e in ladder.entries] == [2, 1]

    def test_dump_uses_ladder_key(self, country_ladder_response: dict[str, Any]) -> None:
        """Test that entries serialize under the 'ladder' key."""
        ladder = Ladder.model_validate(country_ladder_response)

        dumped = ladder.model_dump(by_alias=True)

        assert "ladder" in dumped
        assert dumped["ladder"][0]["pos"] == 1
