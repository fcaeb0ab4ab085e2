"""
Data contracts for Steam Ladder profile responses.

Endpoints: GET profile/{steam_id64}/ and POST profile/{steam_id64}.
Field aliases are the wire names; dump with by_alias=True to reproduce them.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LadderModel(BaseModel):
    """Immutable base for every Steam Ladder record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SteamUser(LadderModel):
    """Basic information about a Steam user."""

    name: str = Field(..., alias="steam_name", description="Steam display name")
    id: str = Field(..., alias="steam_id", description="SteamID64 as a string")
    profile_url: str = Field(
        ..., alias="steamladder_url", description="URL of the user's Steam Ladder page"
    )
    join_date: datetime = Field(
        ..., alias="steam_join_date", description="When the account was created"
    )
    country_code: str = Field(
        ..., alias="steam_country_code", description="ISO 3166-1 alpha-2 country code"
    )
    avatar_url: str = Field(..., alias="steam_avatar_src", description="Avatar image URL")
    is_private: bool = Field(
        ..., alias="is_steam_private", description="Whether the Steam profile is private"
    )


class Badge(LadderModel):
    """A single tracked badge."""

    position: int = Field(..., alias="pos", description="Position in the badge list")
    name: str
    foil: bool
    level: int
    xp: int


class Badges(LadderModel):
    """Badge totals plus the tracked badges, in API order."""

    total: int = Field(..., description="Total number of badges")
    tracking: list[Badge]

    @property
    def foil_badges(self) -> list[Badge]:
        """Tracked badges that are foil."""
        return [b for b in self.tracking if b.foil]


class LadderServiceInfo(LadderModel):
    """Steam Ladder site flags for a user (staff, events, donations)."""

    is_staff: bool
    is_winter_18: bool
    is_winter_19: bool
    is_donator: bool
    is_top_donator: bool
    patreon_tier: str | None = Field(default=None, description="Patreon tier, if any")


class Game(LadderModel):
    """One of the user's most played games."""

    position: int = Field(..., alias="pos")
    id: int = Field(..., description="Steam app ID")
    name: str
    playtime_min: int = Field(..., description="Playtime in minutes")

    @property
    def playtime_hours(self) -> float:
        """Convert playtime from minutes to hours."""
        return self.playtime_min / 60


class Games(LadderModel):
    """Library totals and most played games."""

    total_games: int
    total_playtime_min: int
    most_played: list[Game]

    @property
    def total_playtime_hours(self) -> float:
        """Convert total playtime from minutes to hours."""
        return self.total_playtime_min / 60


class Bans(LadderModel):
    """Ban status of a Steam user."""

    vac_bans: int
    game_bans: int
    last_ban_day: datetime | None = Field(default=None, description="None when never banned")
    is_vac_banned: bool
    is_community_banned: bool
    economy_status: str

    @property
    def has_bans(self) -> bool:
        """Check if the user has any VAC, game or community ban."""
        return (
            self.vac_bans > 0
            or self.game_bans > 0
            or self.is_vac_banned
            or self.is_community_banned
        )


class SteamStats(LadderModel):
    """Profile statistics as last fetched by Steam Ladder."""

    last_update: datetime
    level: int
    xp: int
    friends: int
    badges: Badges
    games: Games
    bans: Bans


class RegionRank(LadderModel):
    """Ranks within the user's region."""

    region_xp: int
    region_playtime: int
    region_games: int


class CountryRank(LadderModel):
    """Ranks within the user's country."""

    country_xp: int
    country_playtime: int
    country_games: int


class LadderRank(LadderModel):
    """Worldwide, regional and country ranks."""

    worldwide_xp: int
    worldwide_games: int
    worldwide_playtime: int
    region: RegionRank
    country: CountryRank


class SteamProfile(LadderModel):
    """
    Complete profile response.

    Returned by both the fetch and the update endpoints.
    """

    steam_user: SteamUser
    steam_ladder_info: LadderServiceInfo
    steam_stats: SteamStats
    ladder_rank: LadderRank
