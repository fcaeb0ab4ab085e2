"""
Endpoint path construction for the Steam Ladder API.

Paths are relative to the API base URL and built from typed
parameters only, so they can be checked without a transport.
"""

from enum import Enum

STEAM_ID64_MAX = 2**64 - 1


class LadderType(str, Enum):
    """Metrics the service ranks users by."""

    XP = "xp"
    GAMES = "games"
    PLAYTIME = "playtime"
    BADGES = "badges"
    STEAM_AGE = "steam_age"
    VAC = "vac"
    GAME_BAN = "game_ban"


class Region(str, Enum):
    """Fixed geographic regions for regional ladders."""

    EUROPE = "europe"
    NORTH_AMERICA = "north_america"
    SOUTH_AMERICA = "south_america"
    ASIA = "asia"
    AFRICA = "africa"
    OCEANIA = "oceania"
    ANTARCTICA = "antarctica"


# Tokens the remote service accepts in ladder URLs. These differ from the
# enum values for multi-word members (no separators).
LADDER_TYPE_TOKENS: dict[LadderType, str] = {
    LadderType.XP: "xp",
    LadderType.GAMES: "games",
    LadderType.PLAYTIME: "playtime",
    LadderType.BADGES: "badges",
    LadderType.STEAM_AGE: "steamage",
    LadderType.VAC: "vac",
    LadderType.GAME_BAN: "gameban",
}

REGION_TOKENS: dict[Region, str] = {
    Region.EUROPE: "europe",
    Region.NORTH_AMERICA: "northamerica",
    Region.SOUTH_AMERICA: "southamerica",
    Region.ASIA: "asia",
    Region.AFRICA: "africa",
    Region.OCEANIA: "oceania",
    Region.ANTARCTICA: "antarctica",
}


def _check_steam_id64(steam_id64: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(steam_id64, bool) or not isinstance(steam_id64, int):
        raise ValueError(f"SteamID64 must be an integer, got {type(steam_id64).__name__}")
    if not 0 <= steam_id64 <= STEAM_ID64_MAX:
        raise ValueError(f"SteamID64 out of range: {steam_id64}")
    return steam_id64


def profile_path(steam_id64: int) -> str:
    """Path for fetching a profile (trailing slash)."""
    return f"profile/{_check_steam_id64(steam_id64)}/"


def update_profile_path(steam_id64: int) -> str:
    """Path for refreshing a profile (no trailing slash)."""
    return f"profile/{_check_steam_id64(steam_id64)}"


def region_ladder_path(ladder_type: LadderType, region: Region) -> str:
    """
    Path for a regional ladder.

    Example:
        >>> region_ladder_path(LadderType.STEAM_AGE, Region.NORTH_AMERICA)
        'ladder/steamage/northamerica'
    """
    return f"ladder/{LADDER_TYPE_TOKENS[LadderType(ladder_type)]}/{REGION_TOKENS[Region(region)]}"


def country_ladder_path(ladder_type: LadderType, country: str) -> str:
    """
    Path for a country ladder.

    The country code is passed through as given; the service rejects
    unknown codes.
    """
    return f"ladder/{LADDER_TYPE_TOKENS[LadderType(ladder_type)]}/{country}"
