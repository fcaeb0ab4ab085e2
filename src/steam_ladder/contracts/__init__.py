"""
Data contracts for Steam Ladder API responses.

Immutable Pydantic models mirroring the JSON returned by the
profile and ladder endpoints.
"""

from steam_ladder.contracts.ladder import Ladder, LadderEntry
from steam_ladder.contracts.profile import (
    Badge,
    Badges,
    Bans,
    CountryRank,
    Game,
    Games,
    LadderModel,
    LadderRank,
    LadderServiceInfo,
    RegionRank,
    SteamProfile,
    SteamStats,
    SteamUser,
)

__all__ = [
    "Badge",
    "Badges",
    "Bans",
    "CountryRank",
    "Game",
    "Games",
    "Ladder",
    "LadderEntry",
    "LadderModel",
    "LadderRank",
    "LadderServiceInfo",
    "RegionRank",
    "SteamProfile",
    "SteamStats",
    "SteamUser",
]
