"""
Steam Ladder API client.

Async client, endpoint path builders and the exceptions
the client raises.
"""

from steam_ladder.client.endpoints import (
    LADDER_TYPE_TOKENS,
    REGION_TOKENS,
    LadderType,
    Region,
    country_ladder_path,
    profile_path,
    region_ladder_path,
    update_profile_path,
)
from steam_ladder.client.errors import (
    APIError,
    DecodeError,
    RateLimitError,
    SteamLadderError,
)
from steam_ladder.client.ladder_client import SteamLadderClient

__all__ = [
    # Errors
    "APIError",
    "DecodeError",
    "RateLimitError",
    "SteamLadderError",
    # Endpoints
    "LADDER_TYPE_TOKENS",
    "REGION_TOKENS",
    "LadderType",
    "Region",
    "country_ladder_path",
    "profile_path",
    "region_ladder_path",
    "update_profile_path",
    # Client
    "SteamLadderClient",
]
