"""
Steam Ladder API client.

Typed async client for the Steam Ladder ranking service:
profiles, profile refreshes and regional/country ladders.
"""

__version__ = "0.1.0"

# Imported after __version__, which the client reads for its User-Agent.
from steam_ladder.client import (  # noqa: E402
    APIError,
    DecodeError,
    LadderType,
    RateLimitError,
    Region,
    SteamLadderClient,
    SteamLadderError,
)
from steam_ladder.config import Settings, get_settings  # noqa: E402
from steam_ladder.logger import get_logger, setup_logging  # noqa: E402

__all__ = [
    "APIError",
    "DecodeError",
    "LadderType",
    "RateLimitError",
    "Region",
    "Settings",
    "SteamLadderClient",
    "SteamLadderError",
    "get_logger",
    "get_settings",
    "setup_logging",
    "__version__",
]
