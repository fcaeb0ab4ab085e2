"""
Data contracts for Steam Ladder leaderboard responses.

Endpoint: GET ladder/{type}/{region_or_country}
"""

from pydantic import Field

from steam_ladder.contracts.profile import LadderModel, SteamStats, SteamUser


class LadderEntry(LadderModel):
    """One row of a leaderboard."""

    position: int = Field(..., alias="pos", description="Rank on this ladder")
    steam_user: SteamUser
    steam_stats: SteamStats


class Ladder(LadderModel):
    """
    Leaderboard response.

    Regional and country ladders share this shape; country_code is
    None for regional ladders. Entries keep the order the API sent.
    """

    type: str = Field(..., description="Ladder type as named by the API")
    type_url: str = Field(..., description="Ladder type token used in URLs")
    country_code: str | None = Field(default=None, description="None for regional ladders")
    entries: list[LadderEntry] = Field(..., alias="ladder")

    @property
    def is_country_ladder(self) -> bool:
        """Check if this ladder is scoped to a country."""
        return self.country_code is not None
