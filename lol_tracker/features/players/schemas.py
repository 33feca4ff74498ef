"""Pydantic schemas for the player page."""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from lol_tracker.core.backend_api.models import (
    AccountDTO,
    MatchSummaryDTO,
    RankedEntryDTO,
)
from lol_tracker.core.enums import LoadStatus, Region
from lol_tracker.features.matches.schemas import MatchDisplay
from lol_tracker.features.stats.schemas import ChampionStats, PlayerStats


class RankBadge(BaseModel):
    """One ranked queue standing, ready for display."""

    queue_label: str = Field(..., alias="queueLabel")
    tier_label: str = Field(..., alias="tierLabel")
    tier_icon_url: str = Field(..., alias="tierIconUrl")
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = 0
    losses: int = 0
    win_rate: int = Field(0, alias="winRate")
    ranked: bool = True

    model_config = ConfigDict(populate_by_name=True)


class PlayerPageState(BaseModel):
    """
    Everything the player page shows for one lookup.

    A fresh instance is published when a load starts, so nothing from a
    previous lookup survives into the next one.
    """

    status: LoadStatus = LoadStatus.IDLE
    error_message: str = Field("", alias="errorMessage")
    error_status: Optional[int] = Field(None, alias="errorStatus")
    generation: int = 0
    region: Optional[Region] = None

    account: Optional[AccountDTO] = None
    profile_icon_url: str = Field("", alias="profileIconUrl")
    patch_version: Optional[str] = Field(None, alias="patchVersion")

    match_summaries: List[MatchSummaryDTO] = Field(default_factory=list, exclude=True)
    matches: List[MatchDisplay] = Field(default_factory=list)
    stats: Optional[PlayerStats] = None
    top_champions: List[ChampionStats] = Field(default_factory=list, alias="topChampions")
    ranked_entries: List[RankedEntryDTO] = Field(
        default_factory=list, alias="rankedEntries"
    )
    rank_badges: List[RankBadge] = Field(default_factory=list, alias="rankBadges")
    is_favorite: bool = Field(False, alias="isFavorite")
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def has_stats(self) -> bool:
        """Stats are only worth showing for a non-empty window."""
        return self.stats is not None and self.stats.total_games > 0
