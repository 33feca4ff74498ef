"""Pydantic schemas for aggregated player statistics."""

from pydantic import BaseModel, Field, ConfigDict


class PlayerStats(BaseModel):
    """Aggregate over the recent match window. Derived, never stored."""

    total_games: int = Field(0, alias="totalGames")
    wins: int = 0
    losses: int = 0
    win_rate: float = Field(
        0, ge=0, le=100, alias="winRate", description="Win rate percentage (0-100)"
    )
    average_kills: float = Field(0.0, alias="averageKills")
    average_deaths: float = Field(0.0, alias="averageDeaths")
    average_assists: float = Field(0.0, alias="averageAssists")
    average_kda: float = Field(
        0.0,
        alias="averageKda",
        description="(sum kills + sum assists) / sum deaths over the window",
    )

    model_config = ConfigDict(populate_by_name=True)


class ChampionStats(BaseModel):
    """Per-champion rollup over the match window."""

    champion_name: str = Field(..., alias="championName")
    games: int = 0
    wins: int = 0
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    win_rate: int = Field(0, alias="winRate")
    kda: float = 0.0

    model_config = ConfigDict(populate_by_name=True)

    @property
    def losses(self) -> int:
        """Games not won."""
        return self.games - self.wins
