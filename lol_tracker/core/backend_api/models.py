"""Pydantic models for backend API response data."""

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator


class AccountDTO(BaseModel):
    """Resolved player account. ``puuid`` is the only stable lookup key."""

    puuid: str
    game_name: str = Field(..., alias="gameName")
    tag_line: str = Field(..., alias="tagLine")
    profile_icon_id: Optional[int] = Field(None, alias="profileIconId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class MatchParticipantDTO(BaseModel):
    """Ally or enemy listed on a match summary."""

    summoner_name: str = Field("", alias="summonerName")
    riot_id_tagline: Optional[str] = Field(None, alias="riotIdTagline")
    champion_name: str = Field("", alias="championName")
    puuid: str = ""

    model_config = ConfigDict(populate_by_name=True)


class MatchSummaryDTO(BaseModel):
    """One played match from one player's perspective."""

    match_id: str = Field(..., alias="matchId")
    champion_name: str = Field(..., alias="championName")
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    win: bool = False
    game_duration_sec: int = Field(0, ge=0, alias="gameDurationSec")
    game_end_timestamp: int = Field(0, alias="gameEndTimestamp")
    champion_level: int = Field(0, alias="championLevel")
    summoner1_id: int = Field(0, alias="summoner1Id")
    summoner2_id: int = Field(0, alias="summoner2Id")
    items: List[int] = Field(default_factory=list)
    total_minions_killed: int = Field(0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, alias="neutralMinionsKilled")
    queue_id: int = Field(0, alias="queueId")
    team_total_kills: int = Field(0, ge=0, alias="teamTotalKills")
    allies: List[MatchParticipantDTO] = Field(default_factory=list)
    enemies: List[MatchParticipantDTO] = Field(default_factory=list)
    primary_rune_id: int = Field(0, alias="primaryRuneId")
    secondary_rune_style_id: int = Field(0, alias="secondaryRuneStyleId")
    augments: List[int] = Field(default_factory=list)
    placement: int = Field(0, ge=0, le=8)

    model_config = ConfigDict(populate_by_name=True)


class PlayerStatsDTO(BaseModel):
    """Aggregate stats as computed by the backend."""

    total_games: int = Field(0, ge=0, alias="totalGames")
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    win_rate: float = Field(0.0, ge=0, le=100, alias="winRate")
    average_kills: float = Field(0.0, alias="averageKills")
    average_deaths: float = Field(0.0, alias="averageDeaths")
    average_assists: float = Field(0.0, alias="averageAssists")
    average_kda: float = Field(0.0, alias="averageKda")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("wins")
    @classmethod
    def wins_within_total(cls, v: int, info: ValidationInfo) -> int:
        total = info.data.get("total_games")
        if total is not None and v > total:
            raise ValueError("wins exceed totalGames")
        return v


class RankedEntryDTO(BaseModel):
    """One ranked queue standing."""

    queue_type: str = Field(..., alias="queueType")
    tier: str
    rank: str = ""
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = 0
    losses: int = 0

    model_config = ConfigDict(populate_by_name=True)


class MatchDetailParticipantDTO(BaseModel):
    """Full per-player record for one match."""

    summoner_name: str = Field("", alias="summonerName")
    riot_id_tagline: Optional[str] = Field(None, alias="riotIdTagline")
    champion_name: str = Field("", alias="championName")
    puuid: str
    team_id: int = Field(0, alias="teamId")
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    champion_level: int = Field(0, alias="championLevel")
    total_damage_dealt_to_champions: int = Field(
        0, alias="totalDamageDealtToChampions"
    )
    total_damage_taken: int = Field(0, alias="totalDamageTaken")
    gold_earned: int = Field(0, alias="goldEarned")
    items: List[int] = Field(default_factory=list)
    total_minions_killed: int = Field(0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, alias="neutralMinionsKilled")
    summoner1_id: int = Field(0, alias="summoner1Id")
    summoner2_id: int = Field(0, alias="summoner2Id")
    primary_rune_id: int = Field(0, alias="primaryRuneId")
    secondary_rune_style_id: int = Field(0, alias="secondaryRuneStyleId")
    wards_placed: int = Field(0, alias="wardsPlaced")
    wards_killed: int = Field(0, alias="wardsKilled")
    vision_wards_bought_in_game: int = Field(0, alias="visionWardsBoughtInGame")
    double_kills: int = Field(0, alias="doubleKills")
    triple_kills: int = Field(0, alias="tripleKills")
    quadra_kills: int = Field(0, alias="quadraKills")
    penta_kills: int = Field(0, alias="pentaKills")
    win: bool = False
    placement: int = 0
    player_subteam_id: int = Field(0, alias="playerSubteamId")

    model_config = ConfigDict(populate_by_name=True)


class MatchObjectivesDTO(BaseModel):
    """Team objective counters."""

    baron_kills: int = Field(0, alias="baronKills")
    dragon_kills: int = Field(0, alias="dragonKills")
    tower_kills: int = Field(0, alias="towerKills")

    model_config = ConfigDict(populate_by_name=True)


class MatchTeamDTO(BaseModel):
    """One side of a standard match."""

    team_id: int = Field(..., alias="teamId")
    win: bool = False
    bans: List[int] = Field(default_factory=list)
    objectives: MatchObjectivesDTO = Field(default_factory=MatchObjectivesDTO)

    model_config = ConfigDict(populate_by_name=True)


class MatchDetailDTO(BaseModel):
    """Complete match data for the scoreboard."""

    match_id: str = Field(..., alias="matchId")
    queue_id: int = Field(0, alias="queueId")
    game_duration_sec: int = Field(0, ge=0, alias="gameDurationSec")
    game_end_timestamp: int = Field(0, alias="gameEndTimestamp")
    game_mode: str = Field("", alias="gameMode")
    game_version: str = Field("", alias="gameVersion")
    teams: List[MatchTeamDTO] = Field(default_factory=list)
    participants: List[MatchDetailParticipantDTO] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class FavoritePlayerDTO(BaseModel):
    """Saved player bookmark; ``id`` is assigned by the backend."""

    id: int
    puuid: str
    game_name: str = Field(..., alias="gameName")
    tag_line: str = Field(..., alias="tagLine")
    region: str
    saved_at: Optional[datetime] = Field(None, alias="savedAt")

    model_config = ConfigDict(populate_by_name=True)
