"""Pydantic schemas for match list entries and scoreboards."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict

from lol_tracker.core.backend_api.models import MatchParticipantDTO
from lol_tracker.core.enums import LoadStatus


class MatchDisplay(BaseModel):
    """One match-history row with every derived display field."""

    match_id: str = Field(..., alias="matchId")
    champion_name: str = Field(..., alias="championName")
    champion_icon_url: str = Field(..., alias="championIconUrl")
    queue_name: str = Field(..., alias="queueName")
    is_arena: bool = Field(False, alias="isArena")
    is_win: bool = Field(..., alias="isWin")
    result_label: str = Field(..., alias="resultLabel")
    kills: int
    deaths: int
    assists: int
    kda: Union[str, float] = Field(..., description='Ratio rounded to 2 decimals or "Perfect"')
    kill_participation: int = Field(..., alias="killParticipation")
    cs: int
    performance_tag: Optional[str] = Field(None, alias="performanceTag")
    duration: str
    time_ago: str = Field(..., alias="timeAgo")
    item_icon_urls: List[str] = Field(default_factory=list, alias="itemIconUrls")
    spell_icon_urls: List[str] = Field(default_factory=list, alias="spellIconUrls")
    keystone_icon_url: str = Field("", alias="keystoneIconUrl")
    secondary_style_icon_url: str = Field("", alias="secondaryStyleIconUrl")
    augment_icon_urls: List[Optional[str]] = Field(
        default_factory=list, alias="augmentIconUrls"
    )
    placement: int = 0
    allies: List[MatchParticipantDTO] = Field(default_factory=list)
    enemies: List[MatchParticipantDTO] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ScoreboardRow(BaseModel):
    """One player line on a scoreboard."""

    puuid: str
    summoner_name: str = Field(..., alias="summonerName")
    riot_id_tagline: Optional[str] = Field(None, alias="riotIdTagline")
    champion_name: str = Field(..., alias="championName")
    champion_icon_url: str = Field(..., alias="championIconUrl")
    champion_level: int = Field(0, alias="championLevel")
    kills: int
    deaths: int
    assists: int
    kda: Union[str, float]
    damage: int
    damage_share: float = Field(
        ..., alias="damageShare", description="Percent of the match's top damage"
    )
    gold: int
    cs: int
    wards_placed: Optional[int] = Field(None, alias="wardsPlaced")
    wards_killed: Optional[int] = Field(None, alias="wardsKilled")
    control_wards: Optional[int] = Field(None, alias="controlWards")
    item_icon_urls: List[str] = Field(default_factory=list, alias="itemIconUrls")
    largest_multi_kill: Optional[str] = Field(None, alias="largestMultiKill")
    is_me: bool = Field(False, alias="isMe")

    model_config = ConfigDict(populate_by_name=True)


class TeamScoreboard(BaseModel):
    """Standard (two-team) scoreboard side."""

    team_id: int = Field(..., alias="teamId")
    win: bool
    result_label: str = Field(..., alias="resultLabel")
    total_kills: int = Field(0, alias="totalKills")
    total_gold: int = Field(0, alias="totalGold")
    baron_kills: int = Field(0, alias="baronKills")
    dragon_kills: int = Field(0, alias="dragonKills")
    tower_kills: int = Field(0, alias="towerKills")
    show_wards: bool = Field(True, alias="showWards")
    players: List[ScoreboardRow] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ArenaTeamGroup(BaseModel):
    """Arena duo grouped by subteam."""

    subteam_id: int = Field(..., alias="subteamId")
    placement: int
    placement_label: str = Field(..., alias="placementLabel")
    players: List[ScoreboardRow] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class MatchDetailView(BaseModel):
    """Full scoreboard page for one match."""

    match_id: str = Field(..., alias="matchId")
    queue_id: int = Field(..., alias="queueId")
    queue_name: str = Field(..., alias="queueName")
    duration: str
    time_ago: str = Field(..., alias="timeAgo")
    game_mode: str = Field("", alias="gameMode")
    game_version: str = Field("", alias="gameVersion")
    viewer_result: Optional[str] = Field(
        None, alias="viewerResult", description="Victory/Defeat for the viewing player"
    )
    is_arena: bool = Field(False, alias="isArena")
    teams: List[TeamScoreboard] = Field(default_factory=list)
    arena_teams: List[ArenaTeamGroup] = Field(default_factory=list, alias="arenaTeams")

    model_config = ConfigDict(populate_by_name=True)


class MatchDetailState(BaseModel):
    """Snapshot of a match detail load."""

    status: LoadStatus = LoadStatus.IDLE
    error_message: str = Field("", alias="errorMessage")
    match: Optional[MatchDetailView] = None

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
