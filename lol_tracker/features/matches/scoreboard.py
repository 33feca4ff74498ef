"""
Scoreboard model for the match detail page.

Standard queues are laid out as one table per team; Arena groups its sixteen
players into duos by ``playerSubteamId`` ordered by placement.
"""

from itertools import groupby
from typing import Dict, List, Optional, Sequence

from lol_tracker.core.backend_api.models import (
    MatchDetailDTO,
    MatchDetailParticipantDTO,
    MatchTeamDTO,
)
from lol_tracker.core.enums import QueueId
from lol_tracker.features.assets.urls import champion_icon_url, item_icon_url
from lol_tracker.utils.statistics import round_half_up
from .display import (
    creep_score,
    format_duration,
    is_arena,
    is_win,
    kda_label,
    placement_label,
    queue_name,
    time_ago,
)
from .schemas import (
    ArenaTeamGroup,
    MatchDetailView,
    ScoreboardRow,
    TeamScoreboard,
)

# Groups without a placement sort after every placed duo
UNPLACED_SORT_KEY = 99


def largest_multi_kill(participant: MatchDetailParticipantDTO) -> Optional[str]:
    if participant.penta_kills > 0:
        return "PENTA"
    if participant.quadra_kills > 0:
        return "QUADRA"
    if participant.triple_kills > 0:
        return "TRIPLE"
    if participant.double_kills > 0:
        return "DOUBLE"
    return None


def _max_damage(participants: Sequence[MatchDetailParticipantDTO]) -> int:
    return max([p.total_damage_dealt_to_champions for p in participants] + [1])


def build_scoreboard_row(
    participant: MatchDetailParticipantDTO,
    image_base: str,
    max_damage: int,
    viewer_puuid: Optional[str] = None,
    show_wards: bool = True,
) -> ScoreboardRow:
    """One scoreboard line; ward columns are left empty when hidden."""
    damage = participant.total_damage_dealt_to_champions
    return ScoreboardRow(
        puuid=participant.puuid,
        summoner_name=participant.summoner_name,
        riot_id_tagline=participant.riot_id_tagline,
        champion_name=participant.champion_name,
        champion_icon_url=champion_icon_url(participant.champion_name, image_base),
        champion_level=participant.champion_level,
        kills=participant.kills,
        deaths=participant.deaths,
        assists=participant.assists,
        kda=kda_label(participant.kills, participant.deaths, participant.assists, digits=1),
        damage=damage,
        damage_share=round_half_up(100 * damage / max(max_damage, 1), 1),
        gold=participant.gold_earned,
        cs=creep_score(
            participant.total_minions_killed, participant.neutral_minions_killed
        ),
        wards_placed=participant.wards_placed if show_wards else None,
        wards_killed=participant.wards_killed if show_wards else None,
        control_wards=participant.vision_wards_bought_in_game if show_wards else None,
        item_icon_urls=[item_icon_url(item, image_base) for item in participant.items],
        largest_multi_kill=largest_multi_kill(participant),
        is_me=bool(viewer_puuid) and participant.puuid == viewer_puuid,
    )


def _teams_for(detail: MatchDetailDTO) -> List[MatchTeamDTO]:
    """Teams as reported, or derived from participants when the list is missing."""
    if detail.teams:
        return list(detail.teams)
    derived: Dict[int, MatchTeamDTO] = {}
    for p in detail.participants:
        if p.team_id not in derived:
            derived[p.team_id] = MatchTeamDTO(team_id=p.team_id, win=p.win)
    return [derived[team_id] for team_id in sorted(derived)]


def build_team_scoreboards(
    detail: MatchDetailDTO, image_base: str, viewer_puuid: Optional[str] = None
) -> List[TeamScoreboard]:
    """One scoreboard per team, in the order the match lists its teams."""
    show_wards = detail.queue_id != QueueId.ARAM
    boards: List[TeamScoreboard] = []

    for team in _teams_for(detail):
        members = [p for p in detail.participants if p.team_id == team.team_id]
        max_damage = _max_damage(members)
        boards.append(
            TeamScoreboard(
                team_id=team.team_id,
                win=team.win,
                result_label="Victory" if team.win else "Defeat",
                total_kills=sum(p.kills for p in members),
                total_gold=sum(p.gold_earned for p in members),
                baron_kills=team.objectives.baron_kills,
                dragon_kills=team.objectives.dragon_kills,
                tower_kills=team.objectives.tower_kills,
                show_wards=show_wards,
                players=[
                    build_scoreboard_row(p, image_base, max_damage, viewer_puuid, show_wards)
                    for p in members
                ],
            )
        )
    return boards


def build_arena_groups(
    detail: MatchDetailDTO, image_base: str, viewer_puuid: Optional[str] = None
) -> List[ArenaTeamGroup]:
    """Arena duos grouped by subteam and ordered 1st to 8th."""
    max_damage = _max_damage(detail.participants)

    def subteam(p: MatchDetailParticipantDTO) -> int:
        return p.player_subteam_id or 0

    groups: List[ArenaTeamGroup] = []
    for subteam_id, members_iter in groupby(
        sorted(detail.participants, key=subteam), key=subteam
    ):
        members = list(members_iter)
        placement = members[0].placement or 0
        groups.append(
            ArenaTeamGroup(
                subteam_id=subteam_id,
                placement=placement,
                placement_label=placement_label(placement),
                players=[
                    build_scoreboard_row(p, image_base, max_damage, viewer_puuid)
                    for p in members
                ],
            )
        )

    groups.sort(key=lambda g: g.placement or UNPLACED_SORT_KEY)
    return groups


def build_match_detail_view(
    detail: MatchDetailDTO,
    image_base: str,
    viewer_puuid: Optional[str] = None,
    now_ms: Optional[int] = None,
) -> MatchDetailView:
    """
    Assemble the full match page.

    :param detail: Match as returned by the backend
    :param image_base: Versioned image base
    :param viewer_puuid: Player who opened the match, highlighted on the board
    :param now_ms: Reference time for the time-ago label
    """
    arena = is_arena(detail.queue_id)
    viewer = next(
        (p for p in detail.participants if viewer_puuid and p.puuid == viewer_puuid),
        None,
    )
    viewer_result = None
    if viewer is not None:
        viewer_result = "Victory" if is_win(viewer, detail.queue_id) else "Defeat"

    return MatchDetailView(
        match_id=detail.match_id,
        queue_id=detail.queue_id,
        queue_name=queue_name(detail.queue_id),
        duration=format_duration(detail.game_duration_sec),
        time_ago=time_ago(detail.game_end_timestamp, now_ms),
        game_mode=detail.game_mode,
        game_version=detail.game_version,
        viewer_result=viewer_result,
        is_arena=arena,
        teams=[] if arena else build_team_scoreboards(detail, image_base, viewer_puuid),
        arena_teams=build_arena_groups(detail, image_base, viewer_puuid) if arena else [],
    )
