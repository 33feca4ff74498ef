"""
Display-ready derived fields for match records.

All functions are pure: KDA labels, kill participation, creep score, the
Arena-aware win flag, performance tags, queue names and time formatting.
"""

import time
from enum import Enum
from typing import Mapping, Optional, Union

from lol_tracker.core.backend_api.models import MatchSummaryDTO
from lol_tracker.core.enums import QueueId
from lol_tracker.features.assets.urls import (
    augment_icon_url,
    champion_icon_url,
    item_icon_url,
    keystone_icon_url,
    rune_style_icon_url,
    spell_icon_url,
)
from lol_tracker.utils.statistics import kda_ratio, percentage, round_half_up
from .schemas import MatchDisplay

PERFECT_KDA = "Perfect"
DEFAULT_QUEUE_NAME = "Normal"

QUEUE_NAMES: Mapping[int, str] = {
    QueueId.RANKED_SOLO_DUO: "Ranked Solo/Duo",
    QueueId.RANKED_FLEX: "Ranked Flex",
    QueueId.ARAM: "ARAM",
    QueueId.ARENA: "Arena",
}

# Arena placements that count as a win (top half of 8 teams)
ARENA_WIN_PLACEMENTS = range(1, 5)


class PerformanceTag(str, Enum):
    """Badge summarising how a single game went."""

    MVP = "MVP"
    STRONG = "Strong"
    STRUGGLED = "Struggled"
    BALANCED = "Balanced"


def queue_name(queue_id: int) -> str:
    """Display name for a queue; unmapped queues are "Normal"."""
    return QUEUE_NAMES.get(queue_id, DEFAULT_QUEUE_NAME)


def is_arena(queue_id: int) -> bool:
    """Whether the queue is the placement-based Arena mode."""
    return queue_id == QueueId.ARENA


def is_win(record: object, queue_id: Optional[int] = None) -> bool:
    """
    Win flag that understands Arena.

    Arena games have no two-team win flag: placements 1-4 count as wins and
    the raw ``win`` field is ignored. Every other queue uses ``win``.

    :param record: Anything with ``win`` and ``placement`` attributes
    :param queue_id: Queue of the match; read from ``record.queue_id`` if omitted
    """
    if queue_id is None:
        queue_id = getattr(record, "queue_id", 0)
    if is_arena(queue_id):
        return getattr(record, "placement", 0) in ARENA_WIN_PLACEMENTS
    return bool(getattr(record, "win", False))


def kda_label(
    kills: int, deaths: int, assists: int, digits: int = 2
) -> Union[str, float]:
    """KDA rounded for display, or "Perfect" when there were no deaths."""
    if deaths == 0:
        return PERFECT_KDA
    return round_half_up((kills + assists) / deaths, digits)


def kill_participation(kills: int, assists: int, team_total_kills: int) -> int:
    """Percentage of team kills the player took part in; 0 if the team had none."""
    if team_total_kills <= 0:
        return 0
    return percentage(kills + assists, team_total_kills)


def creep_score(total_minions_killed: int, neutral_minions_killed: int) -> int:
    """Lane minions plus jungle monsters."""
    return total_minions_killed + neutral_minions_killed


def performance_tag(
    kills: int,
    deaths: int,
    assists: int,
    participation: int,
    win: bool,
) -> Optional[PerformanceTag]:
    """
    Tag a game by KDA and kill participation.

    Rules are checked in order and the first match wins. A deathless game
    counts its KDA as kills + assists.
    """
    kda = kda_ratio(kills, deaths, assists)

    if kda >= 5 and participation >= 60:
        return PerformanceTag.MVP
    if kda >= 3.5 or (kda >= 2.5 and participation >= 55):
        return PerformanceTag.STRONG
    if kda < 1 or (deaths >= 8 and kda < 1.5):
        return PerformanceTag.STRUGGLED
    if win and kda >= 1.5 and participation >= 35:
        return PerformanceTag.BALANCED
    return None


def format_duration(seconds: int, compact: bool = False) -> str:
    """Game length as "31m 05s", or "31:05" when ``compact``."""
    minutes, secs = divmod(max(int(seconds), 0), 60)
    if compact:
        return f"{minutes}:{secs:02d}"
    return f"{minutes}m {secs:02d}s"


def time_ago(timestamp_ms: int, now_ms: Optional[int] = None) -> str:
    """
    Coarse elapsed time since ``timestamp_ms``: minutes, then hours, then days.

    :param timestamp_ms: Event time in epoch milliseconds
    :param now_ms: Current time in epoch milliseconds (wall clock if None)
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    minutes = max(now_ms - timestamp_ms, 0) // 60_000
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


def placement_label(placement: int) -> str:
    """Ordinal for an Arena placement: 1st, 2nd, 3rd, 4th... Empty when unplaced."""
    if not placement or placement < 1:
        return ""
    if placement == 1:
        return "1st"
    if placement == 2:
        return "2nd"
    if placement == 3:
        return "3rd"
    return f"{placement}th"


def build_match_display(
    match: MatchSummaryDTO,
    image_base: str,
    augment_icons: Optional[Mapping[int, str]] = None,
    now_ms: Optional[int] = None,
) -> MatchDisplay:
    """
    Derive every display field for one match summary.

    :param match: Match from the player's perspective
    :param image_base: Versioned image base from ``ddragon_image_base``
    :param augment_icons: Augment ID to icon URL table (Arena only)
    :param now_ms: Reference time for the time-ago label
    """
    won = is_win(match)
    participation = kill_participation(
        match.kills, match.assists, match.team_total_kills
    )
    arena = is_arena(match.queue_id)
    tag = performance_tag(match.kills, match.deaths, match.assists, participation, won)
    icons = augment_icons or {}

    return MatchDisplay(
        match_id=match.match_id,
        champion_name=match.champion_name,
        champion_icon_url=champion_icon_url(match.champion_name, image_base),
        queue_name=queue_name(match.queue_id),
        is_arena=arena,
        is_win=won,
        result_label=(
            placement_label(match.placement)
            if arena
            else ("Victory" if won else "Defeat")
        ),
        kills=match.kills,
        deaths=match.deaths,
        assists=match.assists,
        kda=kda_label(match.kills, match.deaths, match.assists),
        kill_participation=participation,
        cs=creep_score(match.total_minions_killed, match.neutral_minions_killed),
        performance_tag=tag.value if tag else None,
        duration=format_duration(match.game_duration_sec),
        time_ago=time_ago(match.game_end_timestamp, now_ms),
        item_icon_urls=[item_icon_url(item, image_base) for item in match.items],
        spell_icon_urls=[
            spell_icon_url(match.summoner1_id, image_base),
            spell_icon_url(match.summoner2_id, image_base),
        ],
        keystone_icon_url=keystone_icon_url(match.primary_rune_id),
        secondary_style_icon_url=rune_style_icon_url(match.secondary_rune_style_id),
        augment_icon_urls=[augment_icon_url(a, icons) for a in match.augments] if arena else [],
        placement=match.placement,
        allies=match.allies,
        enemies=match.enemies,
    )
