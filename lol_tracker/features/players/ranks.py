"""Rank badge model built from ranked queue entries."""

from typing import List, Mapping, Sequence

from lol_tracker.core.backend_api.models import RankedEntryDTO
from lol_tracker.core.enums import Tier
from lol_tracker.features.assets.urls import tier_icon_url
from lol_tracker.utils.statistics import percentage
from .schemas import RankBadge

SOLO_QUEUE = "RANKED_SOLO_5x5"
FLEX_QUEUE = "RANKED_FLEX_SR"

QUEUE_LABELS: Mapping[str, str] = {
    SOLO_QUEUE: "Solo/Duo",
    FLEX_QUEUE: "Flex",
}

# Solo/Duo is shown before Flex
_QUEUE_ORDER = {SOLO_QUEUE: 0, FLEX_QUEUE: 1}


def format_tier(tier: str) -> str:
    """``"GRANDMASTER"`` -> ``"Grandmaster"``."""
    return tier[:1].upper() + tier[1:].lower()


def is_apex_tier(tier: str) -> bool:
    try:
        return Tier(tier.upper()).is_apex
    except ValueError:
        return False


def build_rank_badge(entry: RankedEntryDTO) -> RankBadge:
    games = entry.wins + entry.losses
    division = "" if is_apex_tier(entry.tier) else f" {entry.rank}".rstrip()
    return RankBadge(
        queue_label=QUEUE_LABELS.get(entry.queue_type, entry.queue_type),
        tier_label=f"{format_tier(entry.tier)}{division}",
        tier_icon_url=tier_icon_url(entry.tier),
        league_points=entry.league_points,
        wins=entry.wins,
        losses=entry.losses,
        win_rate=percentage(entry.wins, games),
        ranked=True,
    )


def unranked_badge() -> RankBadge:
    return RankBadge(
        queue_label="Ranked",
        tier_label="Unranked",
        tier_icon_url=tier_icon_url(None),
        ranked=False,
    )


def build_rank_badges(entries: Sequence[RankedEntryDTO]) -> List[RankBadge]:
    """
    Badges for the Solo/Duo and Flex queues, Solo/Duo first.

    Other queues are ignored; a player with neither gets a single
    "Unranked" placeholder.
    """
    relevant = [e for e in entries if e.queue_type in QUEUE_LABELS]
    if not relevant:
        return [unranked_badge()]
    relevant.sort(key=lambda e: _QUEUE_ORDER[e.queue_type])
    return [build_rank_badge(e) for e in relevant]
