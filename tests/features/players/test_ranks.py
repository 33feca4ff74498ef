"""Tests for rank badge construction."""

from lol_tracker.core.backend_api.models import RankedEntryDTO
from lol_tracker.features.players.ranks import (
    build_rank_badge,
    build_rank_badges,
    format_tier,
    is_apex_tier,
)


def _entry(**overrides):
    data = {
        "queueType": "RANKED_SOLO_5x5",
        "tier": "PLATINUM",
        "rank": "IV",
        "leaguePoints": 75,
        "wins": 21,
        "losses": 19,
    }
    data.update(overrides)
    return RankedEntryDTO.model_validate(data)


def test_format_tier():
    assert format_tier("GRANDMASTER") == "Grandmaster"
    assert format_tier("gold") == "Gold"


def test_is_apex_tier():
    assert is_apex_tier("CHALLENGER")
    assert is_apex_tier("master")
    assert not is_apex_tier("DIAMOND")
    assert not is_apex_tier("UNKNOWN")


def test_badge_fields():
    badge = build_rank_badge(_entry())

    assert badge.queue_label == "Solo/Duo"
    assert badge.tier_label == "Platinum IV"
    assert badge.tier_icon_url.endswith("/platinum.png")
    assert badge.league_points == 75
    assert badge.win_rate == 53
    assert badge.ranked is True


def test_apex_tier_has_no_division():
    assert build_rank_badge(_entry(tier="CHALLENGER", rank="I")).tier_label == "Challenger"


def test_solo_before_flex_and_other_queues_ignored():
    badges = build_rank_badges(
        [
            _entry(queueType="RANKED_FLEX_SR", tier="GOLD", rank="I"),
            _entry(queueType="RANKED_TFT", tier="DIAMOND"),
            _entry(),
        ]
    )

    assert [b.queue_label for b in badges] == ["Solo/Duo", "Flex"]


def test_unranked_placeholder():
    badges = build_rank_badges([_entry(queueType="RANKED_TFT")])

    assert len(badges) == 1
    assert badges[0].tier_label == "Unranked"
    assert badges[0].ranked is False
    assert badges[0].tier_icon_url.endswith("/unranked.png")
