"""
Match-window statistics aggregation.

Turns a list of match summaries (most recent first) into overall player stats
and per-champion rollups. Everything here is pure.
"""

from typing import Dict, List, Sequence

from lol_tracker.core.backend_api.models import MatchSummaryDTO, PlayerStatsDTO
from lol_tracker.utils.statistics import (
    kda_ratio,
    percentage,
    round_half_up,
    safe_divide,
)
from .schemas import ChampionStats, PlayerStats

DEFAULT_TOP_CHAMPIONS = 3


def aggregate_player_stats(matches: Sequence[MatchSummaryDTO]) -> PlayerStats:
    """
    Aggregate overall stats for a match window.

    An empty window yields zeroed stats (win rate 0), which callers treat as
    the empty state.

    :param matches: Match summaries, most recent first
    :returns: PlayerStats for the window
    """
    total_games = len(matches)
    wins = sum(1 for m in matches if m.win)
    total_kills = sum(m.kills for m in matches)
    total_deaths = sum(m.deaths for m in matches)
    total_assists = sum(m.assists for m in matches)

    return PlayerStats(
        total_games=total_games,
        wins=wins,
        losses=total_games - wins,
        win_rate=percentage(wins, total_games),
        average_kills=round_half_up(safe_divide(total_kills, total_games), 1),
        average_deaths=round_half_up(safe_divide(total_deaths, total_games), 1),
        average_assists=round_half_up(safe_divide(total_assists, total_games), 1),
        # Summed totals, not a mean of per-match ratios
        average_kda=kda_ratio(total_kills, total_deaths, total_assists),
    )


def normalize_server_stats(server_stats: PlayerStatsDTO) -> PlayerStats:
    """
    Convert backend-computed stats to the same rounding as local aggregation.

    Win rate and losses are derived from the win and game counts; averages are
    rounded to one decimal.
    """
    total_games = server_stats.total_games
    wins = server_stats.wins
    return PlayerStats(
        total_games=total_games,
        wins=wins,
        losses=total_games - wins,
        win_rate=percentage(wins, total_games),
        average_kills=round_half_up(server_stats.average_kills, 1),
        average_deaths=round_half_up(server_stats.average_deaths, 1),
        average_assists=round_half_up(server_stats.average_assists, 1),
        average_kda=server_stats.average_kda,
    )

def aggregate_champions(
    matches: Sequence[MatchSummaryDTO], limit: int = DEFAULT_TOP_CHAMPIONS
) -> List[ChampionStats]:
    """
    Roll matches up per champion and return the most played ones.

    Groups are ordered by games played, descending; ties keep the order in
    which each champion first appears in ``matches``.

    :param matches: Match summaries, most recent first
    :param limit: Number of champions to return
    :returns: Up to ``limit`` ChampionStats
    """
    groups: Dict[str, Dict[str, int]] = {}
    for match in matches:
        group = groups.setdefault(
            match.champion_name,
            {"games": 0, "wins": 0, "kills": 0, "deaths": 0, "assists": 0},
        )
        group["games"] += 1
        group["wins"] += 1 if match.win else 0
        group["kills"] += match.kills
        group["deaths"] += match.deaths
        group["assists"] += match.assists

    ranked = sorted(groups.items(), key=lambda item: item[1]["games"], reverse=True)

    return [
        ChampionStats(
            champion_name=name,
            win_rate=percentage(totals["wins"], totals["games"]),
            kda=kda_ratio(totals["kills"], totals["deaths"], totals["assists"]),
            **totals,
        )
        for name, totals in ranked[:limit]
    ]
