"""Match-window statistics aggregation."""

from .aggregator import aggregate_player_stats, aggregate_champions, normalize_server_stats
from .schemas import PlayerStats, ChampionStats

__all__ = [
    "aggregate_player_stats",
    "aggregate_champions",
    "normalize_server_stats",
    "PlayerStats",
    "ChampionStats",
]
