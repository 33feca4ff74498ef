"""Player page: account lookup, fan-out loading and rank badges."""

from .orchestrator import PlayerDataOrchestrator
from .schemas import PlayerPageState, RankBadge

__all__ = ["PlayerDataOrchestrator", "PlayerPageState", "RankBadge"]
