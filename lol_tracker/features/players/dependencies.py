"""Dependencies for the players feature.

Each request gets its own orchestrator; the backend client and asset resolver
behind it are process-wide singletons.
"""

from typing import Annotated

from fastapi import Depends

from lol_tracker.core.dependencies import BackendClientDep
from lol_tracker.features.assets.dependencies import AssetResolverDep
from lol_tracker.features.favorites.dependencies import FavoritesServiceDep
from .orchestrator import PlayerDataOrchestrator


async def get_player_orchestrator(
    client: BackendClientDep,
    assets: AssetResolverDep,
    favorites: FavoritesServiceDep,
) -> PlayerDataOrchestrator:
    """Get player page orchestrator instance.

    :param client: Shared backend API client
    :param assets: Shared asset resolver
    :param favorites: Favorites service
    :returns: Orchestrator for one player page load
    """
    return PlayerDataOrchestrator(client, assets, favorites)


PlayerOrchestratorDep = Annotated[
    PlayerDataOrchestrator, Depends(get_player_orchestrator)
]

__all__ = ["get_player_orchestrator", "PlayerOrchestratorDep"]
