"""Dependencies for the favorites feature."""

from typing import Annotated

from fastapi import Depends

from lol_tracker.core.dependencies import BackendClientDep
from .service import FavoritesService


async def get_favorites_service(client: BackendClientDep) -> FavoritesService:
    """Get favorites service instance.

    :param client: Shared backend API client
    :returns: Favorites service
    """
    return FavoritesService(client)


FavoritesServiceDep = Annotated[FavoritesService, Depends(get_favorites_service)]

__all__ = ["get_favorites_service", "FavoritesServiceDep"]
