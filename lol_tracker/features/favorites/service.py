"""
Favorites service.

Wraps the backend favorites endpoints and reports failures as result values
instead of exceptions so callers can show them and tests can assert on them.
"""

from typing import Optional

import structlog

from lol_tracker.core.backend_api import AccountDTO, BackendAPIClient, BackendAPIError
from lol_tracker.core.enums import Region
from .schemas import FavoriteResult, FavoriteToggleResult

logger = structlog.get_logger(__name__)


class FavoritesService:
    """CRUD over the backend-held favorites list."""

    def __init__(self, client: BackendAPIClient):
        self._client = client

    async def list_favorites(self) -> FavoriteResult:
        """All saved favorites."""
        try:
            favorites = await self._client.list_favorites()
        except BackendAPIError as e:
            logger.warning("Failed to list favorites", error=str(e), status_code=e.status_code)
            return FavoriteResult(ok=False, error=e.message)
        return FavoriteResult(ok=True, favorites=favorites)

    async def is_favorite(self, puuid: str) -> bool:
        """Favorite flag; failures read as False."""
        return await self._client.check_is_favorite(puuid)

    async def add(
        self, puuid: str, game_name: str, tag_line: str, region: Region
    ) -> FavoriteResult:
        """Save a player, then refresh the collection."""
        try:
            await self._client.add_favorite(puuid, game_name, tag_line, region)
        except BackendAPIError as e:
            logger.warning("Failed to add favorite", puuid=puuid, error=str(e))
            return FavoriteResult(ok=False, error=e.message)
        logger.info("Favorite added", puuid=puuid, region=region.value)
        return await self._refreshed()

    async def remove(self, puuid: str) -> FavoriteResult:
        """Remove a player, then refresh the collection."""
        try:
            await self._client.remove_favorite(puuid)
        except BackendAPIError as e:
            logger.warning("Failed to remove favorite", puuid=puuid, error=str(e))
            return FavoriteResult(ok=False, error=e.message)
        logger.info("Favorite removed", puuid=puuid)
        return await self._refreshed()

    async def toggle(
        self, account: AccountDTO, region: Region, currently_favorite: bool
    ) -> FavoriteToggleResult:
        """
        Flip a player's favorite flag.

        On failure ``is_favorite`` keeps its previous value.

        :param account: Player to add or remove
        :param region: Region the player was looked up in
        :param currently_favorite: Flag before the toggle
        """
        if currently_favorite:
            result = await self.remove(account.puuid)
        else:
            result = await self.add(
                account.puuid, account.game_name, account.tag_line, region
            )

        is_favorite = (not currently_favorite) if result.ok else currently_favorite
        return FavoriteToggleResult(
            ok=result.ok,
            is_favorite=is_favorite,
            favorites=result.favorites,
            error=result.error,
        )

    async def _refreshed(self) -> FavoriteResult:
        """Mutation succeeded; attach the fresh list if it can be read."""
        listing = await self.list_favorites()
        favorites: Optional[list] = listing.favorites if listing.ok else None
        return FavoriteResult(ok=True, favorites=favorites)
