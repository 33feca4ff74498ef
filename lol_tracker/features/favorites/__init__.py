"""Favorite players stored by the backend."""

from .service import FavoritesService
from .schemas import FavoriteResult, FavoriteToggleResult

__all__ = ["FavoritesService", "FavoriteResult", "FavoriteToggleResult"]
