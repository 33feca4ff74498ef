"""Favorites API endpoints."""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException

from lol_tracker.core.backend_api.models import FavoritePlayerDTO
from lol_tracker.core.exceptions import FavoriteServiceError
from .dependencies import FavoritesServiceDep

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=List[FavoritePlayerDTO], response_model_by_alias=True)
async def list_favorites(favorites: FavoritesServiceDep):
    """
    List saved favorite players for the home page.

    Returns 502 if the backend cannot be read.
    """
    result = await favorites.list_favorites()
    try:
        return result.unwrap()
    except FavoriteServiceError as e:
        logger.warning("Favorites listing unavailable", error=str(e))
        raise HTTPException(status_code=502, detail=e.message)
