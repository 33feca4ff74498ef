"""Player page API endpoints."""

import structlog
from fastapi import APIRouter, HTTPException

from lol_tracker.core.dependencies import BackendClientDep, RegionDep
from lol_tracker.core.exceptions import PlayerLoadError
from lol_tracker.features.favorites.dependencies import FavoritesServiceDep
from lol_tracker.features.favorites.schemas import (
    FavoriteToggleRequest,
    FavoriteToggleResult,
)
from .dependencies import PlayerOrchestratorDep
from .schemas import PlayerPageState

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/players", tags=["players"])


@router.get(
    "/{region}/{game_name}/{tag}",
    response_model=PlayerPageState,
    response_model_by_alias=True,
)
async def get_player_page(
    region: RegionDep,
    game_name: str,
    tag: str,
    orchestrator: PlayerOrchestratorDep,
):
    """
    Load everything the player page shows for ``game_name#tag``.

    Only account resolution can fail the request; it is answered with the
    backend's status code and message. Any other backend failure degrades to a
    fallback and is listed in ``warnings``.
    """
    await orchestrator.load(region, game_name, tag)
    try:
        return orchestrator.raise_for_error()
    except PlayerLoadError as e:
        raise HTTPException(
            status_code=e.context.get("status_code") or 502, detail=e.message
        )


@router.post(
    "/{region}/{game_name}/{tag}/favorite",
    response_model=FavoriteToggleResult,
    response_model_by_alias=True,
)
async def toggle_favorite(
    region: RegionDep,
    game_name: str,
    tag: str,
    body: FavoriteToggleRequest,
    client: BackendClientDep,
    favorites: FavoritesServiceDep,
):
    """
    Add or remove the player from favorites.

    ``isFavorite`` in the body is the flag the user currently sees; the player
    is removed if it is true and added otherwise.
    """
    account = await client.get_account(game_name, tag, region)
    result = await favorites.toggle(account, region, body.is_favorite)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    logger.info(
        "Favorite toggled", puuid=account.puuid, is_favorite=result.is_favorite
    )
    return result
