"""Match detail API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from lol_tracker.core.dependencies import RegionDep
from lol_tracker.core.enums import LoadStatus
from .dependencies import MatchDetailLoaderDep
from .schemas import MatchDetailView

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "/{region}/{match_id}",
    response_model=MatchDetailView,
    response_model_by_alias=True,
)
async def get_match_detail(
    region: RegionDep,
    match_id: str,
    loader: MatchDetailLoaderDep,
    puuid: Optional[str] = Query(
        None, description="Viewing player's PUUID, highlights their row"
    ),
):
    """Full scoreboard for one match."""
    state = await loader.load(match_id, region, puuid) or loader.state
    if state.status == LoadStatus.ERROR or state.match is None:
        raise HTTPException(
            status_code=loader.error_status or 502, detail=state.error_message
        )
    return state.match
