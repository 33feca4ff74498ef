"""Match detail loading with the page-load state machine."""

import asyncio
from typing import Optional

import structlog

from lol_tracker.core.backend_api import BackendAPIClient, BackendAPIError
from lol_tracker.core.enums import LoadStatus, Region
from lol_tracker.core.generation import RequestGeneration
from lol_tracker.features.assets import AssetVersionResolver
from .scoreboard import build_match_detail_view
from .schemas import MatchDetailState

logger = structlog.get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to load match."


class MatchDetailLoader:
    """
    Loads one match scoreboard at a time.

    Starting a new load supersedes the previous one; results of a superseded
    load are dropped when they arrive.
    """

    def __init__(self, client: BackendAPIClient, assets: AssetVersionResolver):
        self._client = client
        self._assets = assets
        self._generation = RequestGeneration()
        self.state = MatchDetailState()
        self.error_status: Optional[int] = None

    async def load(
        self,
        match_id: str,
        region: Region,
        viewer_puuid: Optional[str] = None,
    ) -> Optional[MatchDetailState]:
        """
        Fetch and build the scoreboard for ``match_id``.

        :returns: The published state, or None if a newer load superseded this one
        """
        generation = self._generation.next()
        self.state = MatchDetailState(status=LoadStatus.LOADING)
        self.error_status = None

        try:
            detail, image_base = await asyncio.gather(
                self._client.get_match_detail(match_id, region),
                self._assets.get_image_base(),
            )
        except BackendAPIError as e:
            if not self._generation.is_current(generation):
                logger.debug("Discarding stale match detail failure", match_id=match_id)
                return None
            logger.warning(
                "Match detail load failed",
                match_id=match_id,
                region=region.value,
                status_code=e.status_code,
                error=str(e),
            )
            self.error_status = e.status_code
            self.state = MatchDetailState(
                status=LoadStatus.ERROR,
                error_message=e.message or DEFAULT_ERROR_MESSAGE,
            )
            return self.state

        if not self._generation.is_current(generation):
            logger.debug("Discarding stale match detail", match_id=match_id)
            return None

        self.state = MatchDetailState(
            status=LoadStatus.DONE,
            match=build_match_detail_view(detail, image_base, viewer_puuid),
        )
        return self.state

    def cancel(self) -> None:
        """Drop the results of any in-flight load."""
        self._generation.invalidate()
