"""
Player page orchestration.

Loading a player page is a two-step sequence:

1. Resolve the account from ``(game_name, tag, region)``. This is the only
   hard dependency; if it fails the page goes to ``error`` and nothing else
   is requested.
2. With the account's ``puuid``, fetch match summaries, stats, ranked entries
   and the favorite flag concurrently. Each of these falls back on its own
   (empty matches, client-side stats, no ranked entries, not favorited) and
   records a warning instead of failing the page.

Every load takes a generation token; a load superseded by a newer one (the
user navigated to another player) drops its results when they arrive.
"""

import asyncio
from typing import Awaitable, List, Optional, TypeVar

import structlog

from lol_tracker.core.backend_api import BackendAPIClient, BackendAPIError
from lol_tracker.core.config import get_global_settings
from lol_tracker.core.enums import LoadStatus, Region
from lol_tracker.core.exceptions import PlayerLoadError
from lol_tracker.core.generation import RequestGeneration
from lol_tracker.core.validation import is_empty_or_none
from lol_tracker.features.assets import AssetVersionResolver
from lol_tracker.features.assets.urls import profile_icon_url
from lol_tracker.features.favorites import FavoritesService, FavoriteToggleResult
from lol_tracker.features.matches.display import build_match_display, is_arena
from lol_tracker.features.stats import (
    aggregate_champions,
    aggregate_player_stats,
    normalize_server_stats,
)
from .ranks import build_rank_badges
from .schemas import PlayerPageState

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Something went wrong."


class PlayerDataOrchestrator:
    """Coordinates the network calls behind one player page."""

    def __init__(
        self,
        client: BackendAPIClient,
        assets: AssetVersionResolver,
        favorites: Optional[FavoritesService] = None,
        match_count: Optional[int] = None,
    ):
        """
        Initialize the orchestrator.

        :param client: Backend API client
        :param assets: Shared asset resolver
        :param favorites: Favorites service (built on ``client`` if None)
        :param match_count: Match window size (config default if None)
        """
        self._client = client
        self._assets = assets
        self._favorites = favorites or FavoritesService(client)
        self.match_count = match_count or get_global_settings().match_window_size

        self._generation = RequestGeneration()
        self._toggle_generation = RequestGeneration()
        self.state = PlayerPageState()

    async def load(
        self, region: Region, game_name: str, tag: str
    ) -> Optional[PlayerPageState]:
        """
        Load the page for ``game_name#tag`` in ``region``.

        :returns: The published state, or None if a newer load superseded this one
        """
        if is_empty_or_none(game_name) or is_empty_or_none(tag):
            return self.state

        generation = self._generation.next()
        self._toggle_generation.invalidate()
        self.state = PlayerPageState(
            status=LoadStatus.LOADING, region=region, generation=generation
        )
        log = logger.bind(
            game_name=game_name, tag=tag, region=region.value, generation=generation
        )

        try:
            account = await self._client.get_account(game_name, tag, region)
        except BackendAPIError as e:
            log.info("Account lookup failed", status_code=e.status_code, error=str(e))
            return self._publish(
                generation,
                PlayerPageState(
                    status=LoadStatus.ERROR,
                    error_message=e.message or DEFAULT_ERROR_MESSAGE,
                    error_status=e.status_code,
                    region=region,
                    generation=generation,
                ),
            )

        if not self._publish(
            generation, self.state.model_copy(update={"account": account})
        ):
            log.debug("Discarding stale account lookup")
            return None

        warnings: List[str] = []
        (
            matches,
            server_stats,
            ranked,
            is_favorite,
            image_base,
            patch_version,
        ) = await asyncio.gather(
            self._with_fallback(
                "Match history",
                self._client.get_match_summaries(account.puuid, region, self.match_count),
                [],
                warnings,
            ),
            self._with_fallback(
                "Stats",
                self._client.get_player_stats(account.puuid, region, self.match_count),
                None,
                warnings,
            ),
            self._with_fallback(
                "Ranked",
                self._client.get_ranked_entries(account.puuid, region),
                [],
                warnings,
            ),
            self._favorites.is_favorite(account.puuid),
            self._assets.get_image_base(),
            self._assets.get_patch_version(),
        )

        augment_icons = {}
        if any(is_arena(m.queue_id) for m in matches):
            augment_icons = await self._assets.get_augment_icon_table()

        if not self._generation.is_current(generation):
            log.debug("Discarding stale player data")
            return None

        stats = (
            normalize_server_stats(server_stats)
            if server_stats is not None
            else aggregate_player_stats(matches)
        )

        state = PlayerPageState(
            status=LoadStatus.DONE,
            region=region,
            generation=generation,
            account=account,
            profile_icon_url=profile_icon_url(account.profile_icon_id, image_base),
            patch_version=patch_version,
            match_summaries=matches,
            matches=[build_match_display(m, image_base, augment_icons) for m in matches],
            stats=stats,
            top_champions=aggregate_champions(matches),
            ranked_entries=ranked,
            rank_badges=build_rank_badges(ranked),
            is_favorite=is_favorite,
            warnings=warnings,
        )
        log.info(
            "Player page loaded",
            puuid=account.puuid,
            matches=len(matches),
            warnings=len(warnings),
        )
        return self._publish(generation, state)

    def raise_for_error(self) -> PlayerPageState:
        """
        Current state, or PlayerLoadError if the last load failed.

        :raises PlayerLoadError: With ``status_code`` in its context
        """
        if self.state.status == LoadStatus.ERROR:
            raise PlayerLoadError(
                self.state.error_message or DEFAULT_ERROR_MESSAGE,
                operation="load",
                context={
                    "status_code": self.state.error_status,
                    "region": self.state.region.value if self.state.region else None,
                },
            )
        return self.state

    def cancel(self) -> None:
        """Drop the results of any in-flight load or favorite toggle."""
        self._generation.invalidate()
        self._toggle_generation.invalidate()

    async def toggle_favorite(self) -> FavoriteToggleResult:
        """
        Flip the loaded player's favorite flag.

        The flag flips immediately and is restored if the backend call fails.
        Results are ignored if the page or a newer toggle has moved on.
        """
        account = self.state.account
        region = self.state.region
        previous = self.state.is_favorite
        if self.state.status != LoadStatus.DONE or account is None or region is None:
            return FavoriteToggleResult(
                ok=False, is_favorite=previous, error="No player loaded."
            )

        page_generation = self._generation.current
        toggle_generation = self._toggle_generation.next()
        self._set_favorite_flag(not previous)

        result = await self._favorites.toggle(account, region, previous)

        if not (
            self._generation.is_current(page_generation)
            and self._toggle_generation.is_current(toggle_generation)
        ):
            logger.debug("Discarding stale favorite toggle", puuid=account.puuid)
            return result

        if not result.ok:
            logger.warning(
                "Favorite toggle failed", puuid=account.puuid, error=result.error
            )
        self._set_favorite_flag(result.is_favorite)
        return result

    def _set_favorite_flag(self, value: bool) -> None:
        self.state = self.state.model_copy(update={"is_favorite": value})

    def _publish(
        self, generation: int, state: PlayerPageState
    ) -> Optional[PlayerPageState]:
        """Make ``state`` current unless a newer load has started."""
        if not self._generation.is_current(generation):
            return None
        self.state = state
        return state

    async def _with_fallback(
        self, label: str, call: Awaitable[T], default: T, warnings: List[str]
    ) -> T:
        """Await a fan-out call, substituting ``default`` if the backend fails."""
        try:
            return await call
        except BackendAPIError as e:
            logger.warning(
                f"{label} request failed, using fallback",
                status_code=e.status_code,
                error=str(e),
            )
            warnings.append(f"{label} unavailable: {e.message}")
            return default

