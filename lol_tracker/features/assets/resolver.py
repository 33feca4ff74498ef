"""
Patch version and augment icon resolution against the public asset CDNs.

One ``AssetVersionResolver`` is built at application start and shared by every
consumer. Each artifact is fetched at most once at a time: concurrent callers
await the same in-flight task. Successful results are kept for the lifetime
of the resolver; failures never raise and are retried on the next call.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx
import structlog

from lol_tracker.core.config import Settings, get_global_settings
from lol_tracker.core.exceptions import ExternalServiceError
from .urls import augment_cdn_url, ddragon_image_base

logger = structlog.get_logger(__name__)


class AssetVersionResolver:
    """Memoized, request-coalescing resolver for CDN asset metadata."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the resolver.

        :param settings: Settings providing CDN URLs and the fallback version
        :param http_client: Shared httpx client; one is created (and owned) if None
        """
        self.settings = settings or get_global_settings()
        self._client = http_client
        self._owns_client = http_client is None

        self._patch_version: Optional[str] = None
        self._last_known_version: Optional[str] = None
        self._augment_table: Optional[Dict[int, str]] = None

        self._version_task: Optional[asyncio.Task] = None
        self._augment_task: Optional[asyncio.Task] = None

    async def get_patch_version(self) -> str:
        """
        Latest game-data patch version, e.g. ``"15.3.1"``.

        Falls back to the last fetched version, then to the configured
        fallback, when the CDN cannot be reached.
        """
        if self._patch_version is not None:
            return self._patch_version
        if self._version_task is None:
            self._version_task = asyncio.create_task(self._resolve_patch_version())
        return await asyncio.shield(self._version_task)

    async def get_augment_icon_table(self) -> Dict[int, str]:
        """
        Augment ID to icon URL table for Arena matches.

        Returns an empty table when the metadata cannot be fetched; callers
        treat missing keys as "icon unavailable".
        """
        if self._augment_table is not None:
            return self._augment_table
        if self._augment_task is None:
            self._augment_task = asyncio.create_task(self._resolve_augment_table())
        return await asyncio.shield(self._augment_task)

    async def get_image_base(self) -> str:
        """Versioned image root for champion, item, spell and profile icons."""
        version = await self.get_patch_version()
        return ddragon_image_base(version, self.settings.ddragon_cdn_url)

    def invalidate(self) -> None:
        """Forget cached artifacts so the next call fetches again."""
        logger.info("Asset cache invalidated", patch_version=self._patch_version)
        self._patch_version = None
        self._augment_table = None
        self._version_task = None
        self._augment_task = None

    async def close(self) -> None:
        """Close the HTTP client if this resolver created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def _resolve_patch_version(self) -> str:
        try:
            payload = await self._get_json(self.settings.ddragon_versions_url)
            version = self._latest_version(payload)
        except (httpx.HTTPError, ValueError, ExternalServiceError) as e:
            if self._version_task is asyncio.current_task():
                self._version_task = None
            fallback = self._last_known_version or self.settings.fallback_patch_version
            logger.warning(
                "Patch version fetch failed, using fallback",
                fallback=fallback,
                error=str(e),
            )
            return fallback

        self._patch_version = version
        self._last_known_version = version
        logger.info("Patch version resolved", patch_version=version)
        return version

    async def _resolve_augment_table(self) -> Dict[int, str]:
        try:
            payload = await self._get_json(self.settings.augments_url)
            table = self._build_augment_table(payload)
        except (httpx.HTTPError, ValueError, ExternalServiceError) as e:
            if self._augment_task is asyncio.current_task():
                self._augment_task = None
            logger.warning("Augment metadata fetch failed", error=str(e))
            return {}

        self._augment_table = table
        logger.info("Augment icon table resolved", augments=len(table))
        return table

    async def _get_json(self, url: str) -> Any:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(10.0))
            self._owns_client = True
        response = await self._client.get(url)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _latest_version(payload: Any) -> str:
        """The versions endpoint lists newest first."""
        if not isinstance(payload, list) or not payload or not isinstance(payload[0], str):
            raise ExternalServiceError(
                "versions list is empty or malformed",
                service_name="ddragon",
                operation="get_patch_version",
            )
        return payload[0]

    def _build_augment_table(self, payload: Any) -> Dict[int, str]:
        if not isinstance(payload, list):
            raise ExternalServiceError(
                "augment metadata is not a list",
                service_name="communitydragon",
                operation="get_augment_icon_table",
            )
        table: Dict[int, str] = {}
        for entry in payload:
            if not isinstance(entry, dict):
                continue
            augment_id = entry.get("id")
            icon_path = entry.get("augmentSmallIconPath")
            if isinstance(augment_id, int) and icon_path:
                table[augment_id] = augment_cdn_url(
                    icon_path, self.settings.community_dragon_base_url
                )
        return table
