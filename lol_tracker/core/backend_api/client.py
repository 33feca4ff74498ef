"""Backend API HTTP client with error-message extraction and shape coercion."""

import asyncio
from typing import Optional, Dict, Any, List, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from lol_tracker.core.config import get_global_settings
from lol_tracker.core.enums import Region
from lol_tracker.core.validation import coerce_list, parse_list_items
from .endpoints import BackendAPIEndpoints
from .errors import (
    BackendAPIError,
    TransportError,
    UnexpectedResponseError,
    error_for_status,
)
from .models import (
    AccountDTO,
    MatchSummaryDTO,
    PlayerStatsDTO,
    RankedEntryDTO,
    MatchDetailDTO,
    FavoritePlayerDTO,
)

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

UNKNOWN_NETWORK_ERROR = "An unknown network error occurred."


def read_error_message(response: httpx.Response) -> str:
    """
    Extract the user-facing message from a non-2xx response.

    JSON bodies yield ``message`` or ``error``; other bodies yield their text.
    """
    try:
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            body = response.json()
            if isinstance(body, dict):
                message = body.get("message") or body.get("error")
                if message:
                    return str(message)
            return f"Error {response.status_code}: {response.reason_phrase}"
        return response.text or f"Status {response.status_code}"
    except (ValueError, httpx.HTTPError):
        return UNKNOWN_NETWORK_ERROR


class BackendAPIClient:
    """Async client for the match-history backend API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize backend API client.

        Args:
            base_url: Backend base URL (uses config if None)
            timeout: Request timeout in seconds (uses config if None)
            transport: Optional httpx transport, mainly for tests
        """
        settings = get_global_settings()
        self.base_url = (base_url or settings.backend_base_url).rstrip("/")
        self.timeout = timeout or settings.backend_timeout_seconds
        self.endpoints = BackendAPIEndpoints()
        self._transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    self.session = httpx.AsyncClient(
                        base_url=self.base_url,
                        timeout=httpx.Timeout(self.timeout),
                        headers={"Accept": "application/json"},
                        transport=self._transport,
                    )
                    logger.info("Backend API client session started", base_url=self.base_url)

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Backend API client session closed")

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Issue one request and decode its JSON body.

        Returns:
            Decoded JSON, or None for an empty successful body

        Raises:
            TransportError: Network failure
            BackendAPIError: Non-2xx status (subclass chosen by status)
            UnexpectedResponseError: 2xx body that is not JSON
        """
        await self.start_session()
        if self.session is None:
            raise TransportError("Session not initialized")

        try:
            response = await self.session.request(method, path, params=params, json=json)
        except httpx.RequestError as e:
            logger.warning("Backend request failed", method=method, path=path, error=str(e))
            raise TransportError(UNKNOWN_NETWORK_ERROR) from e

        if not response.is_success:
            message = read_error_message(response)
            logger.info(
                "Backend returned error status",
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise error_for_status(response.status_code, message, self._error_body(response))

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedResponseError(
                f"Invalid JSON from {path}", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
        """Decoded JSON error body, if the response carried one."""
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    @staticmethod
    def _validate(model: Type[ModelT], data: Any, what: str) -> ModelT:
        """Validate a single-object response."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise UnexpectedResponseError(f"Unexpected {what} response") from e

    # Account endpoints
    async def get_account(self, game_name: str, tag: str, region: Region) -> AccountDTO:
        """Resolve an account by Riot ID (gameName#tag)."""
        path, params = self.endpoints.account(game_name, tag, region)
        data = await self._request("GET", path, params=params)
        return self._validate(AccountDTO, data, "account")

    # Match endpoints
    async def get_match_summaries(
        self, puuid: str, region: Region, count: int = 10
    ) -> List[MatchSummaryDTO]:
        """Get recent match summaries, most recent first."""
        path, params = self.endpoints.match_summaries(puuid, region, count)
        data = await self._request("GET", path, params=params)
        return parse_list_items(coerce_list(data, "matches"), MatchSummaryDTO, "match summary")

    async def get_match_detail(self, match_id: str, region: Region) -> MatchDetailDTO:
        """Get the full scoreboard for one match."""
        path, params = self.endpoints.match_detail(match_id, region)
        data = await self._request("GET", path, params=params)
        return self._validate(MatchDetailDTO, data, "match detail")

    # Stats / ranked endpoints
    async def get_player_stats(
        self, puuid: str, region: Region, count: int = 10
    ) -> PlayerStatsDTO:
        """Get backend-computed aggregate stats."""
        path, params = self.endpoints.player_stats(puuid, region, count)
        data = await self._request("GET", path, params=params)
        return self._validate(PlayerStatsDTO, data, "stats")

    async def get_ranked_entries(self, puuid: str, region: Region) -> List[RankedEntryDTO]:
        """Get ranked queue standings (empty when unranked)."""
        path, params = self.endpoints.ranked_entries(puuid, region)
        data = await self._request("GET", path, params=params)
        return parse_list_items(coerce_list(data, "ranked"), RankedEntryDTO, "ranked entry")

    # Favorites endpoints
    async def list_favorites(self) -> List[FavoritePlayerDTO]:
        """Get all saved favorites."""
        data = await self._request("GET", self.endpoints.favorites())
        return parse_list_items(coerce_list(data, "favorites"), FavoritePlayerDTO, "favorite")

    async def check_is_favorite(self, puuid: str) -> bool:
        """Favorite flag for a player; any failure reads as not favorited."""
        try:
            data = await self._request("GET", self.endpoints.favorite_check(puuid))
        except BackendAPIError as e:
            logger.debug("Favorite check failed, treating as false", puuid=puuid, error=str(e))
            return False
        return bool(isinstance(data, dict) and data.get("isFavorite"))

    async def add_favorite(
        self, puuid: str, game_name: str, tag_line: str, region: Region
    ) -> FavoritePlayerDTO:
        """Save a player as favorite."""
        body = {
            "puuid": puuid,
            "gameName": game_name,
            "tagLine": tag_line,
            "region": region.value,
        }
        data = await self._request("POST", self.endpoints.favorites(), json=body)
        return self._validate(FavoritePlayerDTO, data, "favorite")

    async def remove_favorite(self, puuid: str) -> None:
        """Remove a player from favorites."""
        await self._request("DELETE", self.endpoints.favorite(puuid))
