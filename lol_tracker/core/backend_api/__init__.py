"""
Backend API client package.

Async HTTP client for the match-history backend (a thin proxy to the Riot
Games API plus the favorites store), with error-message extraction and
defensive coercion of unexpected payload shapes.
"""

from .client import BackendAPIClient, read_error_message
from .errors import (
    BackendAPIError,
    BadRequestError,
    NotFoundError,
    ConflictError,
    ServiceUnavailableError,
    TransportError,
    UnexpectedResponseError,
)
from .models import (
    AccountDTO,
    MatchParticipantDTO,
    MatchSummaryDTO,
    PlayerStatsDTO,
    RankedEntryDTO,
    MatchDetailParticipantDTO,
    MatchTeamDTO,
    MatchDetailDTO,
    FavoritePlayerDTO,
)
from .endpoints import BackendAPIEndpoints

__all__ = [
    "BackendAPIClient",
    "read_error_message",
    "BackendAPIError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "ServiceUnavailableError",
    "TransportError",
    "UnexpectedResponseError",
    "AccountDTO",
    "MatchParticipantDTO",
    "MatchSummaryDTO",
    "PlayerStatsDTO",
    "RankedEntryDTO",
    "MatchDetailParticipantDTO",
    "MatchTeamDTO",
    "MatchDetailDTO",
    "FavoritePlayerDTO",
    "BackendAPIEndpoints",
]
