"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    ServiceException,
    PlayerLoadError,
    FavoriteServiceError,
    ExternalServiceError,
)
from .enums import Region, Tier, QueueId, LoadStatus
from .validation import coerce_list, parse_list_items, is_empty_or_none

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "PlayerLoadError",
    "FavoriteServiceError",
    "ExternalServiceError",
    # Enums
    "Region",
    "Tier",
    "QueueId",
    "LoadStatus",
    # Validation
    "coerce_list",
    "parse_list_items",
    "is_empty_or_none",
]
