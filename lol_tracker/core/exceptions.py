"""
Service layer custom exceptions.

Service-level failures carry the operation that failed and the lookup context
(puuid, region, match id) so log lines and error responses stay actionable.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class PlayerLoadError(ServiceException):
    """Raised when a player page cannot be loaded (account resolution failed)."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            service="PlayerDataOrchestrator",
            operation=operation,
            context=context,
            original_error=original_error,
        )


class FavoriteServiceError(ServiceException):
    """Raised by FavoritesService callers that want exceptions instead of results."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            service="FavoritesService",
            operation=operation,
            context=context,
            original_error=original_error,
        )


class ExternalServiceError(ServiceException):
    """Exception raised when an external collaborator (asset CDN) misbehaves."""

    def __init__(
        self,
        message: str,
        service_name: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"{service_name}: {message}",
            service=service_name,
            operation=operation,
            context=context,
            original_error=original_error,
        )
        self.service_name = service_name
