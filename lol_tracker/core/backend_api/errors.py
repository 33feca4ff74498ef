"""Custom error classes for the backend API client."""

from typing import Optional, Dict, Any


class BackendAPIError(Exception):
    """Base exception for backend API errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize BackendAPIError.

        Args:
            message: User-facing error message extracted from the response
            status_code: HTTP status code, None for transport failures
            response_data: Decoded JSON error body when there was one
        """
        super().__init__(message)
        self.status_code: Optional[int] = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.message: str = message

    def __str__(self) -> str:
        """Return the message as shown to the user."""
        return self.message


class BadRequestError(BackendAPIError):
    """Bad request (400) - invalid parameters or duplicate favorite."""

    pass


class NotFoundError(BackendAPIError):
    """Not found (404) - unknown player, match or favorite."""

    pass


class ConflictError(BackendAPIError):
    """Conflict (409) - resource already exists."""

    pass


class ServiceUnavailableError(BackendAPIError):
    """Server error (5xx) - backend or upstream Riot API failing."""

    pass


class TransportError(BackendAPIError):
    """Network failure before any HTTP status was received."""

    pass


class UnexpectedResponseError(BackendAPIError):
    """Successful status with a body that is not valid JSON."""

    pass


def error_for_status(
    status_code: int, message: str, response_data: Optional[Dict[str, Any]] = None
) -> BackendAPIError:
    """Pick the BackendAPIError subclass matching an HTTP status code."""
    if status_code == 400:
        return BadRequestError(message, status_code, response_data)
    if status_code == 404:
        return NotFoundError(message, status_code, response_data)
    if status_code == 409:
        return ConflictError(message, status_code, response_data)
    if status_code >= 500:
        return ServiceUnavailableError(message, status_code, response_data)
    return BackendAPIError(message, status_code, response_data)
