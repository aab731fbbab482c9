"""Client-side error types."""
from typing import Any, Mapping, Optional


class DrawValidationError(ValueError):
    """Raised when a draw request lacks a mood or a question."""
    pass


class ApiError(Exception):
    """Raised when a call to the draw service fails."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        payload: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = dict(payload or {})


class ServiceUnavailableError(ApiError):
    """Network failure or timeout; no response was received."""
    pass


class AuthenticationError(ApiError):
    """The service rejected the session token or credentials."""
    pass


class AlreadyDrawnError(ApiError):
    """The account already has a draw for today.

    `payload["card"]` carries the existing draw when the service sent it.
    """
    pass


class QuotaExceededError(ApiError):
    """The account used up its daily draws."""

    @property
    def upgrade_required(self) -> bool:
        return bool(self.payload.get("upgrade_required"))
