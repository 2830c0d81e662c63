"""
Error taxonomy for the chat backend.

Every error carries an internal ``message`` (logged) and a short
``user_message`` (sent to the client as plain text), plus the HTTP status
the API layer answers with.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class HealenseError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    default_user_message: str = "Internal server error"

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(HealenseError):
    """Raised when a request is malformed or misses a required field."""

    status_code = 400
    default_user_message = "Invalid request"

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


class UnauthorizedError(HealenseError):
    """Raised for missing, expired or invalid sessions and bad credentials."""

    status_code = 401
    default_user_message = "Unauthorized"


class NotFoundError(HealenseError):
    """Raised when a user, room, message or image does not exist."""

    status_code = 404

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


class ConflictError(HealenseError):
    """Raised when registering a username that is already taken."""

    status_code = 409

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class UpstreamError(HealenseError):
    """Raised when the language model call fails."""

    status_code = 502
    default_user_message = "The assistant is unavailable. Please try again."


class InternalError(HealenseError):
    """Raised for unexpected storage or runtime failures."""

    status_code = 500
