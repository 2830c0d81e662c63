# Standard library imports
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Session:
    """
    Pure domain model for an authenticated session.

    The session id is an opaque token; the username is a weak reference to a
    User (lookup only).
    """
    session_id: str
    username: str
    expires_at: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.session_id:
            raise ValueError("Session ID is required")
        if not self.username:
            raise ValueError("Username is required")

    def is_expired(self, at: datetime) -> bool:
        return self.expires_at <= at
