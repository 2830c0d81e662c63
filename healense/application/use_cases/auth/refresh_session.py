# Standard library imports
import logging

# Local application imports
from ....domain.repositories.session_repository import SessionRepository
from ...dto.auth_dto import SessionResponse
from .get_current_session import GetCurrentSessionUseCase
from .login_user import build_session

logger = logging.getLogger(__name__)


class RefreshSessionUseCase:
    """
    Use case for the session heartbeat.

    The token is rotated, not extended: the old token is deleted as soon as
    its replacement is stored.
    """

    def __init__(self, session_repository: SessionRepository, session_ttl_seconds: int) -> None:
        self.session_repository = session_repository
        self.session_ttl_seconds = session_ttl_seconds
        self._resolver = GetCurrentSessionUseCase(session_repository)

    async def execute(self, session_id: str) -> SessionResponse:
        """
        Replace a live session with a new token and a fresh TTL

        Args:
            session_id: Current session token

        Returns:
            SessionResponse with the replacement token

        Raises:
            UnauthorizedError: If the current token is missing or expired
        """
        current = await self._resolver.execute(session_id)

        replacement = await self.session_repository.save(
            build_session(current.username, self.session_ttl_seconds)
        )
        await self.session_repository.delete(current.session_id)
        logger.debug(f"Rotated session for {current.username}")

        return SessionResponse(
            session_id=replacement.session_id,
            username=replacement.username,
            ttl=self.session_ttl_seconds,
        )
