# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.session_repository import SessionRepository
from ....domain.models.session import Session
from ....core.exceptions import UnauthorizedError


class GetCurrentSessionUseCase:
    """Use case for resolving the session behind a session cookie"""

    def __init__(self, session_repository: SessionRepository) -> None:
        self.session_repository = session_repository

    async def execute(self, session_id: Optional[str]) -> Session:
        """
        Resolve a session token

        Args:
            session_id: Token from the sessionId cookie

        Returns:
            The live Session

        Raises:
            UnauthorizedError: If the token is missing, unknown or expired
        """
        if not session_id:
            raise UnauthorizedError("Missing session cookie")

        session = await self.session_repository.find_by_id(session_id)
        if session is None:
            raise UnauthorizedError("Unknown or expired session")
        return session
