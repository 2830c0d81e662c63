# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.session_repository import SessionRepository


class LogoutUserUseCase:
    """Use case for ending a session"""

    def __init__(self, session_repository: SessionRepository) -> None:
        self.session_repository = session_repository

    async def execute(self, session_id: Optional[str]) -> None:
        """
        Delete the session; succeeds even if it is already gone

        Args:
            session_id: Session token to delete
        """
        if not session_id:
            return
        await self.session_repository.delete(session_id)
