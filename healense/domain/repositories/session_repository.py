from abc import ABC, abstractmethod
from typing import Optional
from ..models.session import Session


class SessionRepository(ABC):
    """Repository interface - defines contract for session data access"""

    @abstractmethod
    async def find_by_id(self, session_id: str) -> Optional[Session]:
        """Find an unexpired session by its token; expired sessions are None"""
        pass

    @abstractmethod
    async def save(self, session: Session) -> Session:
        """Save session (whole-record overwrite)"""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Delete session; no-op if absent"""
        pass
