from abc import ABC, abstractmethod
from typing import Optional, List, Tuple
from ..models.message import Message


class MessageRepository(ABC):
    """Repository interface - defines contract for message data access"""

    @abstractmethod
    async def find_by_id(self, message_id: str) -> Optional[Message]:
        """Find message by ID"""
        pass

    @abstractmethod
    async def find_page_by_room(
        self, room_id: str, cursor: Optional[str], limit: int
    ) -> Tuple[List[Message], Optional[str]]:
        """
        Fetch up to `limit` messages of a room with id greater than `cursor`.

        The page content is not guaranteed to be ordered. The returned cursor
        is None when there is nothing after this page.
        """
        pass

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Insert a message"""
        pass
