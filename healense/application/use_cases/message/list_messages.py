# Standard library imports
from typing import List, Optional, Tuple

# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.models.message import Message


class ListMessagesUseCase:
    """
    Use case for reading a room's messages in creation order.

    Store pages carry no ordering guarantee, so every page is sorted by the
    sortable id before it leaves this use case.
    """

    def __init__(self, message_repository: MessageRepository, page_size: int = 100) -> None:
        self.message_repository = message_repository
        self.page_size = page_size

    async def execute(self, room_id: str, cursor: Optional[str] = None) -> Tuple[List[Message], Optional[str]]:
        """
        Fetch one page of messages

        Args:
            room_id: The room ID
            cursor: Cursor returned by the previous page, or None for the first

        Returns:
            (messages sorted by id, next cursor or None on the last page)
        """
        messages, next_cursor = await self.message_repository.find_page_by_room(
            room_id, cursor or None, self.page_size
        )
        return sorted(messages, key=lambda message: message.id), next_cursor or None

    async def execute_all(self, room_id: str) -> List[Message]:
        """Follow cursors to the end and return the whole room history"""
        history: List[Message] = []
        cursor: Optional[str] = None
        while True:
            page, cursor = await self.execute(room_id, cursor)
            history.extend(page)
            if cursor is None:
                break
        return sorted(history, key=lambda message: message.id)
