# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.repositories.room_repository import RoomRepository
from ....domain.models.message import Message
from ....utils.datetime_utils import utc_now
from ....utils.ids import new_sortable_id

logger = logging.getLogger(__name__)


class AppendMessageUseCase:
    """
    Use case for appending a message to a room.

    Two separate writes: the message, then the room's updated_at. They are
    not atomic; a failure between them leaves a valid message with a stale
    room timestamp.
    """

    def __init__(self, message_repository: MessageRepository, room_repository: RoomRepository) -> None:
        self.message_repository = message_repository
        self.room_repository = room_repository

    async def execute(
        self,
        room_id: str,
        role: str,
        text: str,
        image_key: Optional[str] = None,
        message_id: Optional[str] = None,
    ) -> Message:
        """
        Store a message and touch the parent room

        Args:
            room_id: Room the message belongs to
            role: user, assistant or system
            text: Message text
            image_key: Optional key of an uploaded image
            message_id: Pre-minted sortable id (e.g. the id announced in a stream)

        Returns:
            The stored Message
        """
        now = utc_now()
        message = Message(
            id=message_id or new_sortable_id(),
            room_id=room_id,
            role=role,
            text=text,
            image_key=image_key,
            created_at=now,
        )
        await self.message_repository.save(message)

        room = await self.room_repository.find_by_id(room_id)
        if room is None:
            logger.warning(f"Message {message.id} stored for missing room {room_id}")
            return message

        # updated_at never moves backwards, even if clocks or writers interleave
        if now > room.updated_at:
            room.updated_at = now
            await self.room_repository.save(room)
        return message
