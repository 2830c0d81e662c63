# Standard library imports
from typing import Optional, List, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import InternalError
from ...domain.repositories.message_repository import MessageRepository
from ...domain.models.message import Message
from ...domain.constants import MessageFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_message_collection


class MongoMessageRepository(MessageRepository):
    """MongoDB implementation of MessageRepository"""

    def __init__(self, message_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.message_collection = (
            message_collection if message_collection is not None else get_message_collection()
        )

    async def find_by_id(self, message_id: str) -> Optional[Message]:
        if not message_id:
            return None

        try:
            document = await self.message_collection.find_one({MessageFields.ID: message_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding message by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_message(document)

    async def find_page_by_room(
        self, room_id: str, cursor: Optional[str], limit: int
    ) -> Tuple[List[Message], Optional[str]]:
        """
        Fetch one page of a room's messages after `cursor`

        The (room_id, id) index selects the window; one extra document is
        requested to know whether another page follows.

        Args:
            room_id: The room ID
            cursor: Id of the last message of the previous page, or None
            limit: Page size

        Returns:
            (messages, next_cursor) where next_cursor is None on the last page
        """
        query = {MessageFields.ROOM_ID: room_id}
        if cursor:
            query[MessageFields.ID] = {"$gt": cursor}

        try:
            documents = (
                self.message_collection.find(query)
                .sort(MessageFields.ID, ASCENDING)
                .limit(limit + 1)
            )
            messages = []
            async for document in documents:
                messages.append(self._document_to_message(document))
        except PyMongoError as e:
            raise InternalError(f"Error listing messages for room: {str(e)}")

        if len(messages) > limit:
            messages = messages[:limit]
            return messages, messages[-1].id
        return messages, None

    async def save(self, message: Message) -> Message:
        try:
            await self.message_collection.insert_one(self._message_to_dict(message))
        except PyMongoError as e:
            raise InternalError(f"Error saving message: {str(e)}")
        return message

    def _document_to_message(self, document: dict) -> Message:
        return Message(
            id=document[MessageFields.ID],
            room_id=document[MessageFields.ROOM_ID],
            role=document[MessageFields.ROLE],
            text=document.get(MessageFields.TEXT, ""),
            image_key=document.get(MessageFields.IMAGE_KEY),
            created_at=ensure_utc(document.get(MessageFields.CREATED_AT)),
        )

    def _message_to_dict(self, message: Message) -> dict:
        return {
            MessageFields.ID: message.id,
            MessageFields.ROOM_ID: message.room_id,
            MessageFields.ROLE: message.role,
            MessageFields.TEXT: message.text,
            MessageFields.IMAGE_KEY: message.image_key,
            MessageFields.CREATED_AT: message.created_at,
        }
