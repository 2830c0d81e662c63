# Standard library imports
from typing import Optional, List

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import InternalError
from ...domain.repositories.room_repository import RoomRepository
from ...domain.models.room import Room
from ...domain.constants import RoomFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_room_collection


class MongoRoomRepository(RoomRepository):
    """MongoDB implementation of RoomRepository"""

    def __init__(self, room_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.room_collection = room_collection if room_collection is not None else get_room_collection()

    async def find_by_id(self, room_id: str) -> Optional[Room]:
        """
        Find room by ID

        Args:
            room_id: The room ID to find

        Returns:
            Room domain model if found, None otherwise
        """
        if not room_id:
            return None

        try:
            document = await self.room_collection.find_one({RoomFields.ROOM_ID: room_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding room by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_room(document)

    async def find_by_owner(self, owner: str) -> List[Room]:
        """
        Find all rooms owned by a user

        Args:
            owner: The owner's username

        Returns:
            List of Room domain models
        """
        if not owner:
            return []

        try:
            cursor = self.room_collection.find({RoomFields.OWNER: owner})
            rooms = []
            async for document in cursor:
                rooms.append(self._document_to_room(document))
            return rooms
        except PyMongoError as e:
            raise InternalError(f"Error listing rooms for owner: {str(e)}")

    async def save(self, room: Room) -> Room:
        """
        Save room (create new or overwrite existing)

        Args:
            room: Room domain model to save

        Returns:
            The saved Room
        """
        try:
            await self.room_collection.replace_one(
                {RoomFields.ROOM_ID: room.room_id},
                self._room_to_dict(room),
                upsert=True,
            )
        except PyMongoError as e:
            raise InternalError(f"Error saving room: {str(e)}")
        return room

    def _document_to_room(self, document: dict) -> Room:
        return Room(
            room_id=document[RoomFields.ROOM_ID],
            name=document.get(RoomFields.NAME, ""),
            owner=document.get(RoomFields.OWNER, ""),
            created_at=ensure_utc(document.get(RoomFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(RoomFields.UPDATED_AT)),
        )

    def _room_to_dict(self, room: Room) -> dict:
        return {
            RoomFields.ROOM_ID: room.room_id,
            RoomFields.NAME: room.name,
            RoomFields.OWNER: room.owner,
            RoomFields.CREATED_AT: room.created_at,
            RoomFields.UPDATED_AT: room.updated_at,
        }
