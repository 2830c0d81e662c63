from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.room import Room


class RoomRepository(ABC):
    """Repository interface - defines contract for room data access"""

    @abstractmethod
    async def find_by_id(self, room_id: str) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    async def find_by_owner(self, owner: str) -> List[Room]:
        """Find all rooms owned by a user, in no particular order"""
        pass

    @abstractmethod
    async def save(self, room: Room) -> Room:
        """Save room (create or overwrite)"""
        pass
