# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomResponse
from .get_room import to_room_response


class ListRoomsUseCase:
    """Use case for listing the rooms of a user, most recently active first"""

    def __init__(self, room_repository: RoomRepository) -> None:
        self.room_repository = room_repository

    async def execute(self, owner: str) -> List[RoomResponse]:
        rooms = await self.room_repository.find_by_owner(owner)
        rooms = sorted(rooms, key=lambda room: (room.updated_at, room.room_id), reverse=True)
        return [to_room_response(room) for room in rooms]
