# Local application imports
from ....domain.repositories.room_repository import RoomRepository
from ....domain.models.room import Room
from ....core.exceptions import NotFoundError
from ...dto.room_dto import RoomResponse


def to_room_response(room: Room) -> RoomResponse:
    return RoomResponse(
        room_id=room.room_id,
        name=room.name,
        owner=room.owner,
        created_at=room.created_at,
        updated_at=room.updated_at,
    )


class GetRoomUseCase:
    """
    Use case for getting a room by ID.

    No ownership check happens here; callers on the HTTP boundary compare
    the owner with the session user.
    """

    def __init__(self, room_repository: RoomRepository) -> None:
        self.room_repository = room_repository

    async def execute(self, room_id: str) -> RoomResponse:
        """
        Get a room by ID

        Raises:
            NotFoundError: If the room does not exist
        """
        room = await self.room_repository.find_by_id(room_id)
        if room is None:
            raise NotFoundError(f"Room {room_id} not found", user_message="Room not found")
        return to_room_response(room)
