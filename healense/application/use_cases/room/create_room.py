# Local application imports
from ....domain.repositories.room_repository import RoomRepository
from ....domain.models.room import Room
from ....core.exceptions import ValidationError
from ....utils.datetime_utils import utc_now
from ....utils.ids import new_key
from ...dto.room_dto import RoomResponse
from .get_room import to_room_response


class CreateRoomUseCase:
    """Use case for creating a chat room"""

    def __init__(self, room_repository: RoomRepository) -> None:
        self.room_repository = room_repository

    async def execute(self, owner: str, name: str) -> RoomResponse:
        """
        Create a room owned by `owner`

        Args:
            owner: Username of the room owner
            name: Room title

        Returns:
            RoomResponse with createdAt == updatedAt
        """
        if not name or not name.strip():
            raise ValidationError("Room name is required")

        now = utc_now()
        room = Room(
            room_id=new_key(),
            name=name.strip(),
            owner=owner,
            created_at=now,
            updated_at=now,
        )
        saved_room = await self.room_repository.save(room)
        return to_room_response(saved_room)
