from .create_room import CreateRoomUseCase
from .get_room import GetRoomUseCase
from .list_rooms import ListRoomsUseCase

__all__ = [
    "CreateRoomUseCase",
    "GetRoomUseCase",
    "ListRoomsUseCase",
]
