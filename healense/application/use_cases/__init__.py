from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentSessionUseCase,
    RefreshSessionUseCase,
    LogoutUserUseCase,
)
from .room import (
    CreateRoomUseCase,
    GetRoomUseCase,
    ListRoomsUseCase,
)
from .message import (
    AppendMessageUseCase,
    ListMessagesUseCase,
    GetMessageUseCase,
)
from .image import (
    StoreImageUseCase,
    LoadImageUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentSessionUseCase",
    "RefreshSessionUseCase",
    "LogoutUserUseCase",
    "CreateRoomUseCase",
    "GetRoomUseCase",
    "ListRoomsUseCase",
    "AppendMessageUseCase",
    "ListMessagesUseCase",
    "GetMessageUseCase",
    "StoreImageUseCase",
    "LoadImageUseCase",
]
