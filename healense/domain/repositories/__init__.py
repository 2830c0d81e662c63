from .user_repository import UserRepository
from .session_repository import SessionRepository
from .room_repository import RoomRepository
from .message_repository import MessageRepository
from .image_repository import ImageRepository

__all__ = [
    "UserRepository",
    "SessionRepository",
    "RoomRepository",
    "MessageRepository",
    "ImageRepository",
]
