from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .room_provider import RoomProvider
from .image_provider import ImageProvider
from .chat_provider import ChatProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "RoomProvider",
    "ImageProvider",
    "ChatProvider",
]
