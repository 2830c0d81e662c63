from .mongo_connection import (
    get_database,
    close_database,
    ensure_indexes,
    get_user_collection,
    get_session_collection,
    get_room_collection,
    get_message_collection,
    get_image_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_session_repository import MongoSessionRepository
from .mongo_room_repository import MongoRoomRepository
from .mongo_message_repository import MongoMessageRepository
from .mongo_image_repository import MongoImageRepository

__all__ = [
    "get_database",
    "close_database",
    "ensure_indexes",
    "get_user_collection",
    "get_session_collection",
    "get_room_collection",
    "get_message_collection",
    "get_image_collection",
    "MongoUserRepository",
    "MongoSessionRepository",
    "MongoRoomRepository",
    "MongoMessageRepository",
    "MongoImageRepository",
]
