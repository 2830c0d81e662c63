# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import (
    UserFields,
    SessionFields,
    RoomFields,
    MessageFields,
    ImageFields,
)

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        _mongo_database = None
        logger.info("Closed MongoDB client")


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_session_collection() -> AsyncIOMotorCollection:
    """
    Get sessions collection from MongoDB

    Returns:
        MongoDB collection for sessions
    """
    return get_database()["sessions"]


def get_room_collection() -> AsyncIOMotorCollection:
    """
    Get rooms collection from MongoDB

    Returns:
        MongoDB collection for rooms
    """
    return get_database()["rooms"]


def get_message_collection() -> AsyncIOMotorCollection:
    """
    Get messages collection from MongoDB

    Returns:
        MongoDB collection for messages
    """
    return get_database()["messages"]


def get_image_collection() -> AsyncIOMotorCollection:
    """
    Get images collection from MongoDB

    Returns:
        MongoDB collection holding both raw and base64 image documents
    """
    return get_database()["images"]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    The TTL index on sessions.expires_at lets MongoDB sweep expired sessions in
    the background; reads still check expiry themselves.
    """
    await get_user_collection().create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
    await get_session_collection().create_index([(SessionFields.SESSION_ID, ASCENDING)], unique=True)
    await get_session_collection().create_index([(SessionFields.EXPIRES_AT, ASCENDING)], expireAfterSeconds=0)
    await get_room_collection().create_index([(RoomFields.ROOM_ID, ASCENDING)], unique=True)
    await get_room_collection().create_index(
        [(RoomFields.OWNER, ASCENDING), (RoomFields.UPDATED_AT, DESCENDING)]
    )
    await get_message_collection().create_index([(MessageFields.ID, ASCENDING)], unique=True)
    await get_message_collection().create_index(
        [(MessageFields.ROOM_ID, ASCENDING), (MessageFields.ID, ASCENDING)]
    )
    await get_image_collection().create_index([(ImageFields.KEY, ASCENDING)], unique=True)
    logger.info("MongoDB indexes ensured")
