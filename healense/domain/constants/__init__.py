"""Constants for domain model field names"""

from .user_fields import UserFields
from .session_fields import SessionFields
from .room_fields import RoomFields
from .message_fields import MessageFields, MessageRoles
from .image_fields import ImageFields

__all__ = [
    "UserFields",
    "SessionFields",
    "RoomFields",
    "MessageFields",
    "MessageRoles",
    "ImageFields",
]
