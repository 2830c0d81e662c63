"""Constants for Message model field names"""


class MessageFields:
    """Field name constants for Message model"""
    ID = "id"
    ROOM_ID = "room_id"
    ROLE = "role"
    TEXT = "text"
    IMAGE_KEY = "image_key"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"


class MessageRoles:
    """Allowed values for Message.role"""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

    ALL = frozenset({USER, ASSISTANT, SYSTEM})
