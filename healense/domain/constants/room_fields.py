"""Constants for Room model field names"""


class RoomFields:
    """Field name constants for Room model"""
    ROOM_ID = "room_id"
    NAME = "name"
    OWNER = "owner"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    MONGO_ID = "_id"
