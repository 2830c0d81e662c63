"""Constants for Session model field names"""


class SessionFields:
    """Field name constants for Session model"""
    SESSION_ID = "session_id"
    USERNAME = "username"
    EXPIRES_AT = "expires_at"

    MONGO_ID = "_id"
