"""Constants for Image model field names"""


class ImageFields:
    """Field name constants for stored image documents"""
    KEY = "key"
    MIME_TYPE = "mime_type"
    DATA = "data"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"

    # Suffix of the key holding the raw bytes; the bare key holds base64
    RAW_SUFFIX = "/raw"
