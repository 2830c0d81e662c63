"""
Shared constants for image uploads.

Used by the image use case and the image repository.
"""

# Any image/* content type is accepted
IMAGE_MIME_PREFIX = "image/"

# Bytes per base64 encoding step; a multiple of 3 so encoded pieces concatenate cleanly
BASE64_CHUNK_BYTES = 3 * 32 * 1024

DEFAULT_IMAGE_MIME = "application/octet-stream"
