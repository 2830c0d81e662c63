"""Base64 helpers for image payloads."""
import base64

from ..domain.constants.media_constants import BASE64_CHUNK_BYTES


def encode_base64_chunked(data: bytes, chunk_size: int = BASE64_CHUNK_BYTES) -> str:
    """
    Base64-encode `data` in bounded pieces.

    chunk_size must be a multiple of 3: every piece except the last then
    encodes without padding and the pieces join into the same string as a
    single-shot encoding.
    """
    if chunk_size <= 0 or chunk_size % 3 != 0:
        raise ValueError("chunk_size must be a positive multiple of 3")

    view = memoryview(data)
    parts = []
    for start in range(0, len(view), chunk_size):
        parts.append(base64.b64encode(view[start:start + chunk_size]).decode("ascii"))
    return "".join(parts)
