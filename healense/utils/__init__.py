"""Utility modules for the chat backend."""

from .datetime_utils import utc_now, ensure_utc, to_iso
from .ids import new_sortable_id, new_key
from .encoding import encode_base64_chunked

__all__ = [
    "utc_now",
    "ensure_utc",
    "to_iso",
    "new_sortable_id",
    "new_key",
    "encode_base64_chunked",
]
