"""Identifier generation for rooms, messages and images."""
import secrets
import time
import uuid

_last_millis = 0


def new_sortable_id() -> str:
    """
    Mint a time-sortable message id.

    Layout: 12 hex digits of the millisecond clock followed by 16 random hex
    digits, so lexicographic order matches creation order. Within this process
    ids are strictly increasing: a second id in the same millisecond (or after
    the clock steps back) borrows the next millisecond.
    """
    global _last_millis
    millis = time.time_ns() // 1_000_000
    if millis <= _last_millis:
        millis = _last_millis + 1
    _last_millis = millis
    return f"{millis:012x}{secrets.token_hex(8)}"


def new_key() -> str:
    """Random unique key for rooms and images."""
    return uuid.uuid4().hex
