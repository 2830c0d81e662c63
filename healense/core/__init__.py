from .config import Settings, get_settings
from .security import (
    generate_salt,
    hash_password,
    verify_password,
    generate_session_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "generate_salt",
    "hash_password",
    "verify_password",
    "generate_session_token",
]
