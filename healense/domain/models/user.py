from dataclasses import dataclass


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    username: str
    salt: str
    password_hash: str

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.salt:
            raise ValueError("Salt is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
