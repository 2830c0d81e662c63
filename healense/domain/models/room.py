# Standard library imports
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Room:
    """
    Pure domain model for a chat room (one conversation thread).

    updated_at is touched by every new message in the room.
    """
    room_id: str
    name: str
    owner: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.room_id:
            raise ValueError("Room ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Room name is required")
        if not self.owner:
            raise ValueError("Room owner is required")
