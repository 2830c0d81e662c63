# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..constants import MessageRoles


@dataclass(frozen=True)
class Message:
    """
    Pure domain model for one chat message.

    Messages are immutable. The id is time-sortable and defines the order of
    messages within a room.
    """
    id: str
    room_id: str
    role: str
    text: str
    image_key: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Message ID is required")
        if not self.room_id:
            raise ValueError("Room ID is required")
        if self.role not in MessageRoles.ALL:
            raise ValueError(f"Invalid message role: {self.role}")
