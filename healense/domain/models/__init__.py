from .user import User
from .session import Session
from .room import Room
from .message import Message
from .image import ImageBase64

__all__ = ["User", "Session", "Room", "Message", "ImageBase64"]
