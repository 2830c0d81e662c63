from .auth_dto import CredentialsRequest, SessionResponse
from .room_dto import RoomCreateRequest, RoomResponse
from .message_dto import ChatMessageRequest, MessageResponse, MessageListResponse
from .image_dto import ImageUploadResponse

__all__ = [
    "CredentialsRequest",
    "SessionResponse",
    "RoomCreateRequest",
    "RoomResponse",
    "ChatMessageRequest",
    "MessageResponse",
    "MessageListResponse",
    "ImageUploadResponse",
]
