from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatMessageRequest(BaseModel):
    """Request model for one chat turn"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_id: str = Field(min_length=1)
    content: str = ""
    image_key: Optional[str] = None


class MessageResponse(BaseModel):
    """DTO for a stored message"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    room_id: str
    role: str
    text: str
    image_key: Optional[str] = None


class MessageListResponse(BaseModel):
    """One page of message ids in creation order"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message_ids: List[str]
    cursor: Optional[str] = None
