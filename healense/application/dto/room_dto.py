from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from ...utils.datetime_utils import to_iso


class RoomCreateRequest(BaseModel):
    """DTO for room creation request"""
    name: str = Field(min_length=1, max_length=200)


class RoomResponse(BaseModel):
    """DTO for room response"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_id: str
    name: str
    owner: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return to_iso(value)
