from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CredentialsRequest(BaseModel):
    """DTO for registration and login requests"""
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)


class SessionResponse(BaseModel):
    """DTO for an issued or refreshed session"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str
    username: str
    ttl: int
