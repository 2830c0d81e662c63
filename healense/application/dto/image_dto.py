from pydantic import BaseModel


class ImageUploadResponse(BaseModel):
    """DTO for a stored image"""
    key: str
