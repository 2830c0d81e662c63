# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageBase64:
    """Base64 form of an uploaded image, ready to embed in a prompt"""
    key: str
    data: str
    mime_type: str

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"
