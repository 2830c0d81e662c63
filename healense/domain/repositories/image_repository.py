from abc import ABC, abstractmethod
from typing import Optional
from ..models.image import ImageBase64


class ImageRepository(ABC):
    """Repository interface - defines contract for image data access"""

    @abstractmethod
    async def save_raw(self, key: str, data: bytes, mime_type: str) -> None:
        """Store the raw bytes of an image"""
        pass

    @abstractmethod
    async def save_base64(self, image: ImageBase64) -> None:
        """Store the base64 form of an image"""
        pass

    @abstractmethod
    async def find_base64(self, key: str) -> Optional[ImageBase64]:
        """Find the base64 form of an image"""
        pass
