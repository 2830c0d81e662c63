# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.image_repository import ImageRepository
from ....domain.models.image import ImageBase64
from ....domain.constants.media_constants import IMAGE_MIME_PREFIX
from ....core.exceptions import ValidationError
from ....utils.encoding import encode_base64_chunked
from ....utils.ids import new_key
from ...dto.image_dto import ImageUploadResponse

logger = logging.getLogger(__name__)


class StoreImageUseCase:
    """
    Use case for storing an uploaded image.

    The raw bytes and their base64 encoding are written under related keys;
    uploads are never deduplicated.
    """

    def __init__(self, image_repository: ImageRepository, max_bytes: int) -> None:
        self.image_repository = image_repository
        self.max_bytes = max_bytes

    async def execute(self, data: bytes, mime_type: Optional[str]) -> ImageUploadResponse:
        """
        Store an image

        Args:
            data: Raw image bytes
            mime_type: Content type of the upload; must be image/*

        Returns:
            ImageUploadResponse with the new key

        Raises:
            ValidationError: On a non-image type, an empty body or an oversized body
        """
        mime_type = (mime_type or "").split(";", 1)[0].strip().lower()
        if not mime_type.startswith(IMAGE_MIME_PREFIX):
            raise ValidationError("Content-Type must be an image type")
        if not data:
            raise ValidationError("Image body is empty")
        if len(data) > self.max_bytes:
            raise ValidationError(f"Image exceeds {self.max_bytes} bytes")

        key = new_key()
        await self.image_repository.save_raw(key, data, mime_type)
        await self.image_repository.save_base64(
            ImageBase64(key=key, data=encode_base64_chunked(data), mime_type=mime_type)
        )
        logger.info(f"Stored image {key} ({mime_type}, {len(data)} bytes)")
        return ImageUploadResponse(key=key)
