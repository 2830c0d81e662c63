# Standard library imports
from typing import Optional

# External package imports
from bson import Binary
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import InternalError
from ...domain.repositories.image_repository import ImageRepository
from ...domain.models.image import ImageBase64
from ...domain.constants import ImageFields
from ...domain.constants.media_constants import DEFAULT_IMAGE_MIME
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_image_collection


class MongoImageRepository(ImageRepository):
    """
    MongoDB implementation of ImageRepository.

    Both representations live in one collection: the raw bytes under
    "<key>/raw" and the base64 string under "<key>".
    """

    def __init__(self, image_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.image_collection = image_collection if image_collection is not None else get_image_collection()

    async def save_raw(self, key: str, data: bytes, mime_type: str) -> None:
        await self._insert(key + ImageFields.RAW_SUFFIX, Binary(data), mime_type)

    async def save_base64(self, image: ImageBase64) -> None:
        await self._insert(image.key, image.data, image.mime_type)

    async def find_base64(self, key: str) -> Optional[ImageBase64]:
        if not key or key.endswith(ImageFields.RAW_SUFFIX):
            return None

        try:
            document = await self.image_collection.find_one({ImageFields.KEY: key})
        except PyMongoError as e:
            raise InternalError(f"Error loading image: {str(e)}")

        if document is None:
            return None
        return ImageBase64(
            key=key,
            data=document.get(ImageFields.DATA, ""),
            mime_type=document.get(ImageFields.MIME_TYPE) or DEFAULT_IMAGE_MIME,
        )

    async def _insert(self, key: str, data, mime_type: str) -> None:
        try:
            await self.image_collection.insert_one({
                ImageFields.KEY: key,
                ImageFields.MIME_TYPE: mime_type,
                ImageFields.DATA: data,
                ImageFields.CREATED_AT: utc_now(),
            })
        except PyMongoError as e:
            raise InternalError(f"Error storing image {key}: {str(e)}")
