# Local application imports
from ....domain.repositories.image_repository import ImageRepository
from ....domain.models.image import ImageBase64
from ....core.exceptions import NotFoundError


class LoadImageUseCase:
    """Use case for loading the base64 form of an image for prompt embedding"""

    def __init__(self, image_repository: ImageRepository) -> None:
        self.image_repository = image_repository

    async def execute(self, key: str) -> ImageBase64:
        image = await self.image_repository.find_base64(key)
        if image is None:
            raise NotFoundError(f"Image {key} not found", user_message="Image not found")
        return image
