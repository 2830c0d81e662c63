from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.image_repository import ImageRepository
from ...application.use_cases.image.store_image import StoreImageUseCase
from ...application.use_cases.image.load_image import LoadImageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ImageProvider:
    """Image use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        container.register_factory(
            StoreImageUseCase,
            lambda: StoreImageUseCase(
                image_repository=container.get(ImageRepository),
                max_bytes=settings.image_max_bytes,
            )
        )

        container.register_factory(
            LoadImageUseCase,
            lambda: LoadImageUseCase(image_repository=container.get(ImageRepository))
        )
