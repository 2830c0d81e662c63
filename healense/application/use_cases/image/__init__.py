from .store_image import StoreImageUseCase
from .load_image import LoadImageUseCase

__all__ = [
    "StoreImageUseCase",
    "LoadImageUseCase",
]
