# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, Request, status

# Local application imports
from ...application.dto.image_dto import ImageUploadResponse
from ...application.use_cases.image.store_image import StoreImageUseCase
from ...di.container import get_container
from ...domain.models.session import Session
from .dependencies import get_current_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])


@router.post("/image", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    request: Request,
    session: Session = Depends(get_current_session),
) -> ImageUploadResponse:
    """
    Store an uploaded image

    The request body is the raw image; its Content-Type header must be image/*.

    Returns:
        ImageUploadResponse with the key to reference in a chat message
    """
    container = get_container()
    store_image_use_case = container.get(StoreImageUseCase)

    data = await request.body()
    logger.debug(f"Image upload from {session.username}: {len(data)} bytes")
    return await store_image_use_case.execute(data, request.headers.get("content-type"))
