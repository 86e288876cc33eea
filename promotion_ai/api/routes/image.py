"""Image lookup endpoint."""

from fastapi import APIRouter, Depends

from promotion_ai.api.dependencies import get_image_service
from promotion_ai.api.schemas import ImageRequest, ImageResponse
from promotion_ai.images import ImageService

router = APIRouter(prefix="/api", tags=["images"])


@router.post("/image", response_model=ImageResponse, response_model_exclude_none=True)
async def find_images(
    request: ImageRequest,
    image_service: ImageService = Depends(get_image_service),
) -> ImageResponse:
    """Return image URLs for a prompt. Always succeeds, falling back to a placeholder."""
    result = await image_service.find_images(
        request.text if request.text is not None else (request.prompt or ""),
        request.category or request.template,
    )
    return ImageResponse(images=result.images, source=result.source, category=result.category)
