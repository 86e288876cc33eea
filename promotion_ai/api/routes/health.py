from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from promotion_ai import __version__
from promotion_ai.api.schemas import HealthResponse

router = APIRouter(tags=["health"])

LIVENESS_MESSAGE = "PromotionAI backend is running"


@router.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    return LIVENESS_MESSAGE


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__)
