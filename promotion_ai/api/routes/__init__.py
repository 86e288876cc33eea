from promotion_ai.api.routes.health import router as health_router
from promotion_ai.api.routes.image import router as image_router
from promotion_ai.api.routes.prompt import router as prompt_router
from promotion_ai.api.routes.status import router as status_router

__all__ = ["health_router", "prompt_router", "image_router", "status_router"]
