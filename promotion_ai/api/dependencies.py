from functools import lru_cache

from promotion_ai.config.settings import Settings
from promotion_ai.images import ImageService
from promotion_ai.providers import ProviderFactory
from promotion_ai.router import ProviderRouter


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_router() -> ProviderRouter:
    settings = get_settings()
    return ProviderRouter(
        providers=ProviderFactory.from_settings(settings),
        priority=settings.priority_order,
    )


@lru_cache
def get_image_service() -> ImageService:
    return ImageService(get_settings())
