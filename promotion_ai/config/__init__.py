"""Configuration module for the PromotionAI backend."""

from promotion_ai.config.providers import ProviderDescriptor
from promotion_ai.config.settings import Settings

__all__ = ["Settings", "ProviderDescriptor"]
