__version__ = "1.0.0"

from .models import (
    FALLBACK_PROVIDER,
    AttemptRecord,
    GenerationRequest,
    GenerationResult,
    ImageResult,
    PromptSpec,
    ProviderStatus,
    StyleParameters,
)
from .exceptions import (
    ConfigurationError,
    MissingPromptError,
    PreferredProviderError,
    PromotionAIError,
    ProviderError,
)
from .providers import BaseTextProvider, ProviderFactory
from .templates import Template, Tool, build_prompt, fallback_text
from .router import ProviderRouter
from .images import ImageService
from .utils import setup_logging

__all__ = [
    "FALLBACK_PROVIDER",
    "AttemptRecord",
    "GenerationRequest",
    "GenerationResult",
    "ImageResult",
    "PromptSpec",
    "ProviderStatus",
    "StyleParameters",
    "ConfigurationError",
    "MissingPromptError",
    "PreferredProviderError",
    "PromotionAIError",
    "ProviderError",
    "BaseTextProvider",
    "ProviderFactory",
    "Template",
    "Tool",
    "build_prompt",
    "fallback_text",
    "ProviderRouter",
    "ImageService",
    "setup_logging",
]
