"""Text provider abstractions for the PromotionAI backend.

Adapters are imported lazily so that a missing SDK only disables the
providers that need it:
    from promotion_ai.providers.openai_provider import OpenAICompatibleProvider
"""

from .base import BaseTextProvider
from .factory import ProviderFactory

__all__ = [
    "BaseTextProvider",
    "ProviderFactory",
    "OpenAICompatibleProvider",
    "AnthropicProvider",
]


def __getattr__(name: str):
    """Lazy import adapters to avoid requiring every SDK."""
    if name == "OpenAICompatibleProvider":
        from .openai_provider import OpenAICompatibleProvider
        return OpenAICompatibleProvider
    elif name == "AnthropicProvider":
        from .anthropic_provider import AnthropicProvider
        return AnthropicProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
