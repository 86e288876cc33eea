"""Configuration settings using Pydantic Settings."""

from typing import List, Optional, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from promotion_ai.config.providers import ProviderDescriptor
from promotion_ai.utils import split_csv

MIN_TIMEOUT_MS = 1000
MAX_TIMEOUT_MS = 60000


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Settings can be configured via:
    - Environment variables (e.g., OPENROUTER_API_KEY=sk-or-...)
    - .env file in the project root

    Example:
        >>> from promotion_ai.config import Settings
        >>> settings = Settings()
        >>> print(settings.priority_order)
        ['openrouter', 'openai', 'groq', 'anthropic']
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    provider_priority: str = "openrouter,openai,groq,anthropic"
    request_timeout_ms: int = 10000

    openrouter_api_key: Optional[str] = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "gpt-4o-mini"

    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"

    groq_api_key: Optional[str] = None
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.1-8b-instant"

    anthropic_api_key: Optional[str] = None
    anthropic_base_url: str = "https://api.anthropic.com"
    anthropic_model: str = "claude-3-haiku-20240307"

    gallery_path: str = "./gallery_manifest.json"
    image_generation_enabled: bool = True
    image_model: str = "openai/dall-e-3"
    image_size: str = "1024x1024"

    @field_validator("request_timeout_ms")
    @classmethod
    def _clamp_timeout(cls, value: int) -> int:
        return max(MIN_TIMEOUT_MS, min(MAX_TIMEOUT_MS, value))

    @property
    def priority_order(self) -> List[str]:
        return split_csv(self.provider_priority)

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000.0

    def provider_descriptors(self) -> Tuple[ProviderDescriptor, ...]:
        """Build one immutable descriptor per supported provider."""
        def descriptor(name: str, kind: str = "openai") -> ProviderDescriptor:
            return ProviderDescriptor(
                name=name,
                endpoint=getattr(self, f"{name}_base_url"),
                credential=getattr(self, f"{name}_api_key") or "",
                model_id=getattr(self, f"{name}_model"),
                request_timeout_ms=self.request_timeout_ms,
                kind=kind,
            )

        return (
            descriptor("openrouter"),
            descriptor("openai"),
            descriptor("groq"),
            descriptor("anthropic", kind="anthropic"),
        )

    def image_endpoint(self) -> Tuple[str, str, str]:
        """Return ``(base_url, api_key, model)`` for image generation.

        OpenRouter is preferred. OpenAI itself takes the model name without
        the ``openai/`` routing prefix.
        """
        if self.openrouter_api_key:
            return self.openrouter_base_url, self.openrouter_api_key, self.image_model
        if self.openai_api_key:
            model = self.image_model.split("/", 1)[-1]
            return self.openai_base_url, self.openai_api_key, model
        return "", "", self.image_model
