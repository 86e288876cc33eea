"""Anthropic Claude text provider implementation."""

import logging

import anthropic
from anthropic import AsyncAnthropic

from promotion_ai.config.providers import ProviderDescriptor
from promotion_ai.exceptions import ProviderError
from promotion_ai.models import PromptSpec

from .base import BaseTextProvider

logger = logging.getLogger(__name__)


class AnthropicProvider(BaseTextProvider):
    """Text provider for Anthropic Claude models via the messages API."""

    def __init__(self, descriptor: ProviderDescriptor):
        super().__init__(descriptor)
        self.client = AsyncAnthropic(
            api_key=descriptor.credential or "missing",
            base_url=descriptor.endpoint,
            timeout=descriptor.timeout_seconds,
            max_retries=0,
        )

    async def attempt(self, prompt: PromptSpec, timeout: float) -> str:
        logger.debug(f"Requesting completion from {self.name} ({self.model_name}), max_tokens={prompt.max_tokens}")
        try:
            response = await self.client.messages.create(
                model=self.model_name,
                max_tokens=prompt.max_tokens,
                messages=[
                    {"role": "user", "content": prompt.text}
                ],
                timeout=timeout,
            )
        except anthropic.APITimeoutError as e:
            raise ProviderError(self.name, f"timed out after {timeout:g}s") from e
        except anthropic.APIStatusError as e:
            raise ProviderError(self.name, f"HTTP {e.status_code}: {e.message}") from e
        except anthropic.AnthropicError as e:
            raise ProviderError(self.name, str(e) or type(e).__name__) from e

        parts = [
            block.text
            for block in (response.content or [])
            if getattr(block, "type", None) == "text"
        ]
        content = "".join(parts).strip()
        if not content:
            raise ProviderError(self.name, "empty response body")
        return content

    async def probe(self, timeout: float) -> str:
        try:
            page = await self.client.models.list(timeout=timeout)
        except anthropic.APITimeoutError as e:
            raise ProviderError(self.name, f"timed out after {timeout:g}s") from e
        except anthropic.APIStatusError as e:
            raise ProviderError(self.name, f"HTTP {e.status_code}: {e.message}") from e
        except anthropic.AnthropicError as e:
            raise ProviderError(self.name, str(e) or type(e).__name__) from e

        count = len(getattr(page, "data", None) or [])
        return f"{count} models available"
