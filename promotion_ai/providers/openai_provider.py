"""OpenAI-compatible chat-completion provider.

One adapter covers every endpoint that speaks the OpenAI chat-completions
schema: OpenRouter, OpenAI itself and Groq differ only in base URL, key and
model.
"""

import logging
from typing import Any, Dict, List

import openai
from openai import AsyncOpenAI

from promotion_ai.config.providers import ProviderDescriptor
from promotion_ai.exceptions import ProviderError
from promotion_ai.models import PromptSpec

from .base import BaseTextProvider

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(BaseTextProvider):
    """Provider for OpenAI-compatible endpoints using the official openai SDK.

    The SDK's own retries are disabled; the router decides what happens after
    a failure.
    """

    def __init__(self, descriptor: ProviderDescriptor):
        """Initialize the provider.

        Args:
            descriptor: Endpoint, credential and model for this provider.
        """
        super().__init__(descriptor)

        # The SDK refuses to build a client without a key
        self.client = AsyncOpenAI(
            api_key=descriptor.credential or "missing",
            base_url=descriptor.endpoint,
            timeout=descriptor.timeout_seconds,
            max_retries=0,
        )

    async def attempt(self, prompt: PromptSpec, timeout: float) -> str:
        logger.debug(f"Requesting completion from {self.name} ({self.model_name}), max_tokens={prompt.max_tokens}")
        messages: List[Dict[str, str]] = [
            {"role": "user", "content": prompt.text},
        ]
        create_kwargs: Dict[str, Any] = {
            "model": self.model_name,
            "messages": messages,
            "max_tokens": prompt.max_tokens,
            "timeout": timeout,
        }

        try:
            response = await self.client.chat.completions.create(**create_kwargs)
        except openai.APITimeoutError as e:
            raise ProviderError(self.name, f"timed out after {timeout:g}s") from e
        except openai.APIStatusError as e:
            raise ProviderError(self.name, f"HTTP {e.status_code}: {e.message}") from e
        except openai.OpenAIError as e:
            raise ProviderError(self.name, str(e) or type(e).__name__) from e

        try:
            content = response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderError(self.name, "malformed response body") from e

        content = content.strip()
        if not content:
            raise ProviderError(self.name, "empty response body")
        return content

    async def probe(self, timeout: float) -> str:
        try:
            page = await self.client.models.list(timeout=timeout)
        except openai.APITimeoutError as e:
            raise ProviderError(self.name, f"timed out after {timeout:g}s") from e
        except openai.APIStatusError as e:
            raise ProviderError(self.name, f"HTTP {e.status_code}: {e.message}") from e
        except openai.OpenAIError as e:
            raise ProviderError(self.name, str(e) or type(e).__name__) from e

        count = len(getattr(page, "data", None) or [])
        return f"{count} models available"
