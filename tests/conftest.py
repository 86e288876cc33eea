"""
Shared pytest fixtures for promotion_ai tests.

Provides scripted providers, a router built from them, and a FastAPI test
client with the router and image service overridden.
"""
import asyncio
import json
import pytest
from typing import List, Optional, Union

from fastapi.testclient import TestClient

from promotion_ai.api.dependencies import get_image_service, get_router
from promotion_ai.api.main import app
from promotion_ai.config import ProviderDescriptor, Settings
from promotion_ai.exceptions import ProviderError
from promotion_ai.images import ImageService
from promotion_ai.models import PromptSpec
from promotion_ai.providers import BaseTextProvider
from promotion_ai.router import ProviderRouter


# ============================================================================
# Test-only Mock Classes
# ============================================================================

def make_descriptor(name: str, credential: str = "test-key", timeout_ms: int = 1000) -> ProviderDescriptor:
    return ProviderDescriptor(
        name=name,
        endpoint=f"https://{name}.example.com/v1",
        credential=credential,
        model_id=f"{name}-model",
        request_timeout_ms=timeout_ms,
    )


class ScriptedProvider(BaseTextProvider):
    """Provider that answers with a fixed body or raises a fixed error."""

    def __init__(
        self,
        name: str,
        response: Union[str, Exception] = "generated text",
        credential: str = "test-key",
        delay: float = 0.0,
        timeout_ms: int = 1000,
    ):
        super().__init__(make_descriptor(name, credential, timeout_ms))
        self.response = response
        self.delay = delay
        self.prompts: List[PromptSpec] = []
        self.probe_response: Union[str, Exception] = "ok"

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def attempt(self, prompt: PromptSpec, timeout: float) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    async def probe(self, timeout: float) -> str:
        if isinstance(self.probe_response, Exception):
            raise self.probe_response
        return self.probe_response


def failing(name: str, message: str = "HTTP 503: unavailable", **kwargs) -> ScriptedProvider:
    return ScriptedProvider(name, response=ProviderError(name, message), **kwargs)


@pytest.fixture
def make_router():
    """Build a router whose priority is the order providers are passed in."""
    def _make(*providers: BaseTextProvider, priority: Optional[List[str]] = None) -> ProviderRouter:
        return ProviderRouter(providers, priority=priority or [p.name for p in providers])
    return _make


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with no provider credentials and an isolated gallery path."""
    return Settings(
        _env_file=None,
        openrouter_api_key=None,
        openai_api_key=None,
        groq_api_key=None,
        anthropic_api_key=None,
        gallery_path=str(tmp_path / "gallery_manifest.json"),
    )


@pytest.fixture
def gallery_file(settings):
    """Write a small gallery manifest and return its path."""
    path = settings.gallery_path
    with open(path, "w", encoding="utf-8") as f:
        json.dump(
            {
                "general": ["https://cdn.example.com/general-1.jpg"],
                "bakery": ["https://cdn.example.com/bakery-1.jpg", "https://cdn.example.com/bakery-2.jpg"],
            },
            f,
        )
    return path


@pytest.fixture
def api_client(settings):
    """TestClient with overridable router and image service.

    Tests set ``api_client.router`` before issuing requests.
    """
    holder = {"router": ProviderRouter([], priority=[])}
    image_service = ImageService(settings)

    app.dependency_overrides[get_router] = lambda: holder["router"]
    app.dependency_overrides[get_image_service] = lambda: image_service

    client = TestClient(app)
    client.use_router = lambda router: holder.__setitem__("router", router)
    client.image_service = image_service
    yield client

    app.dependency_overrides.clear()
