"""Image lookup: AI generation, curated gallery, then placeholder.

``find_images`` never raises. Every failure is logged and degrades to the
next source.
"""
import asyncio
import json
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import quote

import openai
from openai import AsyncOpenAI

from .config.settings import Settings
from .models import ImageResult

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "https://placehold.co/512x512?text={text}"
DEFAULT_CATEGORY = "general"


def placeholder_url(text: str) -> str:
    return PLACEHOLDER_URL.format(text=quote(text.strip() or "image", safe=""))


def load_gallery(path: Path) -> Dict[str, List[str]]:
    """Read a gallery manifest mapping category name to image URLs.

    Raises:
        OSError: If the manifest cannot be read.
        ValueError: If the manifest is not a JSON object of URL lists.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Gallery manifest {path} must be a JSON object")
    return {
        str(category).lower(): [url for url in urls if isinstance(url, str) and url]
        for category, urls in data.items()
        if isinstance(urls, list)
    }


class ImageService:
    """Resolves a prompt to image URLs."""

    def __init__(
        self,
        settings: Settings,
        client: Optional[AsyncOpenAI] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        self.gallery_path = Path(settings.gallery_path)
        self.timeout = settings.request_timeout_seconds
        self._rng = rng or random.Random()

        base_url, api_key, model = settings.image_endpoint()
        self.model = model
        if client is None and api_key and settings.image_generation_enabled:
            client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self.client = client if settings.image_generation_enabled else None

    async def find_images(self, text: str, category: Optional[str] = None) -> ImageResult:
        text = (text or "").strip()
        category = (category or DEFAULT_CATEGORY).strip().lower() or DEFAULT_CATEGORY

        if not text:
            return ImageResult(images=[placeholder_url(text)], source="placeholder")

        if self.client is not None:
            images = await self._generate(text)
            if images:
                return ImageResult(images=images, source="ai")

        url = self._pick_from_gallery(category)
        if url:
            return ImageResult(images=[url], source="gallery", category=category)

        return ImageResult(images=[placeholder_url(text)], source="placeholder")

    async def _generate(self, text: str) -> List[str]:
        try:
            response = await asyncio.wait_for(
                self.client.images.generate(
                    model=self.model,
                    prompt=text,
                    size=self.settings.image_size,
                    n=1,
                    timeout=self.timeout,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"AI image generation timed out after {self.timeout:g}s; using gallery")
            return []
        except openai.OpenAIError as e:
            logger.warning(f"AI image generation failed, using gallery fallback: {e}")
            return []

        return [item.url for item in (response.data or []) if getattr(item, "url", None)]

    def _pick_from_gallery(self, category: str) -> Optional[str]:
        try:
            gallery = load_gallery(self.gallery_path)
        except (OSError, ValueError) as e:
            logger.error(f"Gallery error: {e}")
            return None

        images = gallery.get(category) or gallery.get(DEFAULT_CATEGORY) or []
        if not images:
            return None
        return self._rng.choice(images)
