"""Run the API server: ``python -m promotion_ai``."""

import logging

import uvicorn

from promotion_ai.api.dependencies import get_settings
from promotion_ai.utils import setup_logging


def main() -> None:
    settings = get_settings()
    logger = setup_logging(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.info(f"PromotionAI backend running at http://localhost:{settings.port}")
    uvicorn.run("promotion_ai.api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
