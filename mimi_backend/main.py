"""
Application factory for the MiMi Vibe backend.

Run with: python -m mimi_backend
Or: uvicorn mimi_backend.main:create_app --factory
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from mimi_backend.api import register_routes
from mimi_backend.core.config import Settings, get_settings
from mimi_backend.core.logging_config import configure_logging
from mimi_backend.providers import LLMProvider, get_provider


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup/shutdown lifespan. The provider is closed on shutdown."""
    logger.info("Starting MiMi Vibe Backend")
    try:
        yield
    finally:
        await app.state.llm_provider.close()
        logger.info("LLM provider closed")


def create_app(
    provider: Optional[LLMProvider] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    The provider is built once here and shared, read-only, by every request
    handler for the lifetime of the app.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="MiMi Vibe Backend",
        description="Forwards natural-language questions to an LLM provider.",
        version="0.1.0",
        lifespan=lifespan,
    )
    if provider is None:
        provider = get_provider(settings)
    app.state.llm_provider = provider

    register_routes(app, settings)

    return app
