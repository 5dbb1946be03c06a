from __future__ import annotations

import logging

from mimi_backend.core.config import Settings, get_settings
from mimi_backend.providers.base import LLMProvider
from mimi_backend.providers.openai_provider import OpenAIProvider
from mimi_backend.providers.types import ProviderConfig

logger = logging.getLogger(__name__)

MOCK_API_KEY = "mock-api-key"


def build_provider_config(settings: Settings) -> ProviderConfig:
    """Freeze the provider-related settings into a ProviderConfig."""
    api_key = settings.openai_api_key.get_secret_value().strip() if settings.openai_api_key else ""
    if not api_key:
        if settings.mock_llm:
            logger.info("MOCK_LLM is enabled, using dummy API key")
            api_key = MOCK_API_KEY
        else:
            logger.warning("OPENAI_API_KEY not set and MOCK_LLM not enabled")
    return ProviderConfig(
        api_key=api_key,
        model=settings.openai_model,
        mock_mode=settings.mock_llm,
    )


def get_provider(settings: Settings | None = None) -> LLMProvider:
    """Return the LLM provider described by the given (or cached) settings."""
    settings = settings or get_settings()
    config = build_provider_config(settings)
    logger.info("Configuration: model=%s, mock_mode=%s", config.model, config.mock_mode)
    return OpenAIProvider(config, base_url=settings.openai_base_url)
