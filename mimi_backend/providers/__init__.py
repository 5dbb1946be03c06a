"""
LLM provider abstraction layer.

All LLM-specific logic lives in provider implementations.
HTTP handlers depend only on the LLMProvider interface.
"""

from mimi_backend.providers.base import LLMProvider
from mimi_backend.providers.errors import (
    ProviderEmptyResponseError,
    ProviderError,
    ProviderHttpError,
    ProviderNetworkError,
    ProviderParseError,
    ProviderSchemaError,
)
from mimi_backend.providers.factory import get_provider
from mimi_backend.providers.openai_provider import OpenAIProvider
from mimi_backend.providers.types import AskResult, ProviderConfig

__all__ = [
    "AskResult",
    "LLMProvider",
    "OpenAIProvider",
    "ProviderConfig",
    "ProviderEmptyResponseError",
    "ProviderError",
    "ProviderHttpError",
    "ProviderNetworkError",
    "ProviderParseError",
    "ProviderSchemaError",
    "get_provider",
]
