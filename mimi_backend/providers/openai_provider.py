from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from mimi_backend.providers.base import LLMProvider
from mimi_backend.providers.errors import (
    ProviderEmptyResponseError,
    ProviderHttpError,
    ProviderNetworkError,
    ProviderParseError,
    ProviderSchemaError,
)
from mimi_backend.providers.types import (
    AskResult,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ProviderConfig,
)

logger = logging.getLogger(__name__)

OPENAI_BASE_URL = "https://api.openai.com/v1"
CHAT_COMPLETIONS_PATH = "/chat/completions"

# Whole call: connect + send + receive.
REQUEST_TIMEOUT_SECONDS = 20.0

MAX_TOKENS = 64
TEMPERATURE = 0.0

MOCK_ANSWER = "This is a mock response for testing purposes."
MOCK_RESPONSE_ID = "mock-123"


def mock_payload(model: str) -> Dict[str, Any]:
    """Canned payload with the same shape as a real chat completion."""
    return {
        "id": MOCK_RESPONSE_ID,
        "object": "chat.completion",
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": MOCK_ANSWER},
                "finish_reason": "stop",
            }
        ],
    }


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token!r}")


def parse_chat_completion(status_code: int, body: str) -> AskResult:
    """
    Classify a provider response and extract the answer.

    The returned ``raw_payload`` is the decoded JSON value itself, not a
    re-serialization of the typed view, so fields this client does not model
    reach the caller unchanged.
    """
    if not 200 <= status_code < 300:
        logger.error("OpenAI API returned HTTP %s: %s", status_code, body)
        raise ProviderHttpError(status_code, body)

    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ProviderParseError(f"Failed to parse OpenAI response body as JSON: {exc}") from exc

    try:
        parsed = ChatResponse.model_validate(payload)
    except ValidationError as exc:
        raise ProviderSchemaError(
            f"OpenAI response does not match the chat completion schema: {exc}"
        ) from exc

    if not parsed.choices:
        raise ProviderEmptyResponseError("OpenAI returned no choices")

    return AskResult(answer_text=parsed.choices[0].message.content, raw_payload=payload)


class OpenAIProvider(LLMProvider):
    """
    LLM provider that calls the OpenAI Chat Completions API over HTTP.

    With ``mock_mode`` set, no client is created and every call returns the
    canned answer. The flag is fixed for the lifetime of the instance.
    """

    def __init__(
        self,
        config: ProviderConfig,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = OPENAI_BASE_URL,
    ) -> None:
        self._config = config
        self._url = base_url.rstrip("/") + CHAT_COMPLETIONS_PATH
        self._client: Optional[httpx.AsyncClient] = None
        self._owns_client = False

        if config.mock_mode:
            logger.info("MOCK_LLM is enabled, OpenAI requests will not be sent")
            return

        if not config.api_key.get_secret_value().strip():
            raise ValueError(
                "OpenAI API key is required when mock mode is disabled. "
                "Set OPENAI_API_KEY in environment or .env."
            )
        if client is not None:
            self._client = client
        else:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS))
            self._owns_client = True

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def mock_mode(self) -> bool:
        return self._config.mock_mode

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()

    def build_request(self, question: str) -> ChatRequest:
        return ChatRequest(
            model=self._config.model,
            messages=[ChatMessage(role="user", content=question)],
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )

    async def ask(self, question: str) -> AskResult:
        if self._config.mock_mode:
            return AskResult(answer_text=MOCK_ANSWER, raw_payload=mock_payload(self._config.model))

        request = self.build_request(question)
        logger.info("OpenAI request: model=%s max_tokens=%s", request.model, request.max_tokens)

        try:
            response = await asyncio.wait_for(self._post(request), timeout=REQUEST_TIMEOUT_SECONDS)
        except asyncio.TimeoutError as exc:
            raise ProviderNetworkError(
                f"OpenAI request timed out after {REQUEST_TIMEOUT_SECONDS:g}s"
            ) from exc
        except httpx.TimeoutException as exc:
            raise ProviderNetworkError(f"OpenAI request timed out: {exc!r}") from exc
        except httpx.RequestError as exc:
            raise ProviderNetworkError(f"OpenAI request failed: {exc!r}") from exc

        return parse_chat_completion(response.status_code, response.text)

    async def _post(self, request: ChatRequest) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("OpenAIProvider has no HTTP client")
        headers = {
            "Authorization": f"Bearer {self._config.api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }
        return await self._client.post(
            self._url,
            headers=headers,
            json=request.model_dump(mode="json"),
        )
