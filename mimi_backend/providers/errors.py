from __future__ import annotations

from typing import Optional


class ProviderError(Exception):
    """
    Base class for failures of a single ``ask`` call.

    ``str(exc)`` carries the full diagnostic message for server-side logs;
    ``public_message`` is the generic description safe to hand to callers.
    """

    public_message = "the language model provider failed"


class ProviderNetworkError(ProviderError):
    """Connection, transport or timeout failure."""

    public_message = "the language model provider could not be reached"


class ProviderHttpError(ProviderError):
    """The provider answered with a non-2xx status."""

    public_message = "the language model provider returned an error status"

    def __init__(self, status_code: int, body: Optional[str] = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"OpenAI API error: HTTP {status_code}")


class ProviderParseError(ProviderError):
    """The response body is not valid JSON."""

    public_message = "the language model provider returned an unreadable response"


class ProviderSchemaError(ProviderParseError):
    """Valid JSON that does not have the chat completion shape."""

    public_message = "the language model provider returned an unexpected response"


class ProviderEmptyResponseError(ProviderError):
    """The provider returned zero choices."""

    public_message = "the language model provider returned no answer"
