from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

Role = Literal["user", "assistant", "system"]


class ChatMessage(BaseModel):
    """A single outbound chat turn."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """
    Outbound chat completion request.

    Serialized with ``model_dump(mode="json")`` into the provider's wire format.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    messages: List[ChatMessage] = Field(..., min_length=1)
    max_tokens: int = Field(..., gt=0, le=4096)
    temperature: float = Field(..., ge=0.0, le=2.0)


class AnswerMessage(BaseModel):
    """
    Message inside a returned choice. ``role`` is free text, so roles such as
    ``tool`` or ``developer`` parse.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: AnswerMessage


class ChatResponse(BaseModel):
    """
    Typed view over a provider response.

    Only ``choices`` is modeled; everything else the provider sends stays in
    the raw payload.
    """

    model_config = ConfigDict(frozen=True)

    choices: List[Choice]


class ProviderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = SecretStr("")
    model: str
    mock_mode: bool = False


class AskResult(BaseModel):
    """Answer text plus the provider payload exactly as it was decoded."""

    model_config = ConfigDict(frozen=True)

    answer_text: str
    raw_payload: Optional[Any] = None
