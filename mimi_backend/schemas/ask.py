from typing import Any, Optional

from pydantic import BaseModel, Field, constr


class AskRequest(BaseModel):
    question: constr(min_length=1) = Field(
        ...,
        description="Natural-language question forwarded to the LLM.",
    )


class AskResponse(BaseModel):
    """
    Successful answer. ``raw`` is the provider payload as received and is
    left out of the body when the provider did not return one.
    """

    response: str
    raw: Optional[Any] = Field(
        default=None,
        description="Unmodified provider response, for debugging.",
    )


class ErrorResponse(BaseModel):
    error: str
