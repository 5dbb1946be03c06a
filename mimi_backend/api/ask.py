import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from mimi_backend.providers import LLMProvider, ProviderError
from mimi_backend.schemas.ask import AskRequest, AskResponse, ErrorResponse


logger = logging.getLogger(__name__)

router = APIRouter()


def get_llm_provider(request: Request) -> LLMProvider:
    """Return the provider instance owned by the running application."""
    return request.app.state.llm_provider


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
    summary="Ask the LLM a question",
)
async def ask(
    payload: AskRequest,
    provider: LLMProvider = Depends(get_llm_provider),
) -> JSONResponse:
    """
    Forward the question to the configured provider and return its answer.

    Provider failures are logged with full detail; the caller only gets a
    generic description of what went wrong.
    """
    logger.info("Received question: %s", payload.question)

    try:
        result = await provider.ask(payload.question)
    except ProviderError as exc:
        logger.error("Failed to generate response: %s", exc, exc_info=exc)
        body = ErrorResponse(error=f"Failed to generate response: {exc.public_message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )

    logger.info("Successfully generated response")
    fields = {"response": result.answer_text}
    if result.raw_payload is not None:
        fields["raw"] = result.raw_payload
    # exclude_unset drops a missing "raw" without touching nulls inside the payload.
    return JSONResponse(content=AskResponse(**fields).model_dump(exclude_unset=True))
