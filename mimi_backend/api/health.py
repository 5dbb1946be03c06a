from fastapi import APIRouter


router = APIRouter()


@router.get("/health", summary="Service health check", tags=["health"])
async def health_check() -> dict:
    """Liveness probe. Never calls the LLM provider."""
    return {"status": "ok"}
