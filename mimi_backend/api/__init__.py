from typing import Optional

from fastapi import APIRouter, FastAPI

from mimi_backend.core.config import Settings, get_settings

from . import ask, health


def get_api_router() -> APIRouter:
    """
    Aggregate and return the root API router.
    """
    root_router = APIRouter()

    root_router.include_router(
        health.router,
        prefix="",
        tags=["health"],
    )

    root_router.include_router(
        ask.router,
        prefix="",
        tags=["ask"],
    )

    return root_router


def register_routes(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """
    Attach all API routes to the FastAPI application.
    """
    settings = settings or get_settings()
    api_router = get_api_router()
    app.include_router(api_router, prefix=settings.api_prefix)
