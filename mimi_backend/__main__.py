"""
Allow running as: python -m mimi_backend
"""
import uvicorn

from mimi_backend.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "mimi_backend.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
