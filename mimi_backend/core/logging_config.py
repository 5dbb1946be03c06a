import logging
import sys
from typing import Optional

from mimi_backend.core.config import Settings, get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# httpx logs every request line at INFO, including the provider URL.
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "httpx", "httpcore")

_configured = False


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Send logs to stdout at ``settings.log_level``.

    Only the first call has any effect; later apps in the same process
    share that configuration.
    """
    global _configured

    if _configured:
        return

    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
