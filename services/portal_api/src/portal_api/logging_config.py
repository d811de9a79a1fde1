from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure plain-text logging for the portal processes.

    Request events are emitted by the API middleware as JSON strings, so a
    single basic formatter is enough here.
    """
    if logging.getLogger().handlers:
        # Already configured (uvicorn reload, tests)
        return
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
