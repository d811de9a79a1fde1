from __future__ import annotations

import logging
import os

import uvicorn

from portal_api.logging_config import configure_logging
from portal_api.main import API_VERSION

DEFAULT_PORT = 3000
LOGGER = logging.getLogger("jobportal.api")


def main() -> None:
    configure_logging()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    LOGGER.info(
        "DEEP RESEARCH JOB PORTAL - BACKEND SERVER | status=ONLINE port=%s version=%s locale=%s",
        port,
        API_VERSION,
        os.getenv("PORTAL_LOCALE", "western"),
    )
    uvicorn.run("portal_api.main:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
