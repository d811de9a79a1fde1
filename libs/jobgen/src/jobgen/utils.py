from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

DEFAULT_SEARCH_DELAY_MS = 1500
LOGGER = logging.getLogger("jobportal.jobgen")


def utc_now() -> datetime:
    return datetime.now(UTC)


def now_utc_iso() -> str:
    return utc_now().isoformat()


def to_iso(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat()


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def search_delay_from_env(default_ms: int = DEFAULT_SEARCH_DELAY_MS) -> float:
    """Artificial search delay in seconds, read from ``PORTAL_SEARCH_DELAY_MS``.

    A malformed or negative value is logged and replaced by the default.
    """
    raw = os.getenv("PORTAL_SEARCH_DELAY_MS", "").strip()
    if not raw:
        return default_ms / 1000
    try:
        delay_ms = int(raw)
    except ValueError:
        LOGGER.warning("ignoring malformed PORTAL_SEARCH_DELAY_MS=%r", raw)
        return default_ms / 1000
    if delay_ms < 0:
        LOGGER.warning("ignoring negative PORTAL_SEARCH_DELAY_MS=%r", raw)
        return default_ms / 1000
    return delay_ms / 1000
