from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jobgen.models import JobListing, SearchResponse

ALL_LOCATIONS = "All locations"
INTERNAL_ERROR = "Internal server error"


def format_search_response(
    jobs: Sequence[JobListing],
    query: str,
    location: str | None = None,
) -> SearchResponse:
    return SearchResponse(
        success=True,
        count=len(jobs),
        query=query,
        location=location or ALL_LOCATIONS,
        jobs=[job.to_payload() for job in jobs],
    )


def validation_error_envelope(message: str) -> dict[str, Any]:
    return {"error": message}


def internal_error_envelope(exc: BaseException) -> dict[str, Any]:
    return {"error": INTERNAL_ERROR, "message": str(exc)}
