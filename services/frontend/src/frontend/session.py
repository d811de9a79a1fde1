from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum

from jobgen.models import JobListing
from jobgen.sources import JobSource
from jobgen.validation import ValidationError, validate_search_request

from frontend.status import (
    CLASS_COMPLETE,
    CLASS_READY,
    CLASS_SEARCHING,
    STATUS_ERROR,
    STATUS_READY,
    STATUS_SEARCHING,
    StatusLine,
    status_complete,
)

DEFAULT_SEARCH_DELAY = 1.5
EMPTY_QUERY_MESSAGE = "ERROR: PLEASE ENTER A JOB SEARCH QUERY"
LOGGER = logging.getLogger("jobportal.frontend")


class SearchState(str, Enum):
    READY = "READY"
    SEARCHING = "SEARCHING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


class SearchInProgressError(RuntimeError):
    pass


@dataclass
class SearchOutcome:
    state: SearchState
    job_count: int
    listings: list[JobListing] | None = None
    status: StatusLine | None = None
    error: str | None = None
    history: list[SearchState] = field(default_factory=list)


class SearchSession:
    """Search interaction of one page: READY -> SEARCHING -> COMPLETE | ERROR.

    A finished search stays in its terminal state until the next submit, which
    moves it back to READY before anything else happens.
    """

    def __init__(
        self,
        source: JobSource,
        *,
        job_count: int = 0,
        delay: float = DEFAULT_SEARCH_DELAY,
    ) -> None:
        self.source = source
        self.job_count = job_count
        self.delay = delay
        self.state = SearchState.READY
        self.trigger_enabled = True
        self.status: StatusLine | None = None
        self._history: list[SearchState] = []

    def _enter(self, state: SearchState) -> None:
        self.state = state
        self._history.append(state)

    async def submit(self, query: str | None, location: str | None = None) -> SearchOutcome:
        if not self.trigger_enabled:
            raise SearchInProgressError("A search is already in progress")

        self._history = []
        if self.state in (SearchState.COMPLETE, SearchState.ERROR):
            self._enter(SearchState.READY)

        trimmed_query = (query or "").strip()
        trimmed_location = (location or "").strip() or None
        try:
            request = validate_search_request(
                {"query": trimmed_query, "location": trimmed_location}
            )
        except ValidationError:
            if self.status is None:
                self.status = StatusLine.typed(STATUS_READY, CLASS_READY)
            return self._outcome(error=EMPTY_QUERY_MESSAGE)

        self._enter(SearchState.SEARCHING)
        self.status = StatusLine(text=STATUS_SEARCHING, css_class=CLASS_SEARCHING)
        self.trigger_enabled = False
        try:
            # Stand-in for network latency; suspends without blocking the loop.
            await asyncio.sleep(self.delay)
            listings = await self.source.search(request.query, request.location)
        except Exception as exc:
            LOGGER.exception("search failed for query=%r", trimmed_query)
            self._enter(SearchState.ERROR)
            self.status = StatusLine.typed(STATUS_ERROR, CLASS_READY)
            return self._outcome(error=f"ERROR: SEARCH FAILED - {exc}")
        finally:
            self.trigger_enabled = True

        self._enter(SearchState.COMPLETE)
        self.job_count += len(listings)
        self.status = StatusLine.typed(status_complete(len(listings)), CLASS_COMPLETE)
        return self._outcome(listings=listings)

    def _outcome(
        self,
        *,
        listings: list[JobListing] | None = None,
        error: str | None = None,
    ) -> SearchOutcome:
        return SearchOutcome(
            state=self.state,
            job_count=self.job_count,
            listings=listings,
            status=self.status,
            error=error,
            history=list(self._history),
        )
