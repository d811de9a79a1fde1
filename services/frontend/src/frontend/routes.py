from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from jobgen.sources import JobSource
from pydantic import BaseModel, Field

from frontend.render import JobCardRenderer, render_inline_error
from frontend.session import SearchSession
from frontend.status import CLASS_READY, STATUS_READY, CounterAnimation, StatusLine

MAX_JOB_COUNT = 1_000_000_000


class UISearchRequest(BaseModel):
    query: str = ""
    location: str = ""
    job_count: int = Field(default=0, ge=0, le=MAX_JOB_COUNT)


def build_ui_router(
    source: JobSource,
    *,
    search_delay: float,
    renderer: JobCardRenderer | None = None,
) -> APIRouter:
    card_renderer = renderer or JobCardRenderer()
    router = APIRouter(prefix="/ui", tags=["ui"])

    @router.get("/state")
    async def initial_state() -> dict[str, Any]:
        return {
            "state": "READY",
            "job_count": 0,
            "status": StatusLine.typed(STATUS_READY, CLASS_READY).model_dump(),
            "counter": CounterAnimation.between(0, 0).model_dump(),
        }

    @router.post("/search")
    async def search(payload: UISearchRequest) -> dict[str, Any]:
        session = SearchSession(source, job_count=payload.job_count, delay=search_delay)
        outcome = await session.submit(payload.query, payload.location)

        results = None
        if outcome.listings is not None:
            results = [node.to_dict() for node in card_renderer.render_results(outcome.listings)]

        return {
            "state": outcome.state.value,
            "transitions": [state.value for state in outcome.history],
            "job_count": outcome.job_count,
            "status": outcome.status.model_dump() if outcome.status else None,
            "results": results,
            "message": render_inline_error(outcome.error).to_dict() if outcome.error else None,
            "counter": CounterAnimation.between(payload.job_count, outcome.job_count).model_dump(),
        }

    return router
