from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from jobgen.utils import search_delay_from_env

from frontend.gateway import ApiJobSource
from frontend.page import index_html
from frontend.routes import build_ui_router

DEFAULT_API_BASE_URL = "http://localhost:3000"


def create_app(
    *,
    api_base_url: str | None = None,
    search_delay: float | None = None,
) -> FastAPI:
    source = ApiJobSource(
        api_base_url or os.getenv("PORTAL_API_BASE_URL", DEFAULT_API_BASE_URL)
    )
    resolved_delay = search_delay if search_delay is not None else search_delay_from_env()

    app = FastAPI(title="Deep Research Job Portal Frontend", version="1.0.0")
    app.state.job_source = source

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": "frontend"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return index_html()

    app.include_router(build_ui_router(source, search_delay=resolved_delay))
    return app


app = create_app()
