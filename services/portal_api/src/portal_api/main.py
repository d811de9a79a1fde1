from __future__ import annotations

import json
import logging
import os
import random
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from frontend.page import index_html
from frontend.routes import build_ui_router
from jobgen.detail import lookup_job_detail
from jobgen.envelope import (
    format_search_response,
    internal_error_envelope,
    validation_error_envelope,
)
from jobgen.generator import MockJobGenerator
from jobgen.locales import UnknownLocaleError, get_locale_profile
from jobgen.models import HealthStatus, JobDetail, SearchRequest
from jobgen.sources import LocalJobSource
from jobgen.utils import now_utc_iso, search_delay_from_env
from jobgen.validation import ValidationError, validate_search_request

API_VERSION = "1.0.0"
LOGGER = logging.getLogger("jobportal.api")


def parse_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(
    *,
    locale: str | None = None,
    cors_origins: list[str] | None = None,
    search_delay: float | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    profile = get_locale_profile(locale or os.getenv("PORTAL_LOCALE"))
    resolved_origins = (
        cors_origins
        if cors_origins is not None
        else parse_origins(os.getenv("PORTAL_CORS_ORIGINS", "*"))
    )
    resolved_delay = search_delay if search_delay is not None else search_delay_from_env()
    generator = MockJobGenerator(profile, rng=rng)

    app = FastAPI(title="Deep Research Job Portal API", version=API_VERSION)
    app.state.generator = generator
    app.add_middleware(
        CORSMiddleware,
        allow_origins=resolved_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def observability_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - started) * 1000
            LOGGER.exception(
                json.dumps(
                    {
                        "event": "request_complete",
                        "request_id": request_id,
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": 500,
                        "duration_ms": round(duration_ms, 3),
                        "error": str(exc),
                    }
                )
            )
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "request_id": request_id},
                headers={"x-request-id": request_id},
            )

        duration_ms = (time.perf_counter() - started) * 1000
        response.headers["x-request-id"] = request_id
        LOGGER.info(
            json.dumps(
                {
                    "event": "request_complete",
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 3),
                    "source_ip": request.client.host if request.client else None,
                }
            )
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        LOGGER.info("rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content=validation_error_envelope("Request body is malformed"),
        )

    @app.get("/api/health", response_model=HealthStatus)
    async def health() -> HealthStatus:
        return HealthStatus(
            status="ONLINE",
            message="Deep Research Job Portal API is running",
            version=API_VERSION,
            timestamp=now_utc_iso(),
        )

    @app.post("/api/search")
    async def search(payload: SearchRequest, request: Request) -> JSONResponse:
        try:
            search_request = validate_search_request(payload)
            active = request.app.state.generator
            if search_request.locale:
                active = active.with_profile(get_locale_profile(search_request.locale))
        except (ValidationError, UnknownLocaleError) as exc:
            return JSONResponse(status_code=400, content=validation_error_envelope(str(exc)))

        try:
            jobs = active.generate(search_request.query, search_request.location)
            envelope = format_search_response(jobs, search_request.query, search_request.location)
        except Exception as exc:
            LOGGER.exception("search failed for query=%r", search_request.query)
            return JSONResponse(status_code=500, content=internal_error_envelope(exc))
        return JSONResponse(content=envelope.model_dump())

    @app.get("/api/jobs/{job_id}", response_model=JobDetail)
    async def job_detail(job_id: str) -> JobDetail:
        return lookup_job_detail(job_id)

    app.include_router(build_ui_router(LocalJobSource(generator), search_delay=resolved_delay))

    @app.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
    async def portal_page(full_path: str) -> str:
        del full_path
        return index_html()

    return app


app = create_app()
