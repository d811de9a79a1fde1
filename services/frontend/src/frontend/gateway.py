from __future__ import annotations

from typing import Any

import httpx
from jobgen.models import JobListing
from jobgen.sources import JobSourceError
from jobgen.validation import ValidationError

UPSTREAM_TIMEOUT = 15


class ApiJobSource:
    """Job source backed by a remote portal API's ``/api/search``."""

    def __init__(self, base_url: str, *, timeout: float = UPSTREAM_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def search(self, query: str, location: str | None = None) -> list[JobListing]:
        payload: dict[str, Any] = {"query": query}
        if location:
            payload["location"] = location
        body = await self._request("POST", "/api/search", payload)
        return [JobListing.model_validate(job) for job in body.get("jobs", [])]

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        request_kwargs: dict[str, Any] = {"headers": {"accept": "application/json"}}
        if payload is not None:
            request_kwargs["json"] = payload

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method=method,
                    url=f"{self.base_url}{path}",
                    **request_kwargs,
                )
        except httpx.RequestError as exc:
            raise JobSourceError("Upstream portal API is unavailable") from exc

        try:
            response_payload = response.json()
        except ValueError:
            response_payload = {}
        if not isinstance(response_payload, dict):
            response_payload = {}

        if response.status_code >= 400:
            error = response_payload.get("error", "Upstream portal API request failed")
            if response.status_code == 400:
                raise ValidationError(error, field="query")
            message = response_payload.get("message")
            raise JobSourceError(f"{error}: {message}" if message else error)

        return response_payload
