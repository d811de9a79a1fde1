from __future__ import annotations

import random
from typing import Any

import frontend.gateway as frontend_gateway
import frontend.main as frontend_main
import pytest
from fastapi.testclient import TestClient
from portal_api.main import create_app

pytestmark = [pytest.mark.integration, pytest.mark.smoke]


class PortalBackedAsyncClient:
    """Routes the frontend gateway's upstream calls into an in-process portal API."""

    def __init__(self, portal: TestClient) -> None:
        self.portal = portal

    async def __aenter__(self) -> PortalBackedAsyncClient:
        return self

    async def __aexit__(self, *_: object) -> bool:
        return False

    async def request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        path = url.removeprefix("http://portal-api:3000")
        return self.portal.request(method, path, json=json, headers=headers)


def test_smoke_portal_api_contract() -> None:
    app = create_app(search_delay=0, rng=random.Random(1))

    with TestClient(app) as client:
        health = client.get("/api/health")
        search = client.post("/api/search", json={"query": "Developer"})
        missing = client.post("/api/search", json={"location": "Remote"})
        detail = client.get("/api/jobs/123")
        page = client.get("/")

    assert health.status_code == 200
    assert health.json()["status"] == "ONLINE"
    assert search.status_code == 200
    assert 3 <= search.json()["count"] <= 7
    assert missing.status_code == 400
    assert detail.json()["id"] == "123"
    assert "search-btn" in page.text


def test_smoke_frontend_gateway_through_portal_api(monkeypatch: pytest.MonkeyPatch) -> None:
    portal_app = create_app(search_delay=0, rng=random.Random(2))
    frontend_app = frontend_main.create_app(
        api_base_url="http://portal-api:3000",
        search_delay=0,
    )

    with TestClient(portal_app) as portal, TestClient(frontend_app) as client:
        monkeypatch.setattr(
            frontend_gateway.httpx,
            "AsyncClient",
            lambda *_, **__: PortalBackedAsyncClient(portal),
        )
        health = client.get("/health")
        response = client.post(
            "/ui/search",
            json={"query": "Designer", "location": "Remote", "job_count": 0},
        )

    assert health.status_code == 200
    body = response.json()
    assert body["state"] == "COMPLETE"
    cards = [node for node in body["results"] if node["attrs"]["class"] == "job-card"]
    assert 3 <= len(cards) <= 7
    assert all("LOCATION: Remote" in card["children"][2]["text"] for card in cards)
    assert body["job_count"] == len(cards)
