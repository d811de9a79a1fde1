from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient
from portal_api.main import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    app = create_app(locale="western", search_delay=0, rng=random.Random(42))
    with TestClient(app) as test_client:
        yield test_client


def test_search_returns_envelope_for_valid_query(client: TestClient) -> None:
    response = client.post("/api/search", json={"query": "Software Engineer", "location": "Remote"})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["count"] == len(body["jobs"])
    assert 3 <= body["count"] <= 7
    assert body["query"] == "Software Engineer"
    assert body["location"] == "Remote"
    assert all(job["location"] == "Remote" for job in body["jobs"])


def test_search_without_location_echoes_all_locations(client: TestClient) -> None:
    response = client.post("/api/search", json={"query": "Data Scientist"})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert len(body["jobs"]) >= 3
    assert body["location"] == "All locations"


def test_search_jobs_carry_required_fields(client: TestClient) -> None:
    job = client.post("/api/search", json={"query": "Engineer"}).json()["jobs"][0]

    for field in ("id", "title", "company", "location", "description", "posted", "salary"):
        assert field in job
    assert job["salary"].startswith("$")


@pytest.mark.parametrize("payload", [{"location": "Remote"}, {"query": ""}, {"query": None}])
def test_search_rejects_missing_query(client: TestClient, payload: dict[str, object]) -> None:
    response = client.post("/api/search", json=payload)

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Search query is required"}


def test_search_rejects_malformed_body(client: TestClient) -> None:
    response = client.post("/api/search", json={"query": ["not", "a", "string"]})

    assert response.status_code == 400
    assert "error" in response.json()


def test_search_does_not_trim_query(client: TestClient) -> None:
    body = client.post("/api/search", json={"query": "  Developer  "}).json()

    assert body["query"] == "  Developer  "
    assert "  Developer  " in body["jobs"][0]["title"]


def test_different_queries_yield_matching_titles(client: TestClient) -> None:
    developer = client.post("/api/search", json={"query": "Developer"}).json()
    designer = client.post("/api/search", json={"query": "Designer"}).json()

    assert "Developer" in developer["jobs"][0]["title"]
    assert "Designer" in designer["jobs"][0]["title"]


def test_search_accepts_locale_override(client: TestClient) -> None:
    body = client.post("/api/search", json={"query": "Clerk", "locale": "india"}).json()

    first = body["jobs"][0]
    assert first["title"] == "Clerk - Civil Services"
    assert first["salary"].startswith("₹")
    assert "eligibility" in first
    assert "vacancies" in first


def test_search_rejects_unknown_locale(client: TestClient) -> None:
    response = client.post("/api/search", json={"query": "Clerk", "locale": "mars"})

    assert response.status_code == 400
    assert "mars" in response.json()["error"]


def test_search_maps_generation_failures_to_500(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    class ExplodingGenerator:
        def generate(self, query: str, location: str | None = None):
            raise RuntimeError("lookup table corrupted")

    monkeypatch.setattr(client.app.state, "generator", ExplodingGenerator())

    response = client.post("/api/search", json={"query": "Developer"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal server error",
        "message": "lookup table corrupted",
    }


def test_default_locale_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTAL_LOCALE", "india")
    app = create_app(search_delay=0)

    with TestClient(app) as client:
        body = client.post("/api/search", json={"query": "Clerk"}).json()

    assert body["jobs"][0]["company"] == "Union Public Service Commission (UPSC)"
