from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from portal_api.main import app

pytestmark = pytest.mark.integration


def test_health() -> None:
    with TestClient(app) as client:
        response = client.get("/api/health")

    body = response.json()
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert body["status"] == "ONLINE"
    assert body["version"] == "1.0.0"
    assert body["message"]
    assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None
