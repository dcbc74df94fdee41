"""Tests for the HTTP adapter."""

import pytest
from fastapi.testclient import TestClient

from agent_parser.aggregator import facet_counter
from agent_parser.config import settings
from agent_parser.main import app

EDGE_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36 Edg/91.0.864.59"
)
SAFARI_IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1"
)


@pytest.fixture(autouse=True)
def reset_counter():
    facet_counter.get_and_reset()
    yield
    facet_counter.get_and_reset()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_post_single_item(client) -> None:
    response = client.post("/api/parse", json={"user_agent": EDGE_WINDOWS})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["processed"] == 1
    assert body["results"] == [{"browser": "Edge", "os": "Windows", "device_type": "Desktop"}]
    assert body["summary"]["by_browser"] == {"Edge": 1}


def test_post_batch_with_invalid_items(client) -> None:
    """Given a batch mixing good and bad items, then bad ones are counted, not fatal."""
    response = client.post(
        "/api/parse",
        json=[
            {"user_agent": SAFARI_IPHONE},
            {"user_agent": "xyz-not-a-real-agent-000", "ip": "203.0.113.10"},
            {"agent": "missing field"},
            "not an object",
        ],
    )

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "partial"
    assert body["processed"] == 2
    assert body["errors"] == 2
    assert body["results"][1] == {"browser": "Unknown", "os": "Unknown", "device_type": "Unknown"}


def test_post_only_invalid_items_is_error(client) -> None:
    body = client.post("/api/parse", json=[{"nope": 1}]).json()

    assert body["status"] == "error"
    assert body["processed"] == 0
    assert body["errors"] == 1


def test_post_scalar_body_is_error(client) -> None:
    body = client.post("/api/parse", json="just a string").json()

    assert body["status"] == "error"
    assert body["errors"] == 1


def test_post_unreadable_body_is_error(client) -> None:
    response = client.post(
        "/api/parse", content=b"{not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 200
    assert response.json()["status"] == "error"


def test_post_oversized_batch_is_refused(client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "max_batch_size", 2)

    response = client.post("/api/parse", json=[{"user_agent": SAFARI_IPHONE}] * 3)

    assert response.status_code == 413


def test_get_with_query_parameter(client) -> None:
    response = client.get("/api/parse", params={"ua": SAFARI_IPHONE})

    assert response.status_code == 200
    assert response.json() == {"browser": "Safari", "os": "IOS", "device_type": "Mobile"}


def test_get_without_query_uses_request_header(client) -> None:
    response = client.get("/api/parse", headers={"User-Agent": EDGE_WINDOWS})

    assert response.json()["browser"] == "Edge"


def test_facet_stats_accumulate_and_reset(client) -> None:
    client.post("/api/parse", json=[{"user_agent": SAFARI_IPHONE}, {"user_agent": EDGE_WINDOWS}])
    client.get("/api/parse", params={"ua": SAFARI_IPHONE})

    stats = client.get("/stats/facets").json()
    assert stats["total"] == 3
    assert stats["by_device_type"] == {"Mobile": 2, "Desktop": 1}

    reset = client.delete("/stats/facets").json()
    assert reset["total"] == 3
    assert client.get("/stats/facets").json()["total"] == 0


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}
