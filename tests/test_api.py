import pytest
from fastapi.testclient import TestClient

from call_analyzer.core.config import settings
from call_analyzer.main import app

SAMPLE = "+919876543210 01/15/2024 9:30 AM, 00:05:30\n07447462059 01/15/2024 10:15 AM"


@pytest.fixture
def client():
    return TestClient(app)


def test_health_check(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_endpoint(client):
    response = client.post("/api/v1/calls/parse", json={"text": SAMPLE})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["entries"][0] == {
        "number": "919876543210",
        "timestamp": "01/15/2024 9:30 AM",
        "duration_seconds": 330,
        "duration_formatted": "00:05:30",
        "status": "connected",
    }
    assert body["entries"][1]["status"] == "missed"


def test_analyze_endpoint(client):
    response = client.post("/api/v1/calls/analyze", json={"text": SAMPLE})

    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["total_calls"] == 2
    assert summary["connected_count"] == 1
    assert summary["missed_count"] == 1
    assert summary["total_duration"] == "00:05:30"
    assert summary["average_duration"] == "00:05:30"
    assert [t["number"] for t in summary["top_numbers"]] == ["919876543210", "07447462059"]


def test_analyze_without_matches_returns_null_summary(client):
    response = client.post("/api/v1/calls/analyze", json={"text": "hello there"})

    assert response.status_code == 200
    assert response.json() == {"entries": [], "summary": None}


def test_blank_text_rejected(client):
    response = client.post("/api/v1/calls/analyze", json={"text": "   \n "})
    assert response.status_code == 400


def test_missing_text_field_rejected(client):
    response = client.post("/api/v1/calls/parse", json={})
    assert response.status_code == 422


def test_oversized_text_rejected(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_INPUT_CHARS", 10)
    response = client.post("/api/v1/calls/parse", json={"text": SAMPLE})
    assert response.status_code == 413
