"""
Tests for the simplification endpoint.

These tests use FastAPI's TestClient to simulate requests against the
application without running a real server.  The storage directory is
pointed at a temporary location before the app is imported so the
tests never touch a developer's database.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("POLYLINE_STORAGE_DIR", tempfile.mkdtemp(prefix="polyline-tests-"))
sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.main import app  # type: ignore


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


def test_health(client: TestClient) -> None:
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_simplify_spike(client: TestClient) -> None:
    """The spike example keeps the peak and the point where the rise starts."""
    body = {
        "points": [[0, 0], [1, 0], [2, 0], [3, 10], [4, 0], [5, 0]],
        "epsilon": 1,
    }
    resp = client.post("/api/simplify", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["points"] == [[0, 0], [2, 0], [3, 10], [5, 0]]
    meta = data["metadata"]
    assert meta["epsilon"] == 1
    assert meta["originalCount"] == 6
    assert meta["simplifiedCount"] == 4
    assert meta["reductionRatio"] == pytest.approx(4 / 6)


def test_simplify_empty_and_single(client: TestClient) -> None:
    resp = client.post("/api/simplify", json={"points": [], "epsilon": 2})
    assert resp.status_code == 200
    assert resp.json()["points"] == []
    assert resp.json()["metadata"]["reductionRatio"] == 0.0

    resp = client.post("/api/simplify", json={"points": [[5, 5]], "epsilon": 2})
    assert resp.json()["points"] == [[5, 5]]


def test_simplify_uses_default_tolerance(client: TestClient) -> None:
    """Without epsilon, 1% of the largest extent is used."""
    body = {"points": [[0, 0], [50, 0.5], [100, 0]]}
    resp = client.post("/api/simplify", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["metadata"]["epsilon"] == pytest.approx(1.0)
    assert data["points"] == [[0, 0], [100, 0]]


def test_negative_epsilon_is_rejected(client: TestClient) -> None:
    body = {"points": [[0, 0], [1, 0], [2, 0], [3, 10], [4, 0], [5, 0]], "epsilon": -1}
    resp = client.post("/api/simplify", json=body)
    assert resp.status_code == 400
    assert "Tolerance" in resp.json()["detail"]


def test_non_finite_point_is_rejected(client: TestClient) -> None:
    """NaN coordinates are reported with the offending index."""
    content = '{"points": [[0, 0], [1, NaN], [2, 0]], "epsilon": 1}'
    resp = client.post(
        "/api/simplify",
        content=content,
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "Point 1" in resp.json()["detail"]


def test_malformed_points_fail_schema_validation(client: TestClient) -> None:
    resp = client.post("/api/simplify", json={"points": [[0, 0, 0]], "epsilon": 1})
    assert resp.status_code == 422


def test_default_tolerance_for_huge_coordinates(client: TestClient) -> None:
    """Finite coordinates spanning more than the float range are accepted."""
    body = {"points": [[-1e308, 0], [0, 1], [1e308, 0]]}
    resp = client.post("/api/simplify", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["metadata"]["epsilon"] == pytest.approx(2e306)
    assert data["points"] == [[-1e308, 0], [1e308, 0]]
