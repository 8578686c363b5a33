"""
Tests for the demo data and chart endpoints.
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


def test_random_points_defaults(client: TestClient) -> None:
    resp = client.get("/api/demo/points", params={"seed": 3})
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["points"]) == 100
    assert data["labels"] == [p[0] for p in data["points"]]
    assert data["labels"] == sorted(data["labels"])


def test_random_points_out_of_range_count(client: TestClient) -> None:
    assert client.get("/api/demo/points", params={"numPoints": 1}).status_code == 422
    assert client.get("/api/demo/points", params={"numPoints": 10001}).status_code == 422


def test_random_points_impossible_request(client: TestClient) -> None:
    resp = client.get("/api/demo/points", params={"numPoints": 50, "xCeiling": 10})
    assert resp.status_code == 400


def test_demo_charts_clamps_epsilon(client: TestClient) -> None:
    """Slider values are clamped to 0.1–100 before simplification."""
    resp = client.post("/api/demo/charts", json={"numPoints": 30, "epsilon": 500, "seed": 9})
    assert resp.status_code == 200
    data = resp.json()
    assert data["epsilon"] == 100.0
    original, simplified = data["charts"]
    assert original["data"]["datasets"][0]["label"] == "Without RDP Tolerance"
    assert len(original["data"]["datasets"][0]["data"]) == 30
    simplified_points = simplified["data"]["datasets"][0]["data"]
    # Every y lies in [0, 100], so nothing deviates by more than 100
    assert len(simplified_points) == 2
    assert simplified_points[0] == original["data"]["datasets"][0]["data"][0]
    assert simplified_points[-1] == original["data"]["datasets"][0]["data"][-1]


def test_demo_charts_default_point_count(client: TestClient) -> None:
    resp = client.post("/api/demo/charts", json={"epsilon": 0.0})
    assert resp.status_code == 200
    data = resp.json()
    assert data["epsilon"] == pytest.approx(0.1)
    assert len(data["charts"][0]["data"]["datasets"][0]["data"]) == 100


def test_demo_charts_rejects_bad_point_count(client: TestClient) -> None:
    resp = client.post("/api/demo/charts", json={"numPoints": 1, "epsilon": 1})
    assert resp.status_code == 422
