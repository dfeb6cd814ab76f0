# tests/test_api.py
from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from boxpath.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _xy(p):
    return (p["x"], p["y"])


def test_health(client: TestClient) -> None:
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_detour_round_trip(client: TestClient) -> None:
    r = client.post(
        "/api/path",
        json={
            "source": {"x": 5, "y": 15},
            "target": {"x": 25, "y": 15},
            "box_size": 10,
            "terrain": [{"x": 15, "y": 5}, {"x": 15, "y": 15}],
            "options": {"return_visited": True},
        },
    )
    assert r.status_code == 200
    body = r.json()

    assert [_xy(n["point"]) for n in body["path"]] == [(5, 15), (5, 25), (15, 25), (25, 25), (25, 15)]
    assert body["path"][0]["source"] is None
    assert _xy(body["path"][1]["source"]) == (5, 15)
    assert body["expanded"] == len(body["visited"]) == 6
    assert body["runtime_ms"] >= 0


def test_float_bits_survive_the_boundary(client: TestClient) -> None:
    x = 0.1 + 0.2
    r = client.post(
        "/api/path",
        json={"source": {"x": x, "y": 1.0}, "target": {"x": 1.0, "y": 1.0}, "box_size": 10},
    )
    assert r.status_code == 200
    assert r.json()["path"][0]["point"]["x"] == x


def test_no_path_is_404(client: TestClient) -> None:
    r = client.post(
        "/api/path",
        json={
            "source": {"x": 5, "y": 5},
            "target": {"x": 45, "y": 45},
            "box_size": 10,
            "terrain": [{"x": 15, "y": 5}, {"x": 15, "y": 15}, {"x": 5, "y": 15}],
        },
    )
    assert r.status_code == 404
    assert "No path" in r.json()["detail"]


def test_step_limit_is_422(client: TestClient) -> None:
    r = client.post(
        "/api/path",
        json={
            "source": {"x": 5, "y": 5},
            "target": {"x": 505, "y": 505},
            "box_size": 10,
            "options": {"max_steps": 5},
        },
    )
    assert r.status_code == 422
    assert "5 expansions" in r.json()["detail"]


@pytest.mark.parametrize("box_size", [0, -10])
def test_non_positive_box_size_is_rejected(client: TestClient, box_size) -> None:
    r = client.post(
        "/api/path",
        json={"source": {"x": 5, "y": 5}, "target": {"x": 8, "y": 8}, "box_size": box_size},
    )
    assert r.status_code == 422


def test_internal_failure_is_500(client: TestClient, monkeypatch) -> None:
    from boxpath import main
    from boxpath.algorithms import ReconstructionInvariantViolation

    def broken(*args, **kwargs):
        raise ReconstructionInvariantViolation("Unable to find parent node")

    monkeypatch.setattr(main, "search", broken)
    r = client.post(
        "/api/path",
        json={"source": {"x": 5, "y": 5}, "target": {"x": 8, "y": 8}, "box_size": 10},
    )
    assert r.status_code == 500
    assert "ReconstructionInvariantViolation" in r.json()["detail"]


def test_walled_in_target_stops_at_default_step_limit(client: TestClient) -> None:
    from boxpath.main import SETTINGS

    ring = [{"x": 45 + dx, "y": 45 + dy} for dx in (-10, 0, 10) for dy in (-10, 0, 10) if (dx, dy) != (0, 0)]
    r = client.post(
        "/api/path",
        json={
            "source": {"x": 5, "y": 5},
            "target": {"x": 45, "y": 45},
            "box_size": 10,
            "terrain": ring,
        },
    )
    assert r.status_code == 422
    assert f"{SETTINGS.max_steps} expansions" in r.json()["detail"]


def test_invalid_box_size_from_core_is_400(client: TestClient, monkeypatch) -> None:
    from boxpath import main
    from boxpath.algorithms import InvalidBoxSize

    def rejects(*args, **kwargs):
        raise InvalidBoxSize(float("nan"))

    monkeypatch.setattr(main, "search", rejects)
    r = client.post(
        "/api/path",
        json={"source": {"x": 5, "y": 5}, "target": {"x": 8, "y": 8}, "box_size": 10},
    )
    assert r.status_code == 400
    assert "box_size must be > 0" in r.json()["detail"]


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_crash_log_summarises_terrain(client: TestClient, monkeypatch) -> None:
    from boxpath import main

    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(main, "search", broken)
    collect = _Collect()
    main.logger.addHandler(collect)
    try:
        r = client.post(
            "/api/path",
            json={
                "source": {"x": 5, "y": 5},
                "target": {"x": 8, "y": 8},
                "box_size": 10,
                "terrain": [{"x": 1005 + 10 * i, "y": 7} for i in range(50)],
            },
        )
    finally:
        main.logger.removeHandler(collect)

    assert r.status_code == 500
    (record,) = collect.records
    msg = record.getMessage()
    assert "terrain=50" in msg
    assert "box_size=10.0" in msg
    assert "1005" not in msg
    assert record.exc_info is not None
