from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from timing_api import http_server


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(http_server, "SIMULATION_RUNS", 1000)
    return TestClient(http_server.app)


def _future(days=3) -> str:
    return (datetime.now().replace(microsecond=0) + timedelta(days=days)).isoformat()


def _body(**overrides):
    body = {
        "airport_code": "SFO",
        "flight_time": _future(),
        "travel_min_minutes": 20,
        "travel_max_minutes": 40,
    }
    body.update(overrides)
    return body


def test_calculate(client):
    response = client.post("/api/calculate", json=_body(has_checked_bag=True))
    assert response.status_code == 200
    data = response.json()
    assert data["airport_code"] == "SFO"
    assert data["tradeoff_metrics"]["prob_make_flight"] == pytest.approx(0.9)
    assert data["recommended_range"]["earliest"] <= data["optimal_leave_time"] <= data["recommended_range"]["latest"]
    assert data["samples"] is None
    assert data["debug_info"]["components"]["bag_check"] > 0


def test_calculate_unknown_airport(client):
    response = client.post("/api/calculate", json=_body(airport_code="XXX"))
    assert response.status_code == 404
    assert response.json()["code"] == "AIRPORT_NOT_FOUND"


def test_calculate_invalid_inputs(client):
    past = (datetime.now() - timedelta(hours=1)).isoformat()
    response = client.post("/api/calculate", json=_body(flight_time=past, cost_missing=9))
    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "INVALID_INPUT"
    assert "Flight time must be in the future" in data["errors"]
    assert "Cost of missing must be a level from 1 to 5" in data["errors"]


def test_calculate_malformed_body(client):
    response = client.post("/api/calculate", json={"airport_code": "SFO"})
    assert response.status_code == 422


def test_calculate_internal_error(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(http_server, "handle_calculate", boom)
    response = client.post("/api/calculate", json=_body())
    assert response.status_code == 500
    assert response.json() == {"code": "INTERNAL_ERROR", "message": "Internal server error", "errors": []}


def test_airport_search(client):
    response = client.get("/api/airports", params={"q": "den"})
    assert response.status_code == 200
    assert response.json()["airports"][0]["code"] == "DEN"


def test_airport_search_limit_bounds(client):
    assert client.get("/api/airports", params={"q": "a", "limit": 0}).status_code == 422


def test_airport_lookup(client):
    response = client.get("/api/airports/sea")
    assert response.status_code == 200
    assert response.json()["has_terminal_train"] is True
    assert client.get("/api/airports/ZZZ").status_code == 404


def test_healthcheck(client):
    response = client.get("/healthcheck")
    assert response.json() == {"status": "healthy", "service": "airport-timing-http", "num_runs": 1000}


def test_root(client):
    assert client.get("/").json()["endpoints"]["calculate"] == "/api/calculate"


@pytest.mark.parametrize(
    "field", ["curb_to_security_min", "security_to_gate_min", "door_close_min", "boarding_start_min"]
)
def test_calculate_rejects_negative_fixed_legs(client, field):
    response = client.post("/api/calculate", json=_body(**{field: -10}))
    assert response.status_code == 422


def test_calculate_rejects_infinite_travel_time(client):
    raw = (
        '{"airport_code": "SFO", "flight_time": "%s", '
        '"travel_min_minutes": 20, "travel_max_minutes": Infinity}' % _future()
    )
    response = client.post("/api/calculate", content=raw, headers={"Content-Type": "application/json"})
    assert response.status_code == 422


def test_num_runs_from_environment(monkeypatch):
    monkeypatch.setenv("AIRPORT_TIMING_NUM_RUNS", "250")
    assert http_server._read_num_runs() == 250


@pytest.mark.parametrize("value", ["0", "-5"])
def test_non_positive_num_runs_rejected(monkeypatch, value):
    monkeypatch.setenv("AIRPORT_TIMING_NUM_RUNS", value)
    with pytest.raises(ValueError):
        http_server._read_num_runs()
