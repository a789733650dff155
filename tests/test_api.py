import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from valet_parking.api import router as router_module
from valet_parking.api.router import init_router, router
from valet_parking.state.facility import Facility


@pytest.fixture
def client():
    init_router(Facility(car_capacity=1, motorcycle_capacity=2))
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    with TestClient(app) as test_client:
        yield test_client
    router_module._facility = None


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["facility_ready"] is True


def test_entry_accepted(client):
    response = client.post(
        "/api/v1/entries",
        json={"category": "Car", "vehicle_id": "SGX1234A", "timestamp": 0},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["accepted"] is True
    assert body["message"] == "Accept CarLot1"
    assert body["category"] == "Car"
    assert body["slot"] == 1


def test_entry_rejected(client):
    client.post("/api/v1/entries", json={"category": "car", "vehicle_id": "A", "timestamp": 0})

    response = client.post(
        "/api/v1/entries", json={"category": "car", "vehicle_id": "B", "timestamp": 0}
    )
    body = response.json()
    assert response.status_code == 200
    assert body["accepted"] is False
    assert body["message"] == "Reject"
    assert body["reason"] == "pool_exhausted"


def test_entry_unknown_category(client):
    response = client.post(
        "/api/v1/entries", json={"category": "truck", "vehicle_id": "T", "timestamp": 0}
    )
    assert response.json()["reason"] == "unrecognized_category"


def test_entry_negative_timestamp(client):
    response = client.post(
        "/api/v1/entries", json={"category": "car", "vehicle_id": "A", "timestamp": -5}
    )
    assert response.status_code == 422


def test_exit(client):
    client.post(
        "/api/v1/entries", json={"category": "motorcycle", "vehicle_id": "M", "timestamp": 0}
    )

    response = client.post("/api/v1/exits", json={"vehicle_id": "M", "timestamp": 3601})

    assert response.status_code == 200
    assert response.json() == {
        "message": "MotorcycleLot1 2",
        "category": "Motorcycle",
        "slot": 1,
        "hours": 2,
        "fee": 2,
    }


def test_exit_unknown_vehicle(client):
    response = client.post("/api/v1/exits", json={"vehicle_id": "ghost", "timestamp": 10})
    assert response.status_code == 404


def test_exit_before_entry(client):
    client.post("/api/v1/entries", json={"category": "car", "vehicle_id": "A", "timestamp": 100})
    response = client.post("/api/v1/exits", json={"vehicle_id": "A", "timestamp": 50})
    assert response.status_code == 409


def test_status(client):
    client.post("/api/v1/entries", json={"category": "car", "vehicle_id": "A", "timestamp": 0})

    body = client.get("/api/v1/status").json()

    assert body["parked_vehicles"] == 1
    by_category = {c["category"]: c for c in body["categories"]}
    assert by_category["Car"] == {"category": "Car", "capacity": 1, "free": 0, "occupied": 1}
    assert by_category["Motorcycle"]["free"] == 2


def test_metrics(client):
    client.post("/api/v1/entries", json={"category": "car", "vehicle_id": "A", "timestamp": 0})

    response = client.get("/api/v1/metrics")

    assert response.status_code == 200
    assert "valet_entries_total" in response.text
    assert "valet_slots_occupied" in response.text


def test_not_initialized():
    router_module._facility = None
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    with TestClient(app) as test_client:
        assert test_client.get("/api/v1/status").status_code == 503


def test_app_builds_facility_from_config(monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("facility:\n  car_capacity: 2\n  motorcycle_capacity: 1\n")
    monkeypatch.setenv("VALET_CONFIG", str(path))

    from valet_parking.main import app

    with TestClient(app) as test_client:
        body = test_client.get("/api/v1/status").json()

    router_module._facility = None
    capacities = {c["category"]: c["capacity"] for c in body["categories"]}
    assert capacities == {"Car": 2, "Motorcycle": 1}
