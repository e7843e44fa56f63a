from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from school_admin.api.deps import get_clock
from school_admin.core.clock import FixedClock
from school_admin.db.init_db import drop_db, init_db
from school_admin.db.session import get_db
from school_admin.main import create_app

# 15 March 2024, so "March" is the current month everywhere
FROZEN_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)
SCHOOL_ID = "school-1"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FixedClock(FROZEN_NOW)


@pytest.fixture
def app(db_session, clock):
    app = create_app()

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


# --- Payload builders ------------------------------------------------------------

def academic_year_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "name": "2023-2024",
        "startDate": "01/06/2023",
        "endDate": "31/03/2024",
        "schoolId": SCHOOL_ID,
    }
    payload.update(overrides)
    return payload


def vehicle_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "registrationNumber": "TN01AB1234",
        "assignedVehicleNumber": 1,
        "seatingCapacity": 2,
        "taxValid": "31/12/2025",
        "fcValid": "30/06/2025",
        "vehicleMode": "Bus",
        "schoolId": SCHOOL_ID,
    }
    payload.update(overrides)
    return payload


def driver_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "name": "Ravi Kumar",
        "contactNumber": "9876543210",
        "emergencyNumber": "9876543211",
        "drivingLicense": "DL-0001",
        "aadharNumber": "123456789012",
        "bloodGroup": "O+",
        "address": "12 Lake Road",
        "schoolId": SCHOOL_ID,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def active_year(client) -> Dict[str, Any]:
    response = client.post("/api/v1/config", json=academic_year_payload())
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def vehicle(client) -> Dict[str, Any]:
    response = client.post("/api/v1/transportation/vehicles", json=vehicle_payload())
    assert response.status_code == 200
    return response.json()["data"]


@pytest.fixture
def driver(client) -> Dict[str, Any]:
    response = client.post("/api/v1/transportation/drivers", json=driver_payload())
    assert response.status_code == 200
    return response.json()["data"]


@pytest.fixture
def route(client, vehicle, driver) -> Dict[str, Any]:
    response = client.post(
        "/api/v1/transportation/routes",
        json={
            "routeName": "North Loop",
            "vehicleId": vehicle["id"],
            "driverId": driver["id"],
            "schoolId": SCHOOL_ID,
            "stops": [
                {"label": "Stop 1", "stop": "Main Gate", "oneWay": "500", "roundTrip": "900"},
                {"label": "Stop 2", "stop": "Market", "oneWay": "600", "roundTrip": "1000"},
            ],
        },
    )
    assert response.status_code == 200
    return response.json()["data"]


@pytest.fixture
def assign_student(client, route, active_year):
    def _assign(student_id: str = "student-1", **overrides: Any):
        payload = {
            "schoolId": SCHOOL_ID,
            "sectionId": "section-a",
            "studentId": student_id,
            "transportSchedule": "both",
            "selectedRouteId": route["id"],
            "stopId": route["stops"][0]["id"],
            "feeMonths": ["February", "March", "April"],
            "monthlyFees": "900",
        }
        payload.update(overrides)
        return client.post("/api/v1/transportation/students", json=payload)

    return _assign
