from fastapi.testclient import TestClient

from school_admin.api.deps import get_vehicle_service
from school_admin.core.constants import HEADER_REQUEST_ID


def test_unexpected_error_is_masked_as_500(app):
    def broken_service():
        raise RuntimeError("database exploded")

    app.dependency_overrides[get_vehicle_service] = broken_service
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/v1/transportation/vehicles/anything")

    assert response.status_code == 500
    assert response.json() == {"message": "Something Went Wrong", "statusCode": 500}


def test_request_id_header_is_returned(client):
    response = client.get("/api/v1/transportation/months")
    assert response.headers.get(HEADER_REQUEST_ID)


def test_unknown_query_type_is_422(client):
    response = client.get("/api/v1/config", params={"isActive": "perhaps"})

    assert response.status_code == 422
    assert response.json()["message"] == "Please Provide All Required Fields"


def test_forwarded_request_id_is_echoed(client):
    response = client.get("/api/v1/transportation/months", headers={HEADER_REQUEST_ID: "abc-123"})

    assert response.headers[HEADER_REQUEST_ID] == "abc-123"
    assert response.headers.get("X-Process-Time")
