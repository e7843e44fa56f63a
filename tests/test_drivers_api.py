import pytest

from school_admin.services.transport.driver_service import DUPLICATE_DRIVER_MESSAGE
from tests.conftest import SCHOOL_ID, driver_payload

BASE = "/api/v1/transportation/drivers"


def test_add_driver(client):
    response = client.post(BASE, json=driver_payload())

    assert response.status_code == 200
    assert response.json()["data"]["contactNumber"] == "9876543210"


def test_numeric_identifiers_are_accepted(client):
    response = client.post(
        BASE,
        json=driver_payload(contactNumber=9876543210, emergencyNumber=9876543211, aadharNumber=123456789012),
    )
    assert response.status_code == 200
    assert response.json()["data"]["aadharNumber"] == "123456789012"


@pytest.mark.parametrize(
    "field, value",
    [
        ("contactNumber", "98765"),
        ("emergencyNumber", "98765432100"),
        ("aadharNumber", "1234"),
    ],
)
def test_malformed_identifiers_are_400(client, field, value):
    response = client.post(BASE, json=driver_payload(**{field: value}))
    assert response.status_code == 400


@pytest.mark.parametrize(
    "overrides",
    [
        {"contactNumber": "9000000001", "emergencyNumber": "9000000002", "aadharNumber": "999999999999"},
        {"drivingLicense": "DL-9", "emergencyNumber": "9000000002", "aadharNumber": "999999999999"},
        {"drivingLicense": "DL-9", "contactNumber": "9000000001", "aadharNumber": "999999999999"},
        {"drivingLicense": "DL-9", "contactNumber": "9000000001", "emergencyNumber": "9000000002"},
    ],
)
def test_any_reused_identifier_is_400(client, driver, overrides):
    response = client.post(BASE, json=driver_payload(**overrides))

    assert response.status_code == 400
    assert response.json()["message"] == DUPLICATE_DRIVER_MESSAGE


def test_list_searches_by_name(client, driver, route):
    client.post(
        BASE,
        json=driver_payload(
            name="Suresh",
            contactNumber="9000000001",
            emergencyNumber="9000000002",
            drivingLicense="DL-9",
            aadharNumber="999999999999",
        ),
    )

    body = client.get(BASE, params={"schoolId": SCHOOL_ID, "searchQuery": "ravi"}).json()
    assert body["resultCount"] == 1
    assert body["data"][0]["routeNames"] == ["North Loop"]


def test_lookup_returns_id_and_name(client, driver):
    body = client.get(f"{BASE}/lookup", params={"schoolId": SCHOOL_ID}).json()
    assert body["data"] == [{"id": driver["id"], "name": "Ravi Kumar"}]


def test_update_driver(client, driver):
    response = client.put(f"{BASE}/{driver['id']}", json={"address": "7 Hill Street"})

    assert response.status_code == 200
    assert response.json()["data"]["address"] == "7 Hill Street"


def test_update_with_malformed_contact_is_400(client, driver):
    response = client.put(f"{BASE}/{driver['id']}", json={"contactNumber": "12"})
    assert response.status_code == 400


def test_get_unknown_driver_is_404(client):
    response = client.get(f"{BASE}/missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Driver not found"


def test_delete_driver_on_route_is_400(client, route):
    response = client.delete(f"{BASE}/{route['driverId']}")

    assert response.status_code == 400
    assert response.json()["message"] == "Driver Is Assigned To A Route"


def test_delete_driver(client, driver):
    assert client.delete(f"{BASE}/{driver['id']}").status_code == 200
    assert client.get(f"{BASE}/{driver['id']}").status_code == 404
