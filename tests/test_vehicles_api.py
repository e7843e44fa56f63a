from tests.conftest import SCHOOL_ID, vehicle_payload

BASE = "/api/v1/transportation/vehicles"


def test_add_vehicle(client):
    response = client.post(BASE, json=vehicle_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Vehicle Added Successfully"
    assert body["data"]["taxValid"] == "2025-12-31"
    assert body["data"]["seatingCapacity"] == 2


def test_add_missing_field_is_422(client):
    payload = vehicle_payload()
    del payload["registrationNumber"]

    response = client.post(BASE, json=payload)
    assert response.status_code == 422
    assert response.json()["message"] == "Please Provide All Required Fields"


def test_duplicate_registration_is_400(client, vehicle):
    response = client.post(BASE, json=vehicle_payload(assignedVehicleNumber=2))

    assert response.status_code == 400
    assert response.json()["message"] == "Vehicle with Same Registration Number already exists"


def test_duplicate_vehicle_number_is_400(client, vehicle):
    response = client.post(BASE, json=vehicle_payload(registrationNumber="TN01ZZ9999"))

    assert response.status_code == 400
    assert response.json()["message"] == "Vehicle Number already exists"


def test_list_searches_registration_and_reports_routes(client, vehicle, route):
    client.post(BASE, json=vehicle_payload(registrationNumber="KA05XY0001", assignedVehicleNumber=2))

    body = client.get(BASE, params={"schoolId": SCHOOL_ID, "searchQuery": "tn01"}).json()
    assert body["resultCount"] == 1
    assert body["data"][0]["id"] == vehicle["id"]
    assert body["data"][0]["routeNames"] == ["North Loop"]


def test_list_paginates(client, vehicle):
    client.post(BASE, json=vehicle_payload(registrationNumber="KA05XY0001", assignedVehicleNumber=2))

    body = client.get(BASE, params={"schoolId": SCHOOL_ID, "page": 0, "limit": 1}).json()
    assert len(body["data"]) == 1
    assert body["resultCount"] == 2


def test_vehicle_numbers(client, vehicle):
    body = client.get(f"{BASE}/numbers", params={"schoolId": SCHOOL_ID}).json()
    assert body["data"] == [
        {"id": vehicle["id"], "registrationNumber": "TN01AB1234", "assignedVehicleNumber": 1}
    ]


def test_view_attachments(client):
    created = client.post(BASE, json=vehicle_payload(attachments=["rc.pdf"])).json()["data"]

    body = client.get(f"{BASE}/{created['id']}/view").json()
    assert body["data"] == {"id": created["id"], "attachments": ["rc.pdf"]}


def test_get_unknown_vehicle_is_404(client):
    response = client.get(f"{BASE}/missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Vehicle not Found"


def test_update_vehicle(client, vehicle):
    response = client.put(f"{BASE}/{vehicle['id']}", json={"vehicleMode": "Van", "fcValid": "01/01/2026"})

    assert response.status_code == 200
    assert response.json()["data"]["vehicleMode"] == "Van"
    assert response.json()["data"]["fcValid"] == "2026-01-01"


def test_update_to_taken_registration_is_400(client, vehicle):
    other = client.post(
        BASE, json=vehicle_payload(registrationNumber="KA05XY0001", assignedVehicleNumber=2)
    ).json()["data"]

    response = client.put(f"{BASE}/{other['id']}", json={"registrationNumber": "TN01AB1234"})
    assert response.status_code == 400


def test_delete_vehicle_used_by_route_is_400(client, route):
    response = client.delete(f"{BASE}/{route['vehicleId']}")

    assert response.status_code == 400
    assert response.json()["message"] == "Vehicle Is Assigned To A Route"


def test_delete_vehicle(client, vehicle):
    assert client.delete(f"{BASE}/{vehicle['id']}").status_code == 200
    assert client.get(f"{BASE}/{vehicle['id']}").status_code == 404
