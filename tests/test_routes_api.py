from tests.conftest import SCHOOL_ID, driver_payload, vehicle_payload

BASE = "/api/v1/transportation/routes"


def test_create_route_copies_capacity_and_numbers_trips(client, route, vehicle, driver):
    assert route["tripNo"] == 1
    assert route["seatingCapacity"] == 2
    assert route["availableSeats"] == 2
    assert [stop["stop"] for stop in route["stops"]] == ["Main Gate", "Market"]

    second = client.post(
        BASE,
        json={"routeName": "South Loop", "vehicleId": vehicle["id"], "driverId": driver["id"], "schoolId": SCHOOL_ID},
    )
    assert second.json()["data"]["tripNo"] == 2


def test_create_with_unknown_vehicle_is_404(client, driver):
    response = client.post(
        BASE,
        json={"routeName": "X", "vehicleId": "missing", "driverId": driver["id"], "schoolId": SCHOOL_ID},
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Vehicle not Found"


def test_create_with_unknown_driver_is_404(client, vehicle):
    response = client.post(
        BASE,
        json={"routeName": "X", "vehicleId": vehicle["id"], "driverId": "missing", "schoolId": SCHOOL_ID},
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Driver not found"


def test_search_returns_driver_vehicle_and_counts(client, route, assign_student):
    assign_student()

    body = client.get(BASE, params={"schoolId": SCHOOL_ID, "searchQuery": "ravi"}).json()
    assert body["resultCount"] == 1
    item = body["data"][0]
    assert item["driver"]["name"] == "Ravi Kumar"
    assert item["vehicle"]["registrationNumber"] == "TN01AB1234"
    assert item["stopsCount"] == 2
    assert item["studentsCount"] == 1


def test_search_without_match_is_empty(client, route):
    body = client.get(BASE, params={"schoolId": SCHOOL_ID, "searchQuery": "nowhere"}).json()
    assert body["data"] == []


def test_lookup_and_students_count(client, route, assign_student):
    assign_student()

    lookup = client.get(f"{BASE}/lookup", params={"schoolId": SCHOOL_ID}).json()
    assert lookup["data"] == [{"id": route["id"], "routeName": "North Loop"}]

    counts = client.get(f"{BASE}/students-count", params={"schoolId": SCHOOL_ID}).json()
    assert counts["data"] == [{"routeId": route["id"], "totalStudents": 1}]


def test_stops_and_trip_number(client, route):
    stops = client.get(f"{BASE}/{route['id']}/stops").json()
    assert [stop["label"] for stop in stops["data"]] == ["Stop 1", "Stop 2"]

    trip = client.get(f"{BASE}/{route['id']}/trip-number").json()
    assert trip["data"] == 1


def test_unknown_route_is_404(client):
    assert client.get(f"{BASE}/missing").status_code == 404
    response = client.get(f"{BASE}/missing/trip-number")
    assert response.status_code == 404
    assert response.json()["message"] == "Route not found"


def test_update_replaces_stops_keeping_ids(client, route):
    kept = route["stops"][1]
    response = client.put(
        f"{BASE}/{route['id']}",
        json={
            "stops": [
                {"id": kept["id"], "label": "Stop 1", "stop": "Market", "oneWay": "650", "roundTrip": "1100"},
                {"label": "Stop 2", "stop": "Station", "oneWay": "700", "roundTrip": "1200"},
            ]
        },
    )

    assert response.status_code == 200
    stops = response.json()["data"]["stops"]
    assert [stop["stop"] for stop in stops] == ["Market", "Station"]
    assert stops[0]["id"] == kept["id"]


def test_changing_vehicle_recomputes_seats(client, route, assign_student):
    assign_student()
    bigger = client.post(
        "/api/v1/transportation/vehicles",
        json=vehicle_payload(registrationNumber="KA05XY0001", assignedVehicleNumber=2, seatingCapacity=40),
    ).json()["data"]

    response = client.put(f"{BASE}/{route['id']}", json={"vehicleId": bigger["id"]})

    data = response.json()["data"]
    assert data["vehicleId"] == bigger["id"]
    assert data["seatingCapacity"] == 40
    assert data["availableSeats"] == 39


def test_update_with_unknown_driver_is_404(client, route):
    response = client.put(f"{BASE}/{route['id']}", json={"driverId": "missing"})
    assert response.status_code == 404


def test_update_driver(client, route):
    other = client.post(
        "/api/v1/transportation/drivers",
        json=driver_payload(
            name="Suresh",
            contactNumber="9000000001",
            emergencyNumber="9000000002",
            drivingLicense="DL-9",
            aadharNumber="999999999999",
        ),
    ).json()["data"]

    response = client.put(f"{BASE}/{route['id']}", json={"driverId": other["id"]})
    assert response.json()["data"]["driverId"] == other["id"]
