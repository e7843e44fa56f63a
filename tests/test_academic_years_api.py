from tests.conftest import SCHOOL_ID, academic_year_payload

BASE = "/api/v1/config"


def test_create_academic_year_expands_months(client):
    response = client.post(BASE, json=academic_year_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["resultCount"] == 1
    data = body["data"]
    assert data["months"] == [6, 7, 8, 9, 10, 11, 12, 1, 2, 3]
    assert data["startDate"] == "2023-06-01"
    assert data["endDate"] == "2024-03-31"
    assert data["isActive"] is True


def test_only_first_year_of_school_starts_active(client, active_year):
    response = client.post(
        BASE,
        json=academic_year_payload(name="2024-2025", startDate="01/06/2024", endDate="31/03/2025"),
    )
    assert response.status_code == 201
    assert response.json()["data"]["isActive"] is False


def test_create_missing_field_is_422(client):
    response = client.post(BASE, json={"name": "2023-2024", "schoolId": SCHOOL_ID})

    assert response.status_code == 422
    assert response.json() == {"message": "Please Provide All Required Fields", "statusCode": 422}


def test_create_duplicate_name_is_422(client, active_year):
    response = client.post(BASE, json=academic_year_payload())

    assert response.status_code == 422
    assert response.json()["message"] == "Academic Year 2023-2024 Already Exists"


def test_create_with_reversed_dates_is_422(client):
    response = client.post(BASE, json=academic_year_payload(startDate="01/06/2024", endDate="31/03/2024"))

    assert response.status_code == 422
    assert response.json()["message"] == "Start Date Should Be Less Than End Date"


def test_create_with_malformed_date_is_422(client):
    response = client.post(BASE, json=academic_year_payload(startDate="2023-06-01"))
    assert response.status_code == 422


def test_list_filters_by_school_and_state(client, active_year):
    client.post(
        BASE,
        json=academic_year_payload(name="2024-2025", startDate="01/06/2024", endDate="31/03/2025"),
    )

    everything = client.get(BASE, params={"schoolId": SCHOOL_ID}).json()
    assert everything["resultCount"] == 2

    active = client.get(BASE, params={"schoolId": SCHOOL_ID, "isActive": "true"}).json()
    assert active["resultCount"] == 1
    assert active["data"][0]["id"] == active_year["id"]


def test_list_paginates_with_total_count(client, active_year):
    client.post(
        BASE,
        json=academic_year_payload(name="2024-2025", startDate="01/06/2024", endDate="31/03/2025"),
    )

    body = client.get(BASE, params={"schoolId": SCHOOL_ID, "page": 1, "limit": 1}).json()
    assert len(body["data"]) == 1
    assert body["resultCount"] == 2
    assert body["data"][0]["name"] == "2024-2025"


def test_list_without_matches_is_404(client):
    response = client.get(BASE, params={"schoolId": "nobody"})

    assert response.status_code == 404
    assert response.json()["message"] == "Academic years Not Found"


def test_previous_skips_latest_year(client, active_year):
    client.post(
        BASE,
        json=academic_year_payload(name="2024-2025", startDate="01/06/2024", endDate="31/03/2025"),
    )

    body = client.get(f"{BASE}/previous", params={"schoolId": SCHOOL_ID}).json()
    assert [year["name"] for year in body["data"]] == ["2023-2024"]


def test_previous_with_single_year_is_404(client, active_year):
    response = client.get(f"{BASE}/previous", params={"schoolId": SCHOOL_ID})

    assert response.status_code == 404
    assert response.json()["message"] == "Previous Academic Years Not Found"


def test_activate_switches_off_other_years(client, active_year):
    second = client.post(
        BASE,
        json=academic_year_payload(name="2024-2025", startDate="01/06/2024", endDate="31/03/2025"),
    ).json()["data"]

    response = client.post(f"{BASE}/activate", json={"id": second["id"], "isActive": True})
    assert response.status_code == 200
    assert response.json()["data"]["isActive"] is True

    first = client.get(f"{BASE}/{active_year['id']}").json()["data"]
    assert first["isActive"] is False


def test_activate_requires_id_and_state(client, active_year):
    response = client.post(f"{BASE}/activate", json={"id": active_year["id"]})
    assert response.status_code == 422


def test_activate_unknown_year_is_404(client):
    response = client.post(f"{BASE}/activate", json={"id": "missing", "isActive": True})
    assert response.status_code == 404


def test_get_unknown_year_is_404(client):
    response = client.get(f"{BASE}/missing")

    assert response.status_code == 404
    assert response.json() == {"message": "Academic year Not Found", "statusCode": 404}


def test_update_recomputes_months(client, active_year):
    response = client.put(
        f"{BASE}/{active_year['id']}",
        json={"startDate": "01/04/2023", "endDate": "30/06/2023"},
    )

    assert response.status_code == 200
    assert response.json()["data"]["months"] == [4, 5, 6]


def test_update_requires_both_dates(client, active_year):
    response = client.put(f"{BASE}/{active_year['id']}", json={"startDate": "01/04/2023"})

    assert response.status_code == 422
    assert response.json()["message"] == "Start Date And End Date Should Be Provided Together"


def test_update_year_mapped_to_fee_schedule_is_422(client, active_year):
    client.post(
        "/api/v1/feeschedule",
        json={
            "scheduleName": "Term 1",
            "schoolId": SCHOOL_ID,
            "day": 5,
            "months": [6],
            "existMonths": active_year["months"],
            "categoryId": "category-1",
        },
    )

    response = client.put(f"{BASE}/{active_year['id']}", json={"name": "Renamed"})
    assert response.status_code == 422
    assert response.json()["message"] == "Academic Year Is Already Mapped With Fee Schedule"


def test_delete_year_mapped_to_fee_type_is_422(client, active_year):
    client.post(
        "/api/v1/feetype",
        json={"feeType": "Tuition", "accountType": "Revenue", "schoolId": SCHOOL_ID},
    )

    response = client.delete(f"{BASE}/{active_year['id']}")
    assert response.status_code == 422
    assert response.json()["message"] == "Academic Year Is Already Mapped With Fee Type Or Fee Schedule"


def test_delete_is_soft(client, active_year):
    response = client.delete(f"{BASE}/{active_year['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Deleted Successfully"

    assert client.get(f"{BASE}/{active_year['id']}").status_code == 404
