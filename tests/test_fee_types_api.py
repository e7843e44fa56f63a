from tests.conftest import SCHOOL_ID

BASE = "/api/v1/feetype"


def fee_type_payload(**overrides):
    payload = {
        "feeType": "Tuition",
        "accountType": "Revenue",
        "schoolId": SCHOOL_ID,
        "categoryId": "category-1",
        "feeCategory": "ACADEMIC",
    }
    payload.update(overrides)
    return payload


def test_create_fee_type_in_active_year(client, active_year):
    response = client.post(BASE, json=fee_type_payload())

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["academicYearId"] == active_year["id"]
    assert data["accountType"] == "Revenue"
    assert data["feeCategory"] == "ACADEMIC"


def test_misc_flag_forces_miscellaneous_category(client, active_year):
    response = client.post(BASE, json=fee_type_payload(isMisc=True))
    assert response.json()["data"]["feeCategory"] == "MISCELLANEOUS"


def test_create_missing_mandatory_field_is_422(client, active_year):
    response = client.post(BASE, json={"feeType": "Tuition", "schoolId": SCHOOL_ID})

    assert response.status_code == 422
    assert response.json()["message"] == "All Fields are Mandatory"


def test_create_without_active_year_is_400(client):
    response = client.post(BASE, json=fee_type_payload())

    assert response.status_code == 400
    assert response.json()["message"] == "Please Select An Academic Year"


def test_duplicate_fee_type_is_400(client, active_year):
    client.post(BASE, json=fee_type_payload())
    response = client.post(BASE, json=fee_type_payload())

    assert response.status_code == 400
    assert response.json()["message"] == "Fee Type Already Exist"


def test_same_name_in_other_category_is_allowed(client, active_year):
    client.post(BASE, json=fee_type_payload())
    response = client.post(BASE, json=fee_type_payload(categoryId="category-2"))
    assert response.status_code == 201


def test_list_is_scoped_to_active_year_and_filters(client, active_year):
    client.post(BASE, json=fee_type_payload())
    client.post(BASE, json=fee_type_payload(feeType="Bus", accountType="Cash", isMisc=True))

    all_types = client.get(BASE, params={"schoolId": SCHOOL_ID}).json()
    assert all_types["resultCount"] == 2

    misc = client.get(BASE, params={"schoolId": SCHOOL_ID, "isMisc": "true"}).json()
    assert [item["feeType"] for item in misc["data"]] == ["Bus"]

    cash = client.get(BASE, params={"schoolId": SCHOOL_ID, "accountType": "Cash"}).json()
    assert cash["resultCount"] == 1


def test_list_paginates_only_with_page_and_limit(client, active_year):
    for name in ("Tuition", "Library", "Lab"):
        client.post(BASE, json=fee_type_payload(feeType=name))

    unpaged = client.get(BASE, params={"schoolId": SCHOOL_ID, "limit": 1}).json()
    assert len(unpaged["data"]) == 3

    paged = client.get(BASE, params={"schoolId": SCHOOL_ID, "page": 0, "limit": 2}).json()
    assert len(paged["data"]) == 2
    assert paged["resultCount"] == 3


def test_list_without_active_year_is_400(client):
    response = client.get(BASE, params={"schoolId": SCHOOL_ID})
    assert response.status_code == 400


def test_list_empty_is_404(client, active_year):
    response = client.get(BASE, params={"schoolId": SCHOOL_ID})

    assert response.status_code == 404
    assert response.json()["message"] == "No Fee Type Found"


def test_read_update_and_delete(client, active_year):
    created = client.post(BASE, json=fee_type_payload()).json()["data"]

    read = client.get(f"{BASE}/{created['id']}")
    assert read.json()["data"]["feeType"] == "Tuition"

    updated = client.put(f"{BASE}/{created['id']}", json={"description": "Term fees"})
    assert updated.status_code == 200
    assert updated.json()["data"]["description"] == "Term fees"
    assert updated.json()["data"]["feeType"] == "Tuition"

    assert client.delete(f"{BASE}/{created['id']}").status_code == 200
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_unknown_fee_type_is_404(client):
    response = client.put(f"{BASE}/missing", json={"description": "x"})

    assert response.status_code == 404
    assert response.json()["message"] == "Fee Type Not Found"
