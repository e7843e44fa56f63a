from decimal import Decimal

import pytest

from tests.conftest import SCHOOL_ID

PAYMENT = "/api/v1/transportation/payment"


@pytest.fixture
def assignment(assign_student):
    return assign_student().json()["data"]


def entry_for(transport, month):
    return next(entry for entry in transport["feeDetails"] if entry["monthName"] == month)


def pay(client, assignment, month, **overrides):
    payload = {
        "studentId": assignment["studentId"],
        "feeDetailId": entry_for(assignment, month)["id"],
        "status": "APPROVED",
        "paidAmount": "900",
        "paymentMethod": "CASH",
        "createdBy": "clerk",
        "transactionDate": "2024-03-05T10:00:00+00:00",
    }
    payload.update(overrides)
    return client.post(PAYMENT, json=payload)


def test_on_time_payment_marks_entry_paid(client, assignment):
    response = pay(client, assignment, "March")

    assert response.status_code == 200
    entry = entry_for(response.json()["data"], "March")
    assert entry["status"] == "Paid"
    assert Decimal(entry["paidAmount"]) == Decimal("900")
    assert Decimal(entry["dueAmount"]) == Decimal("0")
    assert len(entry["receiptId"]) == 10
    assert entry["paymentMethod"] == "CASH"
    assert entry["createdBy"] == "clerk"


def test_payment_after_cutoff_is_late(client, assignment):
    response = pay(client, assignment, "March", transactionDate="2024-03-12T10:00:00+00:00")
    assert entry_for(response.json()["data"], "March")["status"] == "Late"


def test_advance_payment_for_later_month_is_paid(client, assignment):
    response = pay(client, assignment, "April", transactionDate="2024-03-25T10:00:00+00:00")
    assert entry_for(response.json()["data"], "April")["status"] == "Paid"


def test_non_cash_payment_keeps_bank_details(client, assignment):
    response = pay(
        client,
        assignment,
        "March",
        paymentMethod="ONLINE",
        bankName="State Bank",
        transactionId="TXN-42",
    )
    entry = entry_for(response.json()["data"], "March")
    assert entry["bankName"] == "State Bank"
    assert entry["transactionId"] == "TXN-42"


def test_cash_payment_drops_bank_details(client, assignment):
    response = pay(client, assignment, "March", bankName="State Bank", transactionId="TXN-42")
    entry = entry_for(response.json()["data"], "March")
    assert entry["bankName"] is None
    assert entry["transactionId"] is None


def test_rejected_payment_leaves_ledger_untouched(client, assignment):
    response = pay(client, assignment, "March", status="REJECTED")

    assert response.status_code == 200
    entry = entry_for(response.json()["data"], "March")
    assert entry["status"] == "Due"
    assert entry["receiptId"] is None
    assert Decimal(entry["dueAmount"]) == Decimal("900")


def test_unknown_student_is_404(client, assignment):
    response = pay(client, assignment, "March", studentId="nobody")

    assert response.status_code == 404
    assert response.json()["message"] == "Transport not found"


def test_unknown_fee_detail_is_404(client, assignment):
    response = pay(client, assignment, "March", feeDetailId="missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Fee detail not found"


def test_months_lists_calendar(client):
    body = client.get("/api/v1/transportation/months").json()
    assert body["resultCount"] == 12
    assert body["data"][0] == "January"
    assert body["data"][-1] == "December"


def test_dashboard_counts_and_month_totals(client, route, assign_student):
    first = assign_student("student-1").json()["data"]
    assign_student("student-2")
    pay(client, first, "March", paidAmount="400")

    body = client.get("/api/v1/transportation/dashboard", params={"schoolId": SCHOOL_ID}).json()
    data = body["data"]
    assert data["studentsCount"] == 2
    assert data["routesCount"] == 1
    assert data["vehiclesCount"] == 1
    assert data["driverCount"] == 1
    assert data["stopsCount"] == 2
    assert data["feeDetails"]["monthName"] == "March"
    assert Decimal(data["feeDetails"]["paidAmount"]) == Decimal("400")
    # 500 left on the paid entry plus 900 on the other student's due entry
    assert Decimal(data["feeDetails"]["dueAmount"]) == Decimal("1400")


def test_dashboard_ignores_upcoming_entries(client, assign_student):
    assign_student()

    body = client.get(
        "/api/v1/transportation/dashboard",
        params={"schoolId": SCHOOL_ID, "month": "April"},
    ).json()
    assert Decimal(body["data"]["feeDetails"]["dueAmount"]) == Decimal("0")
