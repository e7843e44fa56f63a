from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from school_admin.models.enums import FeeStatus, PaymentStatus
from school_admin.models.transport import TransportFeeDetail
from school_admin.schemas.transport.payment import PaymentRequest
from school_admin.services.transport.ledger import (
    apply_payment,
    current_month_entries,
    is_late_payment,
    seed_fee_ledger,
)

TODAY = date(2024, 3, 15)


def make_entry(month="March", amount="900", status=FeeStatus.DUE):
    return TransportFeeDetail(
        month_name=month,
        total_amount=Decimal(amount),
        due_amount=Decimal(amount),
        paid_amount=Decimal("0"),
        status=status,
    )


def make_payment(**overrides):
    values = dict(
        student_id="student-1",
        fee_detail_id="entry-1",
        status=PaymentStatus.APPROVED,
        paid_amount=Decimal("900"),
        payment_method="CASH",
        created_by="clerk",
        bank_name="State Bank",
        transaction_id="TXN-1",
        transaction_date=datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return PaymentRequest(**values)


def test_seed_fee_ledger_marks_current_month_due():
    entries = seed_fee_ledger(["February", "March", "April"], Decimal("900"), TODAY)

    assert [e.month_name for e in entries] == ["February", "March", "April"]
    assert [e.status for e in entries] == [FeeStatus.UPCOMING, FeeStatus.DUE, FeeStatus.UPCOMING]
    for entry in entries:
        assert entry.total_amount == Decimal("900")
        assert entry.due_amount == Decimal("900")
        assert entry.paid_amount == Decimal("0")


def test_current_month_entries_filters_by_month_name():
    entries = seed_fee_ledger(["February", "March"], Decimal("500"), TODAY)
    assert [e.month_name for e in current_month_entries(entries, TODAY)] == ["March"]
    assert current_month_entries(entries, date(2024, 7, 1)) == []


@pytest.mark.parametrize(
    "entry_month, transaction_date, expected",
    [
        ("March", datetime(2024, 3, 10), False),
        ("March", datetime(2024, 3, 11), True),
        ("April", datetime(2024, 3, 25), False),
        ("February", datetime(2024, 3, 25), False),
    ],
)
def test_is_late_payment(entry_month, transaction_date, expected):
    assert is_late_payment(entry_month, transaction_date) is expected


def test_apply_payment_on_time_marks_paid():
    entry = make_entry()
    applied = apply_payment(entry, make_payment(), "ABCDEFGHIJ")

    assert applied is True
    assert entry.status == FeeStatus.PAID
    assert entry.paid_amount == Decimal("900")
    assert entry.due_amount == Decimal("0")
    assert entry.receipt_id == "ABCDEFGHIJ"
    assert entry.created_by == "clerk"
    assert entry.payment_method == "CASH"


def test_apply_payment_after_cutoff_in_same_month_is_late():
    entry = make_entry()
    apply_payment(entry, make_payment(transaction_date=datetime(2024, 3, 12, tzinfo=timezone.utc)), "R1")
    assert entry.status == FeeStatus.LATE


def test_apply_payment_cash_does_not_store_bank_details():
    entry = make_entry()
    apply_payment(entry, make_payment(), "R1")
    assert entry.bank_name is None
    assert entry.transaction_id is None


def test_apply_payment_non_cash_stores_bank_details():
    entry = make_entry()
    apply_payment(entry, make_payment(payment_method="ONLINE"), "R1")
    assert entry.bank_name == "State Bank"
    assert entry.transaction_id == "TXN-1"


def test_apply_payment_overpayment_leaves_negative_due():
    entry = make_entry(amount="500")
    apply_payment(entry, make_payment(paid_amount=Decimal("600")), "R1")
    assert entry.due_amount == Decimal("-100")


@pytest.mark.parametrize("status", [PaymentStatus.REQUESTED, PaymentStatus.REJECTED])
def test_apply_payment_ignores_unapproved_payments(status):
    entry = make_entry()
    applied = apply_payment(entry, make_payment(status=status), "R1")

    assert applied is False
    assert entry.status == FeeStatus.DUE
    assert entry.due_amount == Decimal("900")
    assert entry.receipt_id is None


def test_apply_payment_reads_transaction_day_in_school_timezone():
    ist = timezone(timedelta(hours=5, minutes=30))
    # 10 March in UTC is already 11 March in the school's zone
    payment = make_payment(transaction_date=datetime(2024, 3, 10, 20, 0, tzinfo=timezone.utc))

    utc_entry = make_entry()
    apply_payment(utc_entry, payment, "R1", timezone.utc)
    ist_entry = make_entry()
    apply_payment(ist_entry, payment, "R2", ist)

    assert utc_entry.status == FeeStatus.PAID
    assert ist_entry.status == FeeStatus.LATE
