"""
Transport fee ledger rules.

Pure functions over `TransportFeeDetail` rows: seeding a new assignment's
ledger and applying an approved payment to one entry. Persistence is left
to the caller.
"""

from datetime import date, datetime, tzinfo
from decimal import Decimal
from typing import Iterable, List, Optional

from school_admin.config.settings import settings
from school_admin.core.constants import CASH_PAYMENT_METHOD, MONTH_NAMES
from school_admin.models.enums import FeeStatus, PaymentStatus
from school_admin.models.transport import TransportFeeDetail
from school_admin.schemas.transport.payment import PaymentRequest
from school_admin.utils.date_utils import month_name


def seed_fee_ledger(fee_months: Iterable[str], monthly_fee: Decimal, today: date) -> List[TransportFeeDetail]:
    """
    One entry per billed month.

    The entry for the current calendar month is Due, every other one is
    Upcoming; elapsed months get no special treatment.
    """
    current = month_name(today)
    return [
        TransportFeeDetail(
            position=position,
            month_name=name,
            total_amount=monthly_fee,
            due_amount=monthly_fee,
            paid_amount=Decimal("0"),
            discount=Decimal("0"),
            concession=Decimal("0"),
            status=FeeStatus.DUE if name == current else FeeStatus.UPCOMING,
        )
        for position, name in enumerate(fee_months)
    ]


def current_month_entries(entries: Iterable[TransportFeeDetail], today: date) -> List[TransportFeeDetail]:
    current = month_name(today)
    return [entry for entry in entries if entry.month_name == current]


def is_late_payment(
    entry_month: str,
    transaction_date: datetime,
    cutoff_day: Optional[int] = None,
) -> bool:
    """Paid inside the billed month itself, after the cutoff day."""
    cutoff_day = settings.LATE_PAYMENT_CUTOFF_DAY if cutoff_day is None else cutoff_day
    return (
        MONTH_NAMES[transaction_date.month - 1] == entry_month
        and transaction_date.day > cutoff_day
    )


def apply_payment(
    entry: TransportFeeDetail,
    payment: PaymentRequest,
    receipt_id: str,
    tz: Optional[tzinfo] = None,
) -> bool:
    """
    Record an approved payment on a ledger entry.

    Returns False, leaving the entry untouched, for any status other than
    APPROVED. The due amount is not floored, so overpayment leaves it
    negative.
    """
    if payment.status != PaymentStatus.APPROVED:
        return False

    transaction_date = payment.transaction_date
    if tz is not None and transaction_date.tzinfo is not None:
        transaction_date = transaction_date.astimezone(tz)

    entry.status = FeeStatus.LATE if is_late_payment(entry.month_name, transaction_date) else FeeStatus.PAID
    entry.due_amount = entry.due_amount - payment.paid_amount
    entry.paid_amount = payment.paid_amount
    entry.receipt_id = receipt_id
    entry.created_by = payment.created_by
    entry.payment_date = payment.transaction_date
    entry.payment_method = payment.payment_method

    if payment.payment_method != CASH_PAYMENT_METHOD:
        entry.bank_name = payment.bank_name
        entry.transaction_id = payment.transaction_id
    return True
