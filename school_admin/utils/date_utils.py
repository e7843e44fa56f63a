"""
Calendar helpers for academic years, fee schedules and the transport ledger.

Month arithmetic here rolls day overflow into the following month
(31 January + 1 month is 3 March in a common year) rather than clamping
to the end of the month.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterable, List, Optional

from school_admin.core.constants import INPUT_DATE_FORMAT, MONTH_NAMES
from school_admin.core.exceptions import InvalidDateRangeError, ValidationError

__all__ = [
    "parse_input_date",
    "rollover_date",
    "add_months",
    "expand_month_range",
    "normalize_month",
    "generate_schedule_dates",
    "month_name",
    "today_in",
]


def parse_input_date(value: str, field_name: str = "date") -> date:
    """Parse a `DD/MM/YYYY` string, raising a 422 on malformed input."""
    try:
        return datetime.strptime(value.strip(), INPUT_DATE_FORMAT).date()
    except (AttributeError, ValueError) as exc:
        raise ValidationError(
            f"Invalid {field_name}, expected DD/MM/YYYY",
            field_errors={field_name: [str(value)]},
        ) from exc


def rollover_date(year: int, month: int, day: int) -> date:
    """
    Build a date from possibly out-of-range parts.

    `month` may exceed 12 (carried into the year) and `day` may exceed the
    month length (carried into the following month).
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def add_months(value: date, months: int) -> date:
    return rollover_date(value.year, value.month + months, value.day)


def normalize_month(
    year: int,
    month: int,
    tz: tzinfo,
    reference: Optional[datetime] = None,
) -> int:
    """
    Re-read a month number through the local UTC offset.

    UTC midnight on the first of the month is shifted back by the offset
    the zone has at `reference` (now by default) and the month is read in
    that zone. For zones whose offset does not change across the year this
    is the identity.
    """
    reference = reference or datetime.now(tz)
    offset = reference.astimezone(tz).utcoffset() or timedelta(0)
    utc_midnight = datetime(year, month, 1, tzinfo=timezone.utc)
    return (utc_midnight - offset).astimezone(tz).month


def expand_month_range(
    start: date,
    end: date,
    tz: tzinfo = timezone.utc,
    reference: Optional[datetime] = None,
) -> List[int]:
    """
    List the month numbers covered by an academic year.

    Steps one month at a time from `start` keeping the day of month while
    the cursor is not past `end`. Months are not de-duplicated, so a span
    longer than a year repeats numbers.
    """
    if start > end:
        raise InvalidDateRangeError()

    months: List[int] = []
    cursor = start
    while cursor <= end:
        months.append(normalize_month(start.year, cursor.month, tz, reference))
        cursor = add_months(cursor, 1)
    return months


def generate_schedule_dates(
    months: Iterable[int],
    day: int,
    exist_months: List[int],
    today: date,
) -> List[date]:
    """
    Concrete due dates for a fee schedule.

    A month after the first month of the academic year falls in the current
    year, anything else in the next one.
    """
    if not exist_months:
        raise ValidationError(field_errors={"existMonths": ["required"]})

    first_month = exist_months[0]
    dates: List[date] = []
    for month in months:
        year = today.year if month > first_month else today.year + 1
        dates.append(rollover_date(year, month, day))
    return dates


def month_name(value: date) -> str:
    return MONTH_NAMES[value.month - 1]


def today_in(tz: tzinfo) -> date:
    return datetime.now(tz).date()
