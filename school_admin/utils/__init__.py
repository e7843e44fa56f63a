"""Stateless helpers shared by services."""

from school_admin.utils.date_utils import (
    add_months,
    expand_month_range,
    generate_schedule_dates,
    month_name,
    normalize_month,
    parse_input_date,
    rollover_date,
    today_in,
)
from school_admin.utils.receipt import generate_receipt_id

__all__ = [
    "add_months",
    "expand_month_range",
    "generate_schedule_dates",
    "month_name",
    "normalize_month",
    "parse_input_date",
    "rollover_date",
    "today_in",
    "generate_receipt_id",
]
