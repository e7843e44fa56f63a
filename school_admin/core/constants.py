# school_admin/core/constants.py
from __future__ import annotations

"""
Core application constants.

These values centralize literals shared across modules:
- Pagination defaults.
- Calendar month names used by the transport fee ledger.
- Common HTTP header names.
"""

# Pagination defaults (pages are zero based)
DEFAULT_PAGE: int = 0

# Calendar
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Input date format for academic years and vehicle documents
INPUT_DATE_FORMAT: str = "%d/%m/%Y"

# Payment
CASH_PAYMENT_METHOD: str = "CASH"
RECEIPT_ID_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Query parameter that scopes most requests to one school
SCHOOL_QUERY_PARAM: str = "schoolId"
