# --- File: school_admin/schemas/transport/dashboard.py ---
"""
Transport dashboard schemas.
"""

from __future__ import annotations

from decimal import Decimal

from school_admin.schemas.common.base import BaseSchema

__all__ = ["DashboardFeeDetails", "DashboardResponse"]


class DashboardFeeDetails(BaseSchema):
    month_name: str
    paid_amount: Decimal = Decimal("0")
    due_amount: Decimal = Decimal("0")


class DashboardResponse(BaseSchema):
    students_count: int
    routes_count: int
    vehicles_count: int
    driver_count: int
    stops_count: int
    fee_details: DashboardFeeDetails
