# --- File: school_admin/schemas/transport/student_transport.py ---
"""
Student transport assignment and fee ledger schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from school_admin.core.constants import MONTH_NAMES
from school_admin.models.enums import FeeStatus, TransportSchedule
from school_admin.schemas.common.base import (
    BaseCreateSchema,
    BaseDBSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from school_admin.schemas.transport.route import RouteDriverInfo, RouteVehicleInfo

__all__ = [
    "StudentTransportCreate",
    "StudentTransportUpdate",
    "TransportFeeDetailResponse",
    "StudentTransportResponse",
    "StudentTransportDetail",
    "StudentRouteInfo",
    "StudentTransportListItem",
]


class StudentTransportCreate(BaseCreateSchema):
    school_id: str
    section_id: str
    student_id: str
    transport_schedule: TransportSchedule = TransportSchedule.BOTH
    selected_route_id: str
    stop_id: str
    fee_months: List[str] = Field(..., min_length=1, description="English month names billed")
    monthly_fees: Decimal = Field(..., ge=Decimal("0"))

    @field_validator("fee_months")
    @classmethod
    def validate_fee_months(cls, v: List[str]) -> List[str]:
        unknown = [month for month in v if month not in MONTH_NAMES]
        if unknown:
            raise ValueError(f"Unknown month names: {', '.join(unknown)}")
        return v


class StudentTransportUpdate(BaseUpdateSchema):
    transport_schedule: Optional[TransportSchedule] = None
    section_id: Optional[str] = None
    stop_id: Optional[str] = None


class TransportFeeDetailResponse(BaseSchema):
    id: str
    month_name: str
    total_amount: Decimal
    paid_amount: Decimal
    due_amount: Decimal
    status: FeeStatus
    payment_method: Optional[str] = None
    receipt_id: Optional[str] = None
    payment_date: Optional[datetime] = None
    created_by: Optional[str] = None
    discount: Decimal = Decimal("0")
    concession: Decimal = Decimal("0")
    bank_name: Optional[str] = None
    transaction_id: Optional[str] = None


class StudentTransportResponse(BaseDBSchema):
    school_id: str
    section_id: str
    student_id: str
    academic_year_id: Optional[str] = None
    transport_schedule: TransportSchedule
    selected_route_id: str
    stop_id: str
    fee_months: List[str] = Field(default_factory=list)
    monthly_fees: Decimal
    trip_number: Optional[int] = None
    fee_details: List[TransportFeeDetailResponse] = Field(default_factory=list)


class StudentRouteInfo(BaseSchema):
    id: str
    route_name: str
    stop_id: Optional[str] = None
    stop: Optional[str] = None


class StudentTransportDetail(StudentTransportResponse):
    """Single assignment with its route, stop and current-month entry."""

    route: StudentRouteInfo
    current_fee_detail: Optional[TransportFeeDetailResponse] = None
    fee_amount: Optional[Decimal] = Field(default=None, description="Total of the current month entry")


class StudentTransportListItem(BaseSchema):
    id: str
    school_id: str
    section_id: str
    student_id: str
    transport_schedule: TransportSchedule
    trip_number: Optional[int] = None
    route: StudentRouteInfo
    driver: RouteDriverInfo
    vehicle: RouteVehicleInfo
    fee_details: List[TransportFeeDetailResponse] = Field(
        default_factory=list,
        description="Ledger entries of the current month",
    )
    created_at: Optional[datetime] = None
