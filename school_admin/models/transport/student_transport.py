"""
Student Transport Models

A student's seat on a route plus the monthly fee ledger that goes with it.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from school_admin.models.base import BaseModel, SchoolScopedMixin
from school_admin.models.enums import FeeStatus, TransportSchedule
from school_admin.models.types import JSONList

if TYPE_CHECKING:
    from school_admin.models.transport.route import BusRoute


class StudentTransport(SchoolScopedMixin, BaseModel):
    __tablename__ = "student_transports"

    section_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    academic_year_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("academic_years.id"),
        nullable=True,
        index=True,
    )

    transport_schedule: Mapped[TransportSchedule] = mapped_column(
        Enum(TransportSchedule, name="transport_schedule_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TransportSchedule.BOTH,
    )
    selected_route_id: Mapped[str] = mapped_column(ForeignKey("bus_routes.id"), nullable=False, index=True)

    # Id of a RouteStop on the selected route; kept as a plain reference so
    # stop edits on the route never cascade into assignments
    stop_id: Mapped[str] = mapped_column(String(36), nullable=False)

    fee_months: Mapped[List[str]] = mapped_column(JSONList, nullable=False, default=list)
    monthly_fees: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    trip_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    route: Mapped["BusRoute"] = relationship(lazy="joined")
    fee_details: Mapped[List["TransportFeeDetail"]] = relationship(
        back_populates="student_transport",
        cascade="all, delete-orphan",
        order_by="TransportFeeDetail.position",
        lazy="selectin",
    )


class TransportFeeDetail(BaseModel):
    """One month of the transport fee ledger."""

    __tablename__ = "transport_fee_details"

    student_transport_id: Mapped[str] = mapped_column(
        ForeignKey("student_transports.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    month_name: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    paid_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    # May go negative on overpayment
    due_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    status: Mapped[FeeStatus] = mapped_column(
        Enum(FeeStatus, name="fee_status_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=FeeStatus.DUE,
    )

    payment_method: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    receipt_id: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    payment_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    discount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    concession: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    bank_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    transaction_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    student_transport: Mapped[StudentTransport] = relationship(back_populates="fee_details")
