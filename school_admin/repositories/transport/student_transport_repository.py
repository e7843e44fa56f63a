# school_admin/repositories/transport/student_transport_repository.py
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from school_admin.models.enums import FeeStatus
from school_admin.models.transport import (
    BusDriver,
    BusRoute,
    StudentTransport,
    TransportFeeDetail,
)
from school_admin.repositories.base import BaseRepository

# Ledger states that count towards the dashboard totals
DASHBOARD_FEE_STATUSES = (FeeStatus.PAID, FeeStatus.DUE, FeeStatus.LATE)


class StudentTransportRepository(BaseRepository[StudentTransport]):
    model = StudentTransport

    def __init__(self, session: Session):
        super().__init__(session, StudentTransport)

    def get_by_student(self, student_id: str) -> Optional[StudentTransport]:
        return self.get_by(student_id=student_id)

    def search(
        self,
        *,
        school_id: Optional[str],
        section_id: Optional[str],
        search_query: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[StudentTransport], int]:
        stmt = (
            self._base_select()
            .join(BusRoute, StudentTransport.selected_route_id == BusRoute.id)
            .join(BusDriver, BusRoute.driver_id == BusDriver.id)
        )
        if school_id:
            stmt = stmt.where(StudentTransport.school_id == school_id)
        if section_id:
            stmt = stmt.where(StudentTransport.section_id == section_id)
        if search_query:
            pattern = f"%{search_query}%"
            stmt = stmt.where(or_(BusRoute.route_name.ilike(pattern), BusDriver.name.ilike(pattern)))

        total = self._count_of(stmt)
        items = self.session.execute(
            stmt.order_by(StudentTransport.created_at.desc()).offset(skip).limit(limit)
        ).unique().scalars().all()
        return list(items), total

    def get_fee_detail(self, student_transport_id: str, fee_detail_id: str) -> Optional[TransportFeeDetail]:
        stmt = select(TransportFeeDetail).where(
            TransportFeeDetail.student_transport_id == student_transport_id,
            TransportFeeDetail.id == fee_detail_id,
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def month_totals(self, school_id: str, month_name: str) -> Tuple[Decimal, Decimal]:
        """Sum of paid and due amounts of one month's ledger entries."""
        stmt = (
            select(
                func.coalesce(func.sum(TransportFeeDetail.paid_amount), 0),
                func.coalesce(func.sum(TransportFeeDetail.due_amount), 0),
            )
            .join(StudentTransport, TransportFeeDetail.student_transport_id == StudentTransport.id)
            .where(
                StudentTransport.school_id == school_id,
                TransportFeeDetail.month_name == month_name,
                TransportFeeDetail.status.in_(DASHBOARD_FEE_STATUSES),
            )
        )
        paid, due = self.session.execute(stmt).one()
        return Decimal(str(paid)), Decimal(str(due))
