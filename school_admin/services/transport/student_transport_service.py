"""
Student transport service: assignments, their fee ledger and payments.

Assigning a student takes one seat on the route; deleting the assignment
gives it back, never beyond the route's seating capacity.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ConflictError, InsufficientCapacityError, ResourceNotFoundError
from school_admin.core.logging import get_structured_logger
from school_admin.core.pagination import PaginationParams
from school_admin.models.transport import BusRoute, RouteStop, StudentTransport
from school_admin.repositories.transport import RouteRepository, StudentTransportRepository
from school_admin.schemas.transport.payment import PaymentRequest
from school_admin.schemas.transport.route import RouteDriverInfo, RouteVehicleInfo
from school_admin.schemas.transport.student_transport import (
    StudentRouteInfo,
    StudentTransportCreate,
    StudentTransportDetail,
    StudentTransportListItem,
    StudentTransportResponse,
    StudentTransportUpdate,
    TransportFeeDetailResponse,
)
from school_admin.services.academic_year_scope import ActiveAcademicYearScope
from school_admin.services.base import BaseService
from school_admin.services.transport.ledger import apply_payment, current_month_entries, seed_fee_ledger
from school_admin.utils.receipt import generate_receipt_id

audit_logger = get_structured_logger("school_admin.audit.transport_fees")


class StudentTransportService(BaseService[StudentTransport, StudentTransportRepository]):
    resource_name = "Student Transport"
    not_found_message = "Student transport not found"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(StudentTransportRepository(db_session), db_session, clock)
        self.routes = RouteRepository(db_session)
        self.scope = ActiveAcademicYearScope(db_session)

    def _route_or_404(self, route_id: str) -> BusRoute:
        route = self.routes.get(route_id)
        if route is None:
            raise ResourceNotFoundError("Route", route_id, message="Selected route not found")
        return route

    def _stop_or_404(self, route_id: str, stop_id: str) -> RouteStop:
        stop = self.routes.get_stop(route_id, stop_id)
        if stop is None:
            raise ResourceNotFoundError("Stop", stop_id, message="Selected stop not found")
        return stop

    def _route_info(self, transport: StudentTransport) -> StudentRouteInfo:
        stop = self.routes.get_stop(transport.selected_route_id, transport.stop_id)
        return StudentRouteInfo(
            id=transport.route.id,
            route_name=transport.route.route_name,
            stop_id=stop.id if stop else None,
            stop=stop.stop if stop else None,
        )

    # ------------------------------------------------------------------ #
    # Assignments
    # ------------------------------------------------------------------ #
    def add(self, payload: StudentTransportCreate) -> StudentTransport:
        academic_year_id = self.scope.require_active_year_id(payload.school_id)

        if self.repository.get_by_student(payload.student_id) is not None:
            raise ConflictError("Student already exist", {"student_id": payload.student_id})

        route = self._route_or_404(payload.selected_route_id)
        self._stop_or_404(route.id, payload.stop_id)
        if route.available_seats <= 0:
            raise InsufficientCapacityError(route.id)

        with self.transaction():
            if not self.routes.take_seat(route.id):
                raise InsufficientCapacityError(route.id)
            transport = self.repository.create(
                StudentTransport(
                    school_id=payload.school_id,
                    section_id=payload.section_id,
                    student_id=payload.student_id,
                    academic_year_id=academic_year_id,
                    transport_schedule=payload.transport_schedule,
                    selected_route_id=route.id,
                    stop_id=payload.stop_id,
                    fee_months=payload.fee_months,
                    monthly_fees=payload.monthly_fees,
                    trip_number=route.trip_no,
                    fee_details=seed_fee_ledger(payload.fee_months, payload.monthly_fees, self.clock.today()),
                )
            )
        self._log_mutation(
            "added",
            transport.id,
            route_id=route.id,
            student_id=transport.student_id,
            available_seats=route.available_seats,
        )
        return transport

    def get(self, transport_id: str) -> StudentTransportDetail:
        transport = self.get_or_404(transport_id)
        current = current_month_entries(transport.fee_details, self.clock.today())
        current_entry = TransportFeeDetailResponse.model_validate(current[0]) if current else None

        base = StudentTransportResponse.model_validate(transport)
        return StudentTransportDetail(
            **base.model_dump(),
            route=self._route_info(transport),
            current_fee_detail=current_entry,
            fee_amount=current_entry.total_amount if current_entry else None,
        )

    def update(self, transport_id: str, payload: StudentTransportUpdate) -> StudentTransport:
        transport = self.get_or_404(transport_id)
        data = payload.changes()
        if "stop_id" in data:
            self._stop_or_404(transport.selected_route_id, data["stop_id"])

        with self.transaction():
            self.repository.update(transport, data)
        self._log_mutation("updated", transport.id, fields=sorted(data))
        return transport

    def delete(self, transport_id: str) -> None:
        transport = self.get_or_404(transport_id)
        route_id = transport.selected_route_id
        with self.transaction():
            self.repository.delete(transport, hard_delete=True)
            self.routes.release_seat(route_id)
        self._log_mutation("deleted", transport_id, route_id=route_id)

    def list(
        self,
        *,
        school_id: Optional[str],
        class_id: Optional[str],
        search_query: Optional[str],
        pagination: PaginationParams,
    ) -> Tuple[List[StudentTransportListItem], int]:
        transports, total = self.repository.search(
            school_id=school_id,
            section_id=class_id,
            search_query=search_query,
            skip=pagination.skip,
            limit=pagination.limit,
        )
        today = self.clock.today()
        items = [
            StudentTransportListItem(
                id=transport.id,
                school_id=transport.school_id,
                section_id=transport.section_id,
                student_id=transport.student_id,
                transport_schedule=transport.transport_schedule,
                trip_number=transport.trip_number,
                route=self._route_info(transport),
                driver=RouteDriverInfo.model_validate(transport.route.driver),
                vehicle=RouteVehicleInfo.model_validate(transport.route.vehicle),
                fee_details=[
                    TransportFeeDetailResponse.model_validate(entry)
                    for entry in current_month_entries(transport.fee_details, today)
                ],
                created_at=transport.created_at,
            )
            for transport in transports
        ]
        return items, total

    # ------------------------------------------------------------------ #
    # Payments
    # ------------------------------------------------------------------ #
    def pay(self, payload: PaymentRequest) -> StudentTransport:
        transport = self.repository.get_by_student(payload.student_id)
        if transport is None:
            raise ResourceNotFoundError(self.resource_name, payload.student_id, message="Transport not found")

        entry = self.repository.get_fee_detail(transport.id, payload.fee_detail_id)
        if entry is None:
            raise ResourceNotFoundError("Fee Detail", payload.fee_detail_id, message="Fee detail not found")

        with self.transaction():
            applied = apply_payment(entry, payload, generate_receipt_id(), self.clock.tz)
            self.db.flush()

        if applied:
            self._log_mutation(
                "payment recorded",
                transport.id,
                fee_detail_id=entry.id,
                fee_status=entry.status.value,
                receipt_id=entry.receipt_id,
            )
            audit_logger.info(
                "transport_fee_paid",
                student_id=transport.student_id,
                month=entry.month_name,
                amount=str(payload.paid_amount),
                status=entry.status.value,
                receipt_id=entry.receipt_id,
                method=entry.payment_method,
            )
        else:
            self._logger.info(
                "Payment not approved, ledger unchanged",
                extra={"entity_id": transport.id, "payment_status": payload.status.value},
            )
        return transport
