# school_admin/api/deps.py
"""
FastAPI dependencies shared by the v1 routers.

Services are built per request on the request's database session and the
application clock; tests override `get_db` and `get_clock`.
"""

from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.pagination import PaginationParams, normalize_pagination
from school_admin.db.session import get_db
from school_admin.services import (
    AcademicYearService,
    DriverService,
    FeeScheduleService,
    FeeTypeService,
    RouteService,
    StudentTransportService,
    TransportDashboardService,
    VehicleService,
)

__all__ = [
    "get_db",
    "get_clock",
    "get_pagination_params",
    "get_academic_year_service",
    "get_fee_type_service",
    "get_fee_schedule_service",
    "get_vehicle_service",
    "get_driver_service",
    "get_route_service",
    "get_student_transport_service",
    "get_transport_dashboard_service",
]


def get_clock() -> Clock:
    return Clock()


def get_pagination_params(
    page: Optional[int] = Query(None, description="Zero based page number"),
    limit: Optional[int] = Query(None, description="Page size"),
) -> PaginationParams:
    return normalize_pagination(page, limit)


# --- Services ------------------------------------------------------------------

def get_academic_year_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> AcademicYearService:
    return AcademicYearService(db, clock)


def get_fee_type_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> FeeTypeService:
    return FeeTypeService(db, clock)


def get_fee_schedule_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> FeeScheduleService:
    return FeeScheduleService(db, clock)


def get_vehicle_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> VehicleService:
    return VehicleService(db, clock)


def get_driver_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> DriverService:
    return DriverService(db, clock)


def get_route_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> RouteService:
    return RouteService(db, clock)


def get_student_transport_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> StudentTransportService:
    return StudentTransportService(db, clock)


def get_transport_dashboard_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> TransportDashboardService:
    return TransportDashboardService(db, clock)
