from school_admin.services.academic_year_service import AcademicYearService
from school_admin.services.fee_schedule_service import FeeScheduleService
from school_admin.services.fee_type_service import FeeTypeService
from school_admin.services.transport import (
    DriverService,
    RouteService,
    StudentTransportService,
    TransportDashboardService,
    VehicleService,
)

__all__ = [
    "AcademicYearService",
    "FeeTypeService",
    "FeeScheduleService",
    "VehicleService",
    "DriverService",
    "RouteService",
    "StudentTransportService",
    "TransportDashboardService",
]
