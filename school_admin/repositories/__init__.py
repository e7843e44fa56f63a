from school_admin.repositories.academic_year_repository import AcademicYearRepository
from school_admin.repositories.base import BaseRepository
from school_admin.repositories.fee_schedule_repository import FeeScheduleRepository
from school_admin.repositories.fee_type_repository import FeeTypeRepository
from school_admin.repositories.transport import (
    DriverRepository,
    RouteRepository,
    StudentTransportRepository,
    VehicleRepository,
)

__all__ = [
    "BaseRepository",
    "AcademicYearRepository",
    "FeeTypeRepository",
    "FeeScheduleRepository",
    "VehicleRepository",
    "DriverRepository",
    "RouteRepository",
    "StudentTransportRepository",
]
