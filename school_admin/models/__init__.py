"""
ORM models. Importing this package registers every table on `Base.metadata`.
"""

from school_admin.models.academic_year import AcademicYear
from school_admin.models.base import Base, BaseModel
from school_admin.models.enums import (
    AccountType,
    FeeCategory,
    FeeStatus,
    PaymentStatus,
    TransportSchedule,
)
from school_admin.models.fee_schedule import FeeSchedule
from school_admin.models.fee_type import FeeType
from school_admin.models.transport import (
    BusDriver,
    BusRoute,
    RouteStop,
    SchoolVehicle,
    StudentTransport,
    TransportFeeDetail,
)

__all__ = [
    "Base",
    "BaseModel",
    "AcademicYear",
    "FeeType",
    "FeeSchedule",
    "SchoolVehicle",
    "BusDriver",
    "BusRoute",
    "RouteStop",
    "StudentTransport",
    "TransportFeeDetail",
    "AccountType",
    "FeeCategory",
    "FeeStatus",
    "PaymentStatus",
    "TransportSchedule",
]
