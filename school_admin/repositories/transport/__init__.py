from school_admin.repositories.transport.driver_repository import DriverRepository
from school_admin.repositories.transport.route_repository import RouteRepository
from school_admin.repositories.transport.student_transport_repository import StudentTransportRepository
from school_admin.repositories.transport.vehicle_repository import VehicleRepository

__all__ = [
    "DriverRepository",
    "RouteRepository",
    "StudentTransportRepository",
    "VehicleRepository",
]
