from school_admin.services.transport.dashboard_service import TransportDashboardService
from school_admin.services.transport.driver_service import DriverService
from school_admin.services.transport.route_service import RouteService
from school_admin.services.transport.student_transport_service import StudentTransportService
from school_admin.services.transport.vehicle_service import VehicleService

__all__ = [
    "DriverService",
    "RouteService",
    "StudentTransportService",
    "TransportDashboardService",
    "VehicleService",
]
