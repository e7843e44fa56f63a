from school_admin.models.transport.driver import BusDriver
from school_admin.models.transport.route import BusRoute, RouteStop
from school_admin.models.transport.student_transport import StudentTransport, TransportFeeDetail
from school_admin.models.transport.vehicle import SchoolVehicle

__all__ = [
    "BusDriver",
    "BusRoute",
    "RouteStop",
    "SchoolVehicle",
    "StudentTransport",
    "TransportFeeDetail",
]
