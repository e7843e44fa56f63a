from school_admin.schemas.transport.dashboard import DashboardFeeDetails, DashboardResponse
from school_admin.schemas.transport.driver import (
    DriverCreate,
    DriverListItem,
    DriverLookupItem,
    DriverResponse,
    DriverUpdate,
)
from school_admin.schemas.transport.payment import PaymentRequest
from school_admin.schemas.transport.route import (
    RouteCreate,
    RouteDriverInfo,
    RouteLookupItem,
    RouteResponse,
    RouteSearchItem,
    RouteStopIn,
    RouteStopResponse,
    RouteStudentsCount,
    RouteUpdate,
    RouteVehicleInfo,
)
from school_admin.schemas.transport.student_transport import (
    StudentRouteInfo,
    StudentTransportCreate,
    StudentTransportDetail,
    StudentTransportListItem,
    StudentTransportResponse,
    StudentTransportUpdate,
    TransportFeeDetailResponse,
)
from school_admin.schemas.transport.vehicle import (
    VehicleAttachments,
    VehicleCreate,
    VehicleListItem,
    VehicleNumberItem,
    VehicleResponse,
    VehicleUpdate,
)

__all__ = [
    "DashboardFeeDetails",
    "DashboardResponse",
    "DriverCreate",
    "DriverListItem",
    "DriverLookupItem",
    "DriverResponse",
    "DriverUpdate",
    "PaymentRequest",
    "RouteCreate",
    "RouteDriverInfo",
    "RouteLookupItem",
    "RouteResponse",
    "RouteSearchItem",
    "RouteStopIn",
    "RouteStopResponse",
    "RouteStudentsCount",
    "RouteUpdate",
    "RouteVehicleInfo",
    "StudentRouteInfo",
    "StudentTransportCreate",
    "StudentTransportDetail",
    "StudentTransportListItem",
    "StudentTransportResponse",
    "StudentTransportUpdate",
    "TransportFeeDetailResponse",
    "VehicleAttachments",
    "VehicleCreate",
    "VehicleListItem",
    "VehicleNumberItem",
    "VehicleResponse",
    "VehicleUpdate",
]
