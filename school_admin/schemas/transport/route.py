# --- File: school_admin/schemas/transport/route.py ---
"""
Bus route schemas.

Stops are exchanged flat as `{id?, label, stop, oneWay, roundTrip}`. On
update, a stop carrying the id of an existing stop is edited in place and
keeps its id; stops without an id are created.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from school_admin.schemas.common.base import (
    BaseCreateSchema,
    BaseDBSchema,
    BaseSchema,
    BaseUpdateSchema,
)

__all__ = [
    "RouteStopIn",
    "RouteStopResponse",
    "RouteCreate",
    "RouteUpdate",
    "RouteResponse",
    "RouteDriverInfo",
    "RouteVehicleInfo",
    "RouteSearchItem",
    "RouteLookupItem",
    "RouteStudentsCount",
]


class RouteStopIn(BaseSchema):
    id: Optional[str] = None
    label: str = Field(..., min_length=1, max_length=150)
    stop: str = Field(..., min_length=1, max_length=150)
    one_way: Decimal = Field(default=Decimal("0"), ge=Decimal("0"), description="One-way fare")
    round_trip: Decimal = Field(default=Decimal("0"), ge=Decimal("0"), description="Round-trip fare")


class RouteStopResponse(BaseSchema):
    id: str
    label: str
    stop: str
    one_way: Decimal
    round_trip: Decimal


class RouteCreate(BaseCreateSchema):
    route_name: str = Field(..., min_length=1, max_length=150)
    vehicle_id: str
    driver_id: str
    stops: List[RouteStopIn] = Field(default_factory=list)
    school_id: str


class RouteUpdate(BaseUpdateSchema):
    route_name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    vehicle_id: Optional[str] = None
    driver_id: Optional[str] = None
    stops: Optional[List[RouteStopIn]] = None


class RouteResponse(BaseDBSchema):
    route_name: str
    vehicle_id: str
    driver_id: str
    trip_no: int
    seating_capacity: int
    available_seats: int
    school_id: str
    stops: List[RouteStopResponse] = Field(default_factory=list)


class RouteDriverInfo(BaseSchema):
    id: str
    name: str


class RouteVehicleInfo(BaseSchema):
    id: str
    registration_number: str
    assigned_vehicle_number: int


class RouteSearchItem(BaseSchema):
    id: str
    route_name: str
    trip_no: int
    seating_capacity: int
    available_seats: int
    stops: List[RouteStopResponse] = Field(default_factory=list)
    driver: RouteDriverInfo
    vehicle: RouteVehicleInfo
    stops_count: int = 0
    students_count: int = 0
    created_at: Optional[datetime] = None


class RouteLookupItem(BaseSchema):
    id: str
    route_name: str


class RouteStudentsCount(BaseSchema):
    route_id: str
    total_students: int
