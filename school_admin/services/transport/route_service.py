"""
Bus route service.

A route's seating capacity is copied from its vehicle. Swapping the vehicle
recomputes the free seats from the students currently riding.
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ResourceNotFoundError
from school_admin.models.transport import BusDriver, BusRoute, RouteStop, SchoolVehicle
from school_admin.repositories.transport import DriverRepository, RouteRepository, VehicleRepository
from school_admin.schemas.transport.route import (
    RouteCreate,
    RouteDriverInfo,
    RouteSearchItem,
    RouteStopIn,
    RouteStopResponse,
    RouteStudentsCount,
    RouteUpdate,
    RouteVehicleInfo,
)
from school_admin.services.base import BaseService


class RouteService(BaseService[BusRoute, RouteRepository]):
    resource_name = "Route"
    not_found_message = "Route not found"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(RouteRepository(db_session), db_session, clock)
        self.vehicles = VehicleRepository(db_session)
        self.drivers = DriverRepository(db_session)

    def _vehicle_or_404(self, vehicle_id: str) -> SchoolVehicle:
        vehicle = self.vehicles.get(vehicle_id)
        if vehicle is None:
            raise ResourceNotFoundError("Vehicle", vehicle_id, message="Vehicle not Found")
        return vehicle

    def _driver_or_404(self, driver_id: str) -> BusDriver:
        driver = self.drivers.get(driver_id)
        if driver is None:
            raise ResourceNotFoundError("Driver", driver_id, message="Driver not found")
        return driver

    @staticmethod
    def _build_stops(stops_in: List[RouteStopIn], existing: Optional[Dict[str, RouteStop]] = None) -> List[RouteStop]:
        existing = existing or {}
        stops: List[RouteStop] = []
        for position, stop_in in enumerate(stops_in):
            stop = existing.get(stop_in.id) if stop_in.id else None
            if stop is None:
                stop = RouteStop()
            stop.position = position
            stop.label = stop_in.label
            stop.stop = stop_in.stop
            stop.one_way = stop_in.one_way
            stop.round_trip = stop_in.round_trip
            stops.append(stop)
        return stops

    def create(self, payload: RouteCreate) -> BusRoute:
        vehicle = self._vehicle_or_404(payload.vehicle_id)
        self._driver_or_404(payload.driver_id)

        with self.transaction():
            route = self.repository.create(
                BusRoute(
                    route_name=payload.route_name,
                    vehicle_id=vehicle.id,
                    driver_id=payload.driver_id,
                    trip_no=self.repository.next_trip_no(),
                    seating_capacity=vehicle.seating_capacity,
                    available_seats=vehicle.seating_capacity,
                    school_id=payload.school_id,
                    stops=self._build_stops(payload.stops),
                )
            )
        self._log_mutation("created", route.id, trip_no=route.trip_no, school_id=route.school_id)
        return route

    def search(self, school_id: str, search_query: Optional[str] = None) -> List[RouteSearchItem]:
        routes = self.repository.search(school_id, search_query)
        riders = self.repository.students_per_route(school_id)
        return [
            RouteSearchItem.model_validate(
                {
                    "id": route.id,
                    "route_name": route.route_name,
                    "trip_no": route.trip_no,
                    "seating_capacity": route.seating_capacity,
                    "available_seats": route.available_seats,
                    "stops": [RouteStopResponse.model_validate(stop) for stop in route.stops],
                    "driver": RouteDriverInfo.model_validate(route.driver),
                    "vehicle": RouteVehicleInfo.model_validate(route.vehicle),
                    "stops_count": len(route.stops),
                    "students_count": riders.get(route.id, 0),
                    "created_at": route.created_at,
                }
            )
            for route in routes
        ]

    def get(self, route_id: str) -> BusRoute:
        return self.get_or_404(route_id)

    def update(self, route_id: str, payload: RouteUpdate) -> BusRoute:
        route = self.get_or_404(route_id)
        data = payload.changes(exclude={"stops"})

        if "driver_id" in data:
            self._driver_or_404(data["driver_id"])
        if "vehicle_id" in data and data["vehicle_id"] != route.vehicle_id:
            vehicle = self._vehicle_or_404(data["vehicle_id"])
            riders = self.repository.count_riders(route.id)
            data["seating_capacity"] = vehicle.seating_capacity
            data["available_seats"] = max(vehicle.seating_capacity - riders, 0)

        with self.transaction():
            if payload.stops is not None:
                route.stops = self._build_stops(payload.stops, {stop.id: stop for stop in route.stops})
            self.repository.update(route, data)
        # Relationships follow the new foreign keys on next access
        self.db.refresh(route)
        self._log_mutation("updated", route.id, fields=sorted(data))
        return route

    def lookup(self, school_id: str) -> Sequence[BusRoute]:
        return self.repository.lookup(school_id)

    def stops(self, route_id: str) -> List[RouteStop]:
        return list(self.get_or_404(route_id).stops)

    def trip_number(self, route_id: str) -> int:
        return self.get_or_404(route_id).trip_no

    def students_count(self, school_id: str) -> List[RouteStudentsCount]:
        return [
            RouteStudentsCount(route_id=route_id, total_students=total)
            for route_id, total in self.repository.students_per_route(school_id).items()
        ]
