# school_admin/repositories/transport/route_repository.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from sqlalchemy import case, func, or_, select, update
from sqlalchemy.orm import Session

from school_admin.models.transport import (
    BusDriver,
    BusRoute,
    RouteStop,
    SchoolVehicle,
    StudentTransport,
)
from school_admin.repositories.base import BaseRepository


class RouteRepository(BaseRepository[BusRoute]):
    model = BusRoute

    def __init__(self, session: Session):
        super().__init__(session, BusRoute)

    def next_trip_no(self) -> int:
        current = self.session.execute(select(func.max(BusRoute.trip_no))).scalar_one_or_none()
        return (current or 0) + 1

    def search(self, school_id: str, search_query: Optional[str] = None) -> List[BusRoute]:
        stmt = (
            self._base_select()
            .join(BusRoute.driver)
            .join(BusRoute.vehicle)
            .where(BusRoute.school_id == school_id)
        )
        if search_query:
            pattern = f"%{search_query}%"
            stmt = stmt.where(
                or_(
                    BusRoute.route_name.ilike(pattern),
                    BusDriver.name.ilike(pattern),
                    SchoolVehicle.registration_number.ilike(pattern),
                )
            )
        stmt = stmt.order_by(BusRoute.created_at.desc())
        return list(self.session.execute(stmt).unique().scalars().all())

    def lookup(self, school_id: str) -> Sequence[BusRoute]:
        return self.get_multi(
            limit=None,
            filters={"school_id": school_id},
            order_by=[BusRoute.trip_no],
        )

    def students_per_route(self, school_id: str) -> Dict[str, int]:
        rows = self.session.execute(
            select(StudentTransport.selected_route_id, func.count(StudentTransport.id))
            .where(StudentTransport.school_id == school_id)
            .group_by(StudentTransport.selected_route_id)
        ).all()
        return {route_id: total for route_id, total in rows}

    def count_riders(self, route_id: str) -> int:
        stmt = select(func.count(StudentTransport.id)).where(
            StudentTransport.selected_route_id == route_id
        )
        return self.session.execute(stmt).scalar_one()

    def count_stops(self, school_id: str) -> int:
        stmt = (
            select(func.count(RouteStop.id))
            .join(BusRoute, RouteStop.route_id == BusRoute.id)
            .where(BusRoute.school_id == school_id)
        )
        return self.session.execute(stmt).scalar_one()

    def get_stop(self, route_id: str, stop_id: str) -> Optional[RouteStop]:
        stmt = select(RouteStop).where(RouteStop.route_id == route_id, RouteStop.id == stop_id)
        return self.session.execute(stmt).scalar_one_or_none()

    # ------------------------------------------------------------------ #
    # Seat bookkeeping
    # ------------------------------------------------------------------ #
    def take_seat(self, route_id: str) -> bool:
        """
        Decrement `available_seats` by one if a seat is left.

        The check and the decrement are a single UPDATE so concurrent
        assignments cannot oversell the route.
        """
        stmt = (
            update(BusRoute)
            .where(BusRoute.id == route_id, BusRoute.available_seats > 0)
            .values(available_seats=BusRoute.available_seats - 1)
            .execution_options(synchronize_session="fetch")
        )
        result = self.session.execute(stmt)
        self.session.flush()
        return (result.rowcount or 0) == 1

    def release_seat(self, route_id: str) -> None:
        """Return one seat to the route without exceeding its capacity."""
        stmt = (
            update(BusRoute)
            .where(BusRoute.id == route_id)
            .values(
                available_seats=case(
                    (BusRoute.available_seats < BusRoute.seating_capacity, BusRoute.available_seats + 1),
                    else_=BusRoute.seating_capacity,
                )
            )
            .execution_options(synchronize_session="fetch")
        )
        self.session.execute(stmt)
        self.session.flush()
