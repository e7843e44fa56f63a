# school_admin/repositories/transport/vehicle_repository.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from school_admin.models.transport import BusRoute, SchoolVehicle
from school_admin.repositories.base import BaseRepository


class VehicleRepository(BaseRepository[SchoolVehicle]):
    model = SchoolVehicle

    def __init__(self, session: Session):
        super().__init__(session, SchoolVehicle)

    def _search_select(self, school_id: str, search_query: Optional[str]):
        stmt = self._base_select().where(SchoolVehicle.school_id == school_id)
        if search_query:
            stmt = stmt.where(SchoolVehicle.registration_number.ilike(f"%{search_query}%"))
        return stmt

    def search(
        self,
        *,
        school_id: str,
        search_query: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[SchoolVehicle], int]:
        stmt = self._search_select(school_id, search_query)
        total = self._count_of(stmt)
        items = self.session.execute(
            stmt.order_by(SchoolVehicle.created_at.desc()).offset(skip).limit(limit)
        ).scalars().all()
        return list(items), total

    def vehicle_numbers(self, school_id: str, search_query: Optional[str]) -> Sequence[SchoolVehicle]:
        stmt = self._search_select(school_id, search_query).order_by(SchoolVehicle.assigned_vehicle_number)
        return self.session.execute(stmt).scalars().all()

    def route_names_by_vehicle(self, vehicle_ids: List[str]) -> Dict[str, List[str]]:
        if not vehicle_ids:
            return {}
        rows = self.session.execute(
            select(BusRoute.vehicle_id, BusRoute.route_name)
            .where(BusRoute.vehicle_id.in_(vehicle_ids))
            .order_by(BusRoute.created_at)
        ).all()
        names: Dict[str, List[str]] = {}
        for vehicle_id, route_name in rows:
            names.setdefault(vehicle_id, []).append(route_name)
        return names

    def is_used_by_route(self, vehicle_id: str) -> bool:
        stmt = select(BusRoute.id).where(BusRoute.vehicle_id == vehicle_id).limit(1)
        return self.session.execute(stmt).first() is not None
