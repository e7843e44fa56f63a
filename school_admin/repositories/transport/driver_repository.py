# school_admin/repositories/transport/driver_repository.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from school_admin.models.transport import BusDriver, BusRoute
from school_admin.repositories.base import BaseRepository


class DriverRepository(BaseRepository[BusDriver]):
    model = BusDriver

    def __init__(self, session: Session):
        super().__init__(session, BusDriver)

    def find_conflict(
        self,
        *,
        driving_license: str,
        aadhar_number: str,
        contact_number: str,
        emergency_number: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[BusDriver]:
        """A driver already holding any of the given identifiers."""
        stmt = self._base_select().where(
            or_(
                BusDriver.driving_license == driving_license,
                BusDriver.aadhar_number == aadhar_number,
                BusDriver.contact_number == contact_number,
                BusDriver.emergency_number == emergency_number,
            )
        )
        if exclude_id is not None:
            stmt = stmt.where(BusDriver.id != exclude_id)
        return self.session.execute(stmt.limit(1)).scalars().first()

    def search(
        self,
        *,
        school_id: str,
        search_query: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[BusDriver], int]:
        stmt = self._base_select().where(BusDriver.school_id == school_id)
        if search_query:
            stmt = stmt.where(BusDriver.name.ilike(f"%{search_query}%"))
        total = self._count_of(stmt)
        items = self.session.execute(
            stmt.order_by(BusDriver.created_at.desc()).offset(skip).limit(limit)
        ).scalars().all()
        return list(items), total

    def lookup(self, school_id: str) -> Sequence[BusDriver]:
        return self.get_multi(
            limit=None,
            filters={"school_id": school_id},
            order_by=[BusDriver.name],
        )

    def route_names_by_driver(self, driver_ids: List[str]) -> Dict[str, List[str]]:
        if not driver_ids:
            return {}
        rows = self.session.execute(
            select(BusRoute.driver_id, BusRoute.route_name)
            .where(BusRoute.driver_id.in_(driver_ids))
            .order_by(BusRoute.created_at)
        ).all()
        names: Dict[str, List[str]] = {}
        for driver_id, route_name in rows:
            names.setdefault(driver_id, []).append(route_name)
        return names

    def is_assigned_to_route(self, driver_id: str) -> bool:
        stmt = select(BusRoute.id).where(BusRoute.driver_id == driver_id).limit(1)
        return self.session.execute(stmt).first() is not None
