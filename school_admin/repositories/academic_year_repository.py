# school_admin/repositories/academic_year_repository.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from school_admin.models.academic_year import AcademicYear
from school_admin.repositories.base import BaseRepository


class AcademicYearRepository(BaseRepository[AcademicYear]):
    model = AcademicYear

    def __init__(self, session: Session):
        super().__init__(session, AcademicYear)

    def list_for_school(self, school_id: str) -> Sequence[AcademicYear]:
        return self.get_multi(
            limit=None,
            filters={"school_id": school_id},
            order_by=[AcademicYear.created_at],
        )

    def search(
        self,
        *,
        school_id: Optional[str],
        is_active: Optional[bool],
        skip: int,
        limit: int,
    ) -> Tuple[List[AcademicYear], int]:
        filters = {"school_id": school_id, "is_active": is_active}
        items = self.get_multi(
            skip=skip,
            limit=limit,
            filters=filters,
            order_by=[AcademicYear.created_at],
        )
        return list(items), self.count(filters)

    def previous_years(self, school_id: str) -> List[AcademicYear]:
        """Every year of the school except the one that starts last."""
        stmt = (
            self._base_select()
            .where(AcademicYear.school_id == school_id)
            .order_by(AcademicYear.start_date.desc())
            .offset(1)
        )
        return list(self.session.execute(stmt).scalars().all())

    def get_active_id(self, school_id: str) -> Optional[str]:
        stmt = self._exclude_deleted(
            select(AcademicYear.id).where(
                AcademicYear.school_id == school_id,
                AcademicYear.is_active.is_(True),
            )
        ).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()

    def deactivate_others(self, school_id: str, keep_id: str) -> int:
        return self.bulk_update(
            {"school_id": school_id, "is_active": True},
            {"is_active": False},
            exclude_id=keep_id,
        )
