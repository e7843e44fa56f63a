# school_admin/repositories/fee_schedule_repository.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from school_admin.models.fee_schedule import FeeSchedule
from school_admin.repositories.base import BaseRepository


class FeeScheduleRepository(BaseRepository[FeeSchedule]):
    model = FeeSchedule

    def __init__(self, session: Session):
        super().__init__(session, FeeSchedule)

    def find_duplicate(
        self,
        *,
        schedule_name: str,
        school_id: str,
        category_id: str,
        academic_year_id: str,
    ) -> Optional[FeeSchedule]:
        return self.get_by(
            schedule_name=schedule_name,
            school_id=school_id,
            category_id=category_id,
            academic_year_id=academic_year_id,
        )

    def search(
        self,
        filters: Dict[str, Any],
        *,
        skip: int,
        limit: int,
    ) -> Tuple[List[FeeSchedule], int]:
        items = self.get_multi(
            skip=skip,
            limit=limit,
            filters=filters,
            order_by=[FeeSchedule.created_at],
        )
        return list(items), self.count(filters)

    def is_mapped_to_year(self, academic_year_id: str) -> bool:
        return self.exists(academic_year_id=academic_year_id)
