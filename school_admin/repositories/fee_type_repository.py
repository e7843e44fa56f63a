# school_admin/repositories/fee_type_repository.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from school_admin.models.fee_type import FeeType
from school_admin.repositories.base import BaseRepository


class FeeTypeRepository(BaseRepository[FeeType]):
    model = FeeType

    def __init__(self, session: Session):
        super().__init__(session, FeeType)

    def find_duplicate(
        self,
        *,
        fee_type: str,
        school_id: str,
        category_id: Optional[str],
        academic_year_id: str,
    ) -> Optional[FeeType]:
        stmt = self._base_select().where(
            FeeType.fee_type == fee_type,
            FeeType.school_id == school_id,
            FeeType.academic_year_id == academic_year_id,
        )
        if category_id is None:
            stmt = stmt.where(FeeType.category_id.is_(None))
        else:
            stmt = stmt.where(FeeType.category_id == category_id)
        return self.session.execute(stmt.limit(1)).scalars().first()

    def search(
        self,
        filters: Dict[str, Any],
        *,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[FeeType], int]:
        items = self.get_multi(
            skip=skip,
            limit=limit,
            filters=filters,
            order_by=[FeeType.created_at],
        )
        return list(items), self.count(filters)

    def is_mapped_to_year(self, academic_year_id: str) -> bool:
        return self.exists(academic_year_id=academic_year_id)
