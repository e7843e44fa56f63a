# school_admin/repositories/base.py
"""
Generic SQLAlchemy repository.

Repositories flush but never commit; the calling service owns the unit of
work. Models that carry `is_deleted` are soft deleted and hidden from every
query built through `_base_select()`.
"""
from __future__ import annotations

from typing import Any, Dict, Generic, Iterable, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select, func, select, update
from sqlalchemy.orm import Session

from school_admin.models.base import BaseModel, utc_now

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    model: Type[ModelType]

    def __init__(self, session: Session, model: Optional[Type[ModelType]] = None):
        self.session = session
        if model is not None:
            self.model = model

    @property
    def soft_deletes(self) -> bool:
        return hasattr(self.model, "is_deleted")

    # -- statement building -------------------------------------------------

    def _exclude_deleted(self, stmt):
        return stmt.where(self.model.is_deleted.is_(False)) if self.soft_deletes else stmt

    def _base_select(self) -> Select[tuple[ModelType]]:
        return self._exclude_deleted(select(self.model))

    def _where(self, stmt, filters: Optional[Dict[str, Any]]):
        """Equality filters; `None` values are skipped, collections become IN."""
        for name, value in (filters or {}).items():
            if value is None:
                continue
            column = getattr(self.model, name)
            condition = column.in_(value) if isinstance(value, (list, tuple, set)) else column == value
            stmt = stmt.where(condition)
        return stmt

    def _count_of(self, stmt) -> int:
        wrapped = select(func.count()).select_from(stmt.order_by(None).subquery())
        return self.session.scalar(wrapped) or 0

    # -- reads ----------------------------------------------------------------

    def get(self, id_: str) -> Optional[ModelType]:
        return self.get_by(id=id_)

    def get_by(self, **filters: Any) -> Optional[ModelType]:
        stmt = self._where(self._base_select(), filters).limit(1)
        return self.session.scalars(stmt).unique().first()

    def exists(self, **filters: Any) -> bool:
        return self.get_by(**filters) is not None

    def get_multi(
        self,
        *,
        skip: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Iterable[Any]] = None,
    ) -> Sequence[ModelType]:
        stmt = self._where(self._base_select(), filters)
        if order_by:
            stmt = stmt.order_by(*order_by)
        # limit=None lists everything (unpaginated listings)
        stmt = stmt.offset(skip or None).limit(limit or None)
        return self.session.scalars(stmt).unique().all()

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return self._count_of(self._where(self._base_select(), filters))

    # -- writes -----------------------------------------------------------------

    def create(self, obj_in: Dict[str, Any] | ModelType) -> ModelType:
        entity = obj_in if isinstance(obj_in, self.model) else self.model(**obj_in)
        self.session.add(entity)
        self.session.flush()
        return entity

    def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        for name, value in obj_in.items():
            if name != "id" and hasattr(db_obj, name):
                setattr(db_obj, name, value)
        self.session.flush()
        return db_obj

    def delete(self, db_obj: ModelType, *, hard_delete: bool = False) -> None:
        if self.soft_deletes and not hard_delete:
            db_obj.is_deleted = True
            db_obj.deleted_at = utc_now()
        else:
            self.session.delete(db_obj)
        self.session.flush()

    def bulk_update(
        self,
        filters: Dict[str, Any],
        values: Dict[str, Any],
        *,
        exclude_id: Optional[str] = None,
    ) -> int:
        """UPDATE ... WHERE filters; returns the number of rows touched."""
        stmt = self._where(self._exclude_deleted(update(self.model)), filters)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = self.session.execute(stmt.values(**values).execution_options(synchronize_session="fetch"))
        self.session.flush()
        return result.rowcount or 0
