# school_admin/models/base.py
"""
Declarative base and column mixins.

Primary keys are UUID strings. School ids and category ids are opaque
references to records owned by other services, so they are plain string
columns without foreign keys.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)


class SoftDeleteMixin:
    """Rows are flagged instead of removed; repositories hide flagged rows."""

    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))


class SchoolScopedMixin:
    school_id: Mapped[str] = mapped_column(String(36), index=True)


class BaseModel(TimestampMixin, Base):
    __abstract__ = True

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
