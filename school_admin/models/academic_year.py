"""
Academic Year Model

A school's academic calendar. At most one year per school is active; fee
types and fee schedules are stamped with the active year when created.
"""

from datetime import date
from typing import List

from sqlalchemy import Boolean, Date, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from school_admin.models.base import BaseModel, SchoolScopedMixin, SoftDeleteMixin
from school_admin.models.types import JSONList


class AcademicYear(SchoolScopedMixin, SoftDeleteMixin, BaseModel):
    __tablename__ = "academic_years"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Month numbers (1-12) in calendar order, repeated for spans over a year
    months: Mapped[List[int]] = mapped_column(JSONList, nullable=False, default=list)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    __table_args__ = (
        Index("ix_academic_years_school_active", "school_id", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<AcademicYear(id={self.id}, name={self.name}, active={self.is_active})>"
