"""
Fee Schedule Model

A payment calendar: a day of month, the months it applies to and the
concrete due dates generated from them.
"""

from datetime import date
from typing import List

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from school_admin.models.base import BaseModel, SchoolScopedMixin, SoftDeleteMixin
from school_admin.models.types import DateList, JSONList


class FeeSchedule(SchoolScopedMixin, SoftDeleteMixin, BaseModel):
    __tablename__ = "fee_schedules"

    schedule_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    academic_year_id: Mapped[str] = mapped_column(
        ForeignKey("academic_years.id"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    day: Mapped[int] = mapped_column(Integer, nullable=False)
    months: Mapped[List[int]] = mapped_column(JSONList, nullable=False, default=list)
    scheduled_dates: Mapped[List[date]] = mapped_column(DateList, nullable=False, default=list)
