"""
School Vehicle Model
"""

from datetime import date
from typing import List

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from school_admin.models.base import BaseModel, SchoolScopedMixin
from school_admin.models.types import JSONList


class SchoolVehicle(SchoolScopedMixin, BaseModel):
    """A bus or van owned or contracted by the school."""

    __tablename__ = "school_vehicles"

    registration_number: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    assigned_vehicle_number: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    seating_capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    # Road tax and fitness certificate expiry
    tax_valid: Mapped[date] = mapped_column(Date, nullable=False)
    fc_valid: Mapped[date] = mapped_column(Date, nullable=False)

    vehicle_mode: Mapped[str] = mapped_column(String(50), nullable=False)
    attachments: Mapped[List[str]] = mapped_column(JSONList, nullable=False, default=list)
