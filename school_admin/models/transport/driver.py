"""
Bus Driver Model
"""

from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from school_admin.models.base import BaseModel, SchoolScopedMixin
from school_admin.models.types import JSONList


class BusDriver(SchoolScopedMixin, BaseModel):
    __tablename__ = "bus_drivers"

    name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    contact_number: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    emergency_number: Mapped[str] = mapped_column(String(10), nullable=False)
    driving_license: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    aadhar_number: Mapped[str] = mapped_column(String(12), nullable=False, unique=True)
    blood_group: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    attachments: Mapped[List[str]] = mapped_column(JSONList, nullable=False, default=list)
