"""
Fee Type Model

Named fee heads (tuition, bus fee, ...) booked against an account type.
"""

from typing import Optional

from sqlalchemy import Boolean, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from school_admin.models.base import BaseModel, SchoolScopedMixin, SoftDeleteMixin
from school_admin.models.enums import AccountType, FeeCategory


class FeeType(SchoolScopedMixin, SoftDeleteMixin, BaseModel):
    __tablename__ = "fee_types"

    fee_type: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    account_type: Mapped[AccountType] = mapped_column(
        Enum(AccountType, name="account_type_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    fee_category: Mapped[Optional[FeeCategory]] = mapped_column(
        Enum(FeeCategory, name="fee_category_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )

    # Fee categories are owned by another module; only the reference is kept
    category_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)

    academic_year_id: Mapped[str] = mapped_column(
        ForeignKey("academic_years.id"),
        nullable=False,
        index=True,
    )
    is_misc: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
