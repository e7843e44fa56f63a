"""
Fee type service.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ConflictError, ResourceNotFoundError, ValidationError
from school_admin.core.pagination import PaginationParams
from school_admin.models.enums import AccountType, FeeCategory
from school_admin.models.fee_type import FeeType
from school_admin.repositories.fee_type_repository import FeeTypeRepository
from school_admin.schemas.fee_type import FeeTypeCreate, FeeTypeUpdate
from school_admin.services.academic_year_scope import ActiveAcademicYearScope
from school_admin.services.base import BaseService


class FeeTypeService(BaseService[FeeType, FeeTypeRepository]):
    resource_name = "Fee Type"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(FeeTypeRepository(db_session), db_session, clock)
        self.scope = ActiveAcademicYearScope(db_session)

    def create(self, payload: FeeTypeCreate) -> FeeType:
        if not payload.fee_type or not payload.account_type or not payload.school_id:
            raise ValidationError("All Fields are Mandatory")

        academic_year_id = self.scope.require_active_year_id(payload.school_id)
        duplicate = self.repository.find_duplicate(
            fee_type=payload.fee_type,
            school_id=payload.school_id,
            category_id=payload.category_id,
            academic_year_id=academic_year_id,
        )
        if duplicate is not None:
            raise ConflictError("Fee Type Already Exist", {"fee_type_id": duplicate.id})

        fee_category = FeeCategory.MISCELLANEOUS if payload.is_misc else payload.fee_category
        with self.transaction():
            fee_type = self.repository.create(
                {
                    "fee_type": payload.fee_type,
                    "account_type": payload.account_type,
                    "school_id": payload.school_id,
                    "description": payload.description,
                    "category_id": payload.category_id,
                    "fee_category": fee_category,
                    "is_misc": payload.is_misc,
                    "academic_year_id": academic_year_id,
                }
            )
        self._log_mutation("created", fee_type.id, academic_year_id=academic_year_id)
        return fee_type

    def list(
        self,
        *,
        school_id: Optional[str],
        account_type: Optional[AccountType] = None,
        category_id: Optional[str] = None,
        is_misc: Optional[bool] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> Tuple[List[FeeType], int]:
        """Fee types of the active year; unpaginated unless `pagination` is given."""
        filters = self.scope.scoped_filters(
            school_id,
            account_type=account_type,
            category_id=category_id,
            # Only a truthy flag narrows the list
            is_misc=True if is_misc else None,
        )
        if pagination is None:
            items, total = self.repository.search(filters)
        else:
            items, total = self.repository.search(filters, skip=pagination.skip, limit=pagination.limit)
        if total == 0:
            raise ResourceNotFoundError(self.resource_name, message="No Fee Type Found")
        return items, total

    def read(self, fee_type_id: str) -> FeeType:
        return self.get_or_404(fee_type_id)

    def update(self, fee_type_id: str, payload: FeeTypeUpdate) -> FeeType:
        fee_type = self.get_or_404(fee_type_id)
        data = payload.changes()
        with self.transaction():
            self.repository.update(fee_type, data)
        self._log_mutation("updated", fee_type.id, fields=sorted(data))
        return fee_type

    def delete(self, fee_type_id: str) -> None:
        fee_type = self.get_or_404(fee_type_id)
        with self.transaction():
            self.repository.delete(fee_type)
        self._log_mutation("deleted", fee_type_id)
