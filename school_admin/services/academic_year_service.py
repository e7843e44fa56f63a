"""
Academic year service.

Keeps at most one active year per school: whenever a write leaves a year
active, every other active year of the same school is switched off. The
write and the sweep run in one transaction.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import InvalidDateRangeError, ResourceNotFoundError, ValidationError
from school_admin.core.pagination import PaginationParams
from school_admin.models.academic_year import AcademicYear
from school_admin.repositories.academic_year_repository import AcademicYearRepository
from school_admin.repositories.fee_schedule_repository import FeeScheduleRepository
from school_admin.repositories.fee_type_repository import FeeTypeRepository
from school_admin.schemas.academic_year import (
    AcademicYearActivate,
    AcademicYearCreate,
    AcademicYearUpdate,
)
from school_admin.services.base import BaseService
from school_admin.utils.date_utils import expand_month_range, parse_input_date


class AcademicYearService(BaseService[AcademicYear, AcademicYearRepository]):
    resource_name = "Academic Year"
    not_found_message = "Academic year Not Found"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(AcademicYearRepository(db_session), db_session, clock)
        self.fee_types = FeeTypeRepository(db_session)
        self.fee_schedules = FeeScheduleRepository(db_session)

    def _months_between(self, start_raw: str, end_raw: str) -> Tuple:
        start = parse_input_date(start_raw, "startDate")
        end = parse_input_date(end_raw, "endDate")
        months = expand_month_range(start, end, self.clock.tz, reference=self.clock.now())
        return start, end, months

    def create(self, payload: AcademicYearCreate) -> AcademicYear:
        if not all([payload.name, payload.start_date, payload.end_date, payload.school_id]):
            raise ValidationError()

        existing = self.repository.list_for_school(payload.school_id)
        if any(year.name == payload.name for year in existing):
            raise ValidationError(f"Academic Year {payload.name} Already Exists")

        start, end, months = self._months_between(payload.start_date, payload.end_date)

        with self.transaction():
            year = self.repository.create(
                {
                    "name": payload.name,
                    "start_date": start,
                    "end_date": end,
                    "months": months,
                    "school_id": payload.school_id,
                    # Only the first year of a school starts out active
                    "is_active": not existing,
                }
            )
        self._log_mutation("created", year.id, school_id=year.school_id, is_active=year.is_active)
        return year

    def list(
        self,
        *,
        school_id: Optional[str],
        is_active: Optional[bool],
        pagination: PaginationParams,
    ) -> Tuple[List[AcademicYear], int]:
        items, total = self.repository.search(
            school_id=school_id,
            is_active=is_active,
            skip=pagination.skip,
            limit=pagination.limit,
        )
        if total == 0:
            raise ResourceNotFoundError(self.resource_name, message="Academic years Not Found")
        return items, total

    def previous(self, school_id: str) -> List[AcademicYear]:
        years = self.repository.previous_years(school_id)
        if not years:
            raise ResourceNotFoundError(self.resource_name, message="Previous Academic Years Not Found")
        return years

    def get(self, year_id: str) -> AcademicYear:
        return self.get_or_404(year_id)

    def change_state(self, payload: AcademicYearActivate) -> AcademicYear:
        if not payload.id or payload.is_active is None:
            raise ValidationError()

        year = self.repository.get(payload.id)
        if year is None:
            raise ResourceNotFoundError(self.resource_name, payload.id)

        with self.transaction():
            self.repository.update(year, {"is_active": payload.is_active})
            if year.is_active:
                self.repository.deactivate_others(year.school_id, keep_id=year.id)
        self._log_mutation("state changed", year.id, is_active=year.is_active)
        return year

    def update(self, year_id: str, payload: AcademicYearUpdate) -> AcademicYear:
        if self.fee_schedules.is_mapped_to_year(year_id):
            raise ValidationError("Academic Year Is Already Mapped With Fee Schedule")

        data = payload.changes()
        data.pop("start_date", None)
        data.pop("end_date", None)
        if payload.start_date and payload.end_date:
            start, end, months = self._months_between(payload.start_date, payload.end_date)
            data.update(start_date=start, end_date=end, months=months)
        elif payload.start_date or payload.end_date:
            raise InvalidDateRangeError("Start Date And End Date Should Be Provided Together")

        year = self.get_or_404(year_id)
        with self.transaction():
            self.repository.update(year, data)
            if year.is_active:
                self.repository.deactivate_others(year.school_id, keep_id=year.id)
        self._log_mutation("updated", year.id, fields=sorted(data))
        return year

    def delete(self, year_id: str) -> None:
        if self.fee_types.is_mapped_to_year(year_id) or self.fee_schedules.is_mapped_to_year(year_id):
            raise ValidationError("Academic Year Is Already Mapped With Fee Type Or Fee Schedule")

        year = self.get_or_404(year_id)
        with self.transaction():
            self.repository.delete(year)
        self._log_mutation("deleted", year_id)
