"""
Fee schedule service.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ConflictError, ResourceNotFoundError, ValidationError
from school_admin.core.pagination import PaginationParams
from school_admin.models.fee_schedule import FeeSchedule
from school_admin.repositories.fee_schedule_repository import FeeScheduleRepository
from school_admin.schemas.fee_schedule import FeeScheduleCreate, FeeScheduleUpdate
from school_admin.services.academic_year_scope import ActiveAcademicYearScope
from school_admin.services.base import BaseService
from school_admin.utils.date_utils import generate_schedule_dates


class FeeScheduleService(BaseService[FeeSchedule, FeeScheduleRepository]):
    resource_name = "Fee Schedule"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(FeeScheduleRepository(db_session), db_session, clock)
        self.scope = ActiveAcademicYearScope(db_session)

    def create(self, payload: FeeScheduleCreate) -> FeeSchedule:
        required = [
            payload.schedule_name,
            payload.day,
            payload.months,
            payload.exist_months,
            payload.school_id,
            payload.category_id,
        ]
        if not all(required):
            raise ValidationError()

        scheduled_dates = generate_schedule_dates(
            payload.months, payload.day, payload.exist_months, self.clock.today()
        )
        academic_year_id = self.scope.require_active_year_id(payload.school_id)
        duplicate = self.repository.find_duplicate(
            schedule_name=payload.schedule_name,
            school_id=payload.school_id,
            category_id=payload.category_id,
            academic_year_id=academic_year_id,
        )
        if duplicate is not None:
            raise ConflictError("Fee Schedule Already Exists", {"fee_schedule_id": duplicate.id})

        with self.transaction():
            schedule = self.repository.create(
                {
                    "schedule_name": payload.schedule_name,
                    "description": payload.description,
                    "school_id": payload.school_id,
                    "category_id": payload.category_id,
                    "day": payload.day,
                    "months": payload.months,
                    "scheduled_dates": scheduled_dates,
                    "academic_year_id": academic_year_id,
                }
            )
        self._log_mutation("created", schedule.id, academic_year_id=academic_year_id)
        return schedule

    def list(
        self,
        *,
        school_id: Optional[str],
        category_id: Optional[str],
        pagination: PaginationParams,
    ) -> Tuple[List[FeeSchedule], int]:
        filters = self.scope.scoped_filters(school_id, category_id=category_id)
        items, total = self.repository.search(filters, skip=pagination.skip, limit=pagination.limit)
        if total == 0:
            raise ResourceNotFoundError(self.resource_name, message="Fee Schedules Not Found")
        return items, total

    def get(self, schedule_id: str) -> FeeSchedule:
        return self.get_or_404(schedule_id)

    def update(self, schedule_id: str, payload: FeeScheduleUpdate) -> FeeSchedule:
        schedule = self.get_or_404(schedule_id)
        data = payload.changes()
        exist_months = data.pop("exist_months", None)

        if "day" in data or "months" in data:
            if not exist_months:
                raise ValidationError(field_errors={"existMonths": ["required when day or months change"]})
            day = data.get("day") or schedule.day
            months = data.get("months") or schedule.months
            data["scheduled_dates"] = generate_schedule_dates(months, day, exist_months, self.clock.today())

        with self.transaction():
            self.repository.update(schedule, data)
        self._log_mutation("updated", schedule.id, fields=sorted(data))
        return schedule

    def delete(self, schedule_id: str) -> None:
        schedule = self.get_or_404(schedule_id)
        with self.transaction():
            self.repository.delete(schedule)
        self._log_mutation("deleted", schedule_id)
