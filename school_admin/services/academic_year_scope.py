"""
Active academic-year scoping for fee records.

Fee types and fee schedules belong to the academic year that was active
for their school when they were created, and listings only ever show the
records of the currently active year.
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from school_admin.core.exceptions import ActiveAcademicYearRequiredError
from school_admin.repositories.academic_year_repository import AcademicYearRepository


class ActiveAcademicYearScope:
    def __init__(self, db_session: Session):
        self._years = AcademicYearRepository(db_session)

    def require_active_year_id(self, school_id: Optional[str]) -> str:
        """Id of the school's active year; 400 when there is none."""
        year_id = self._years.get_active_id(school_id) if school_id else None
        if year_id is None:
            raise ActiveAcademicYearRequiredError(school_id)
        return year_id

    def scoped_filters(self, school_id: Optional[str], **filters: Any) -> Dict[str, Any]:
        """Listing filters narrowed to the school's active year."""
        scoped = {"school_id": school_id, **filters}
        scoped["academic_year_id"] = self.require_active_year_id(school_id)
        return scoped
