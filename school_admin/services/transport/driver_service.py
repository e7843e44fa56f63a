"""
Bus driver service.
"""

import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ConflictError, InvalidFormatError, ResourceInUseError
from school_admin.core.pagination import PaginationParams
from school_admin.models.transport import BusDriver
from school_admin.repositories.transport import DriverRepository
from school_admin.schemas.transport.driver import DriverCreate, DriverListItem, DriverUpdate
from school_admin.services.base import BaseService

PHONE_NUMBER_PATTERN = re.compile(r"^\d{10}$")
AADHAR_NUMBER_PATTERN = re.compile(r"^\d{12}$")

DUPLICATE_DRIVER_MESSAGE = (
    "Driver with the same driving license, Aadhar number, contact number, "
    "or emergency number already exists."
)


class DriverService(BaseService[BusDriver, DriverRepository]):
    resource_name = "Driver"
    not_found_message = "Driver not found"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(DriverRepository(db_session), db_session, clock)

    @staticmethod
    def _validate_identifiers(data: Dict[str, Any]) -> None:
        for field in ("contact_number", "emergency_number"):
            value = data.get(field)
            if value is not None and not PHONE_NUMBER_PATTERN.match(value):
                raise InvalidFormatError(
                    "Invalid phone number format. Please provide a 10-digit phone number.",
                    field,
                )
        aadhar = data.get("aadhar_number")
        if aadhar is not None and not AADHAR_NUMBER_PATTERN.match(aadhar):
            raise InvalidFormatError(
                "Invalid Aadhar number format. Please provide a 12-digit Aadhar number.",
                "aadhar_number",
            )

    def _ensure_unique(self, driver: Dict[str, Any], exclude_id: Optional[str] = None) -> None:
        conflict = self.repository.find_conflict(
            driving_license=driver["driving_license"],
            aadhar_number=driver["aadhar_number"],
            contact_number=driver["contact_number"],
            emergency_number=driver["emergency_number"],
            exclude_id=exclude_id,
        )
        if conflict is not None:
            raise ConflictError(DUPLICATE_DRIVER_MESSAGE, {"driver_id": conflict.id})

    def add(self, payload: DriverCreate) -> BusDriver:
        data = payload.model_dump()
        self._ensure_unique(data)
        self._validate_identifiers(data)

        with self.transaction():
            driver = self.repository.create(data)
        self._log_mutation("added", driver.id, school_id=driver.school_id)
        return driver

    def get(self, driver_id: str) -> BusDriver:
        return self.get_or_404(driver_id)

    def update(self, driver_id: str, payload: DriverUpdate) -> BusDriver:
        driver = self.get_or_404(driver_id)
        data = payload.changes()
        self._validate_identifiers(data)

        merged = {
            field: data.get(field, getattr(driver, field))
            for field in ("driving_license", "aadhar_number", "contact_number", "emergency_number")
        }
        self._ensure_unique(merged, exclude_id=driver.id)

        with self.transaction():
            self.repository.update(driver, data)
        self._log_mutation("updated", driver.id, fields=sorted(data))
        return driver

    def delete(self, driver_id: str) -> None:
        driver = self.get_or_404(driver_id)
        if self.repository.is_assigned_to_route(driver.id):
            raise ResourceInUseError(
                "Driver Is Assigned To A Route",
                {"driver_id": driver.id},
            )
        with self.transaction():
            self.repository.delete(driver)
        self._log_mutation("deleted", driver_id)

    def list(
        self,
        *,
        school_id: str,
        search_query: Optional[str],
        pagination: PaginationParams,
    ) -> Tuple[List[DriverListItem], int]:
        drivers, total = self.repository.search(
            school_id=school_id,
            search_query=search_query,
            skip=pagination.skip,
            limit=pagination.limit,
        )
        route_names = self.repository.route_names_by_driver([d.id for d in drivers])
        items = [
            DriverListItem.model_validate(driver).model_copy(
                update={"route_names": route_names.get(driver.id, [])}
            )
            for driver in drivers
        ]
        return items, total

    def lookup(self, school_id: str) -> Sequence[BusDriver]:
        return self.repository.lookup(school_id)
