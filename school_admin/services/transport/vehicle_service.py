"""
School vehicle service.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ConflictError, ResourceInUseError
from school_admin.core.pagination import PaginationParams
from school_admin.models.transport import SchoolVehicle
from school_admin.repositories.transport import VehicleRepository
from school_admin.schemas.transport.vehicle import VehicleCreate, VehicleListItem, VehicleUpdate
from school_admin.services.base import BaseService
from school_admin.utils.date_utils import parse_input_date


class VehicleService(BaseService[SchoolVehicle, VehicleRepository]):
    resource_name = "Vehicle"
    not_found_message = "Vehicle not Found"

    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        super().__init__(VehicleRepository(db_session), db_session, clock)

    def _ensure_unique(
        self,
        registration_number: Optional[str],
        assigned_vehicle_number: Optional[int],
        exclude_id: Optional[str] = None,
    ) -> None:
        if registration_number is not None:
            existing = self.repository.get_by(registration_number=registration_number)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError("Vehicle with Same Registration Number already exists")
        if assigned_vehicle_number is not None:
            existing = self.repository.get_by(assigned_vehicle_number=assigned_vehicle_number)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError("Vehicle Number already exists")

    @staticmethod
    def _parse_validity_dates(data: Dict[str, Any]) -> Dict[str, Any]:
        for field in ("tax_valid", "fc_valid"):
            if data.get(field) is not None:
                data[field] = parse_input_date(data[field], field)
        return data

    def add(self, payload: VehicleCreate) -> SchoolVehicle:
        self._ensure_unique(payload.registration_number, payload.assigned_vehicle_number)
        data = self._parse_validity_dates(payload.model_dump())

        with self.transaction():
            vehicle = self.repository.create(data)
        self._log_mutation("added", vehicle.id, school_id=vehicle.school_id)
        return vehicle

    def get(self, vehicle_id: str) -> SchoolVehicle:
        return self.get_or_404(vehicle_id)

    def update(self, vehicle_id: str, payload: VehicleUpdate) -> SchoolVehicle:
        vehicle = self.get_or_404(vehicle_id)
        data = self._parse_validity_dates(payload.changes())
        self._ensure_unique(
            data.get("registration_number"),
            data.get("assigned_vehicle_number"),
            exclude_id=vehicle.id,
        )
        with self.transaction():
            self.repository.update(vehicle, data)
        self._log_mutation("updated", vehicle.id, fields=sorted(data))
        return vehicle

    def delete(self, vehicle_id: str) -> None:
        vehicle = self.get_or_404(vehicle_id)
        if self.repository.is_used_by_route(vehicle.id):
            raise ResourceInUseError(
                "Vehicle Is Assigned To A Route",
                {"vehicle_id": vehicle.id},
            )
        with self.transaction():
            self.repository.delete(vehicle)
        self._log_mutation("deleted", vehicle_id)

    def list(
        self,
        *,
        school_id: str,
        search_query: Optional[str],
        pagination: PaginationParams,
    ) -> Tuple[List[VehicleListItem], int]:
        vehicles, total = self.repository.search(
            school_id=school_id,
            search_query=search_query,
            skip=pagination.skip,
            limit=pagination.limit,
        )
        route_names = self.repository.route_names_by_vehicle([v.id for v in vehicles])
        items = [
            VehicleListItem.model_validate(vehicle).model_copy(
                update={"route_names": route_names.get(vehicle.id, [])}
            )
            for vehicle in vehicles
        ]
        return items, total

    def vehicle_numbers(self, school_id: str, search_query: Optional[str]) -> Sequence[SchoolVehicle]:
        return self.repository.vehicle_numbers(school_id, search_query)
