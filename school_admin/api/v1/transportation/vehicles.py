"""
School vehicle endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from school_admin.api.deps import get_pagination_params, get_vehicle_service
from school_admin.core.pagination import PaginationParams
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.transport import (
    VehicleAttachments,
    VehicleCreate,
    VehicleListItem,
    VehicleNumberItem,
    VehicleResponse,
    VehicleUpdate,
)
from school_admin.services import VehicleService

router = APIRouter(prefix="/vehicles")


@router.post("", response_model=SuccessResponse[VehicleResponse])
def add_vehicle(
    payload: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = service.add(payload)
    return success_response(VehicleResponse.model_validate(vehicle), 1, "Vehicle Added Successfully")


@router.get("", response_model=SuccessResponse[List[VehicleListItem]])
def list_vehicles(
    school_id: str = Query(..., alias="schoolId"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    pagination: PaginationParams = Depends(get_pagination_params),
    service: VehicleService = Depends(get_vehicle_service),
):
    items, total = service.list(school_id=school_id, search_query=search_query, pagination=pagination)
    return success_response(items, total, "Fetched Successfully")


@router.get("/numbers", response_model=SuccessResponse[List[VehicleNumberItem]])
def list_vehicle_numbers(
    school_id: str = Query(..., alias="schoolId"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = service.vehicle_numbers(school_id, search_query)
    data = [VehicleNumberItem.model_validate(vehicle) for vehicle in vehicles]
    return success_response(data, len(data), "Fetched Successfully")


@router.get("/{vehicle_id}", response_model=SuccessResponse[VehicleResponse])
def get_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = service.get(vehicle_id)
    return success_response(VehicleResponse.model_validate(vehicle), 1, "Fetched Successfully")


@router.get("/{vehicle_id}/view", response_model=SuccessResponse[VehicleAttachments])
def view_vehicle_attachments(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = service.get(vehicle_id)
    return success_response(VehicleAttachments.model_validate(vehicle), 1, "Fetched Successfully")


@router.put("/{vehicle_id}", response_model=SuccessResponse[VehicleResponse])
def update_vehicle(
    vehicle_id: str,
    payload: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = service.update(vehicle_id, payload)
    return success_response(VehicleResponse.model_validate(vehicle), 1, "Updated Successfully")


@router.delete("/{vehicle_id}", response_model=SuccessResponse[None])
def delete_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
):
    service.delete(vehicle_id)
    return success_response(None, 1, "Deleted Successfully")
