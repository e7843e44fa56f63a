"""
Bus route endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from school_admin.api.deps import get_route_service
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.transport import (
    RouteCreate,
    RouteLookupItem,
    RouteResponse,
    RouteSearchItem,
    RouteStopResponse,
    RouteStudentsCount,
    RouteUpdate,
)
from school_admin.services import RouteService

router = APIRouter(prefix="/routes")


@router.post("", response_model=SuccessResponse[RouteResponse])
def create_route(
    payload: RouteCreate,
    service: RouteService = Depends(get_route_service),
):
    route = service.create(payload)
    return success_response(RouteResponse.model_validate(route), 1, "Route Created Successfully")


@router.get("", response_model=SuccessResponse[List[RouteSearchItem]])
def search_routes(
    school_id: str = Query(..., alias="schoolId"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    service: RouteService = Depends(get_route_service),
):
    items = service.search(school_id, search_query)
    return success_response(items, len(items), "Fetched Successfully")


@router.get("/lookup", response_model=SuccessResponse[List[RouteLookupItem]])
def route_lookup(
    school_id: str = Query(..., alias="schoolId"),
    service: RouteService = Depends(get_route_service),
):
    data = [RouteLookupItem.model_validate(route) for route in service.lookup(school_id)]
    return success_response(data, len(data), "Fetched Successfully")


@router.get("/students-count", response_model=SuccessResponse[List[RouteStudentsCount]])
def students_per_route(
    school_id: str = Query(..., alias="schoolId"),
    service: RouteService = Depends(get_route_service),
):
    data = service.students_count(school_id)
    return success_response(data, len(data), "Fetched Successfully")


@router.get("/{route_id}", response_model=SuccessResponse[RouteResponse])
def get_route(
    route_id: str,
    service: RouteService = Depends(get_route_service),
):
    route = service.get(route_id)
    return success_response(RouteResponse.model_validate(route), 1, "Fetched Successfully")


@router.put("/{route_id}", response_model=SuccessResponse[RouteResponse])
def update_route(
    route_id: str,
    payload: RouteUpdate,
    service: RouteService = Depends(get_route_service),
):
    route = service.update(route_id, payload)
    return success_response(RouteResponse.model_validate(route), 1, "Updated Successfully")


@router.get("/{route_id}/stops", response_model=SuccessResponse[List[RouteStopResponse]])
def list_route_stops(
    route_id: str,
    service: RouteService = Depends(get_route_service),
):
    data = [RouteStopResponse.model_validate(stop) for stop in service.stops(route_id)]
    return success_response(data, len(data), "Fetched Successfully")


@router.get("/{route_id}/trip-number", response_model=SuccessResponse[int])
def get_trip_number(
    route_id: str,
    service: RouteService = Depends(get_route_service),
):
    return success_response(service.trip_number(route_id), 1, "Fetched Successfully")
