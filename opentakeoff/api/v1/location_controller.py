# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.common_dto import DeleteResponse
from ...application.dto.location_dto import LocationCreateRequest, LocationResponse, LocationUpdateRequest
from ...application.use_cases.location import (
    CreateLocationUseCase,
    DeleteLocationUseCase,
    GetLocationUseCase,
    ListLocationsUseCase,
    UpdateLocationUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from .errors import raise_http_error


router = APIRouter(tags=["locations"])


@router.post(
    "/plans/{plan_id}/locations",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_location(plan_id: str, request: LocationCreateRequest) -> LocationResponse:
    """
    Create a rectangle or polygon location on a plan

    Stamps of the plan lying inside the new shape are assigned to it.
    """
    container = get_container()
    create_location_use_case = container.get(CreateLocationUseCase)

    try:
        return await create_location_use_case.execute(plan_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/plans/{plan_id}/locations", response_model=List[LocationResponse])
async def list_locations(plan_id: str) -> List[LocationResponse]:
    container = get_container()
    list_locations_use_case = container.get(ListLocationsUseCase)

    try:
        return await list_locations_use_case.execute(plan_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/locations/{location_id}", response_model=LocationResponse)
async def get_location(location_id: str) -> LocationResponse:
    container = get_container()
    get_location_use_case = container.get(GetLocationUseCase)

    try:
        return await get_location_use_case.execute(location_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.patch("/locations/{location_id}", response_model=LocationResponse)
async def update_location(location_id: str, request: LocationUpdateRequest) -> LocationResponse:
    container = get_container()
    update_location_use_case = container.get(UpdateLocationUseCase)

    try:
        return await update_location_use_case.execute(location_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.delete("/locations/{location_id}", response_model=DeleteResponse)
async def delete_location(location_id: str) -> DeleteResponse:
    """Delete a location; its stamps stay on the plan, unassigned"""
    container = get_container()
    delete_location_use_case = container.get(DeleteLocationUseCase)

    try:
        await delete_location_use_case.execute(location_id)
    except TakeoffError as exception:
        raise_http_error(exception)
    return DeleteResponse(id=location_id)
