# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.common_dto import DeleteResponse
from ...application.dto.device_dto import DeviceCreateRequest, DeviceResponse, DeviceUpdateRequest
from ...application.use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from .errors import raise_http_error


router = APIRouter(tags=["devices"])


@router.post(
    "/projects/{project_id}/devices",
    response_model=DeviceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_device(project_id: str, request: DeviceCreateRequest) -> DeviceResponse:
    """
    Create a device type in a project's catalogue

    Args:
        project_id: Owning project
        request: Device creation request

    Returns:
        DeviceResponse with created device information
    """
    container = get_container()
    create_device_use_case = container.get(CreateDeviceUseCase)

    try:
        return await create_device_use_case.execute(project_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/projects/{project_id}/devices", response_model=List[DeviceResponse])
async def list_devices(project_id: str) -> List[DeviceResponse]:
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)

    try:
        return await list_devices_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/devices/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    container = get_container()
    get_device_use_case = container.get(GetDeviceUseCase)

    try:
        return await get_device_use_case.execute(device_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.patch("/devices/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    container = get_container()
    update_device_use_case = container.get(UpdateDeviceUseCase)

    try:
        return await update_device_use_case.execute(device_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.delete("/devices/{device_id}", response_model=DeleteResponse)
async def delete_device(device_id: str) -> DeleteResponse:
    """Delete a device and every stamp placed with it"""
    container = get_container()
    delete_device_use_case = container.get(DeleteDeviceUseCase)

    try:
        await delete_device_use_case.execute(device_id)
    except TakeoffError as exception:
        raise_http_error(exception)
    return DeleteResponse(id=device_id)
