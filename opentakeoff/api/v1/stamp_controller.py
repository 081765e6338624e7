# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Query, Request, Response, status

# Local application imports
from ...application.dto.common_dto import DeleteResponse
from ...application.dto.history_dto import HistoryEntryResponse
from ...application.dto.stamp_dto import (
    StampCreateRequest,
    StampListResponse,
    StampResponse,
    StampUpdateRequest,
)
from ...application.use_cases.stamp import (
    CreateStampUseCase,
    DeleteStampUseCase,
    GetStampUseCase,
    ListStampRevisionsUseCase,
    ListStampsUseCase,
    UpdateStampUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from ...utils.pagination import build_link_header
from .errors import raise_http_error


router = APIRouter(tags=["stamps"])


@router.post(
    "/plans/{plan_id}/stamps",
    response_model=StampResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_stamp(plan_id: str, request: StampCreateRequest) -> StampResponse:
    """
    Place a device stamp on a plan

    Without an explicit `location_id` the stamp is assigned to the first
    location containing its position. Subscribers of the plan receive the
    updated count.
    """
    container = get_container()
    create_stamp_use_case = container.get(CreateStampUseCase)

    try:
        return await create_stamp_use_case.execute(plan_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/plans/{plan_id}/stamps", response_model=StampListResponse)
async def list_stamps(
    plan_id: str,
    request: Request,
    response: Response,
    limit: Optional[int] = Query(None, ge=1),
    cursor: Optional[str] = Query(None),
) -> StampListResponse:
    container = get_container()
    list_stamps_use_case = container.get(ListStampsUseCase)

    try:
        page = await list_stamps_use_case.execute(plan_id, limit=limit, cursor=cursor)
    except TakeoffError as exception:
        raise_http_error(exception)

    link = build_link_header(request.url.path, {"limit": limit}, page.pagination.next_cursor)
    if link:
        response.headers["Link"] = link
    return page


@router.get("/stamps/{stamp_id}", response_model=StampResponse)
async def get_stamp(stamp_id: str) -> StampResponse:
    container = get_container()
    get_stamp_use_case = container.get(GetStampUseCase)

    try:
        return await get_stamp_use_case.execute(stamp_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.patch("/stamps/{stamp_id}", response_model=StampResponse)
async def update_stamp(stamp_id: str, request: StampUpdateRequest) -> StampResponse:
    """
    Move a stamp or change its location

    When `updated_at` is sent and no longer matches the stored stamp the
    request fails with 409.
    """
    container = get_container()
    update_stamp_use_case = container.get(UpdateStampUseCase)

    try:
        return await update_stamp_use_case.execute(stamp_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.delete("/stamps/{stamp_id}", response_model=DeleteResponse)
async def delete_stamp(stamp_id: str) -> DeleteResponse:
    container = get_container()
    delete_stamp_use_case = container.get(DeleteStampUseCase)

    try:
        await delete_stamp_use_case.execute(stamp_id)
    except TakeoffError as exception:
        raise_http_error(exception)
    return DeleteResponse(id=stamp_id)


@router.get("/stamps/{stamp_id}/revisions", response_model=List[HistoryEntryResponse])
async def list_stamp_revisions(stamp_id: str) -> List[HistoryEntryResponse]:
    container = get_container()
    list_revisions_use_case = container.get(ListStampRevisionsUseCase)

    try:
        return await list_revisions_use_case.execute(stamp_id)
    except TakeoffError as exception:
        raise_http_error(exception)
