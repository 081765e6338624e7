# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.common_dto import DeleteResponse
from ...application.dto.plan_dto import PlanCreateRequest, PlanResponse, PlanUpdateRequest
from ...application.use_cases.plan import (
    CreatePlanUseCase,
    DeletePlanUseCase,
    GetPlanUseCase,
    ListPlansUseCase,
    UpdatePlanUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from .errors import raise_http_error


router = APIRouter(tags=["plans"])


@router.post(
    "/projects/{project_id}/plans",
    response_model=PlanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_plan(project_id: str, request: PlanCreateRequest) -> PlanResponse:
    """
    Register a plan page of an already uploaded drawing

    Args:
        project_id: Owning project
        request: File metadata and page information

    Returns:
        PlanResponse with the registered plan
    """
    container = get_container()
    create_plan_use_case = container.get(CreatePlanUseCase)

    try:
        return await create_plan_use_case.execute(project_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/projects/{project_id}/plans", response_model=List[PlanResponse])
async def list_plans(project_id: str) -> List[PlanResponse]:
    container = get_container()
    list_plans_use_case = container.get(ListPlansUseCase)

    try:
        return await list_plans_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/plans/{plan_id}", response_model=PlanResponse)
async def get_plan(plan_id: str) -> PlanResponse:
    container = get_container()
    get_plan_use_case = container.get(GetPlanUseCase)

    try:
        return await get_plan_use_case.execute(plan_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.patch("/plans/{plan_id}", response_model=PlanResponse)
async def update_plan(plan_id: str, request: PlanUpdateRequest) -> PlanResponse:
    container = get_container()
    update_plan_use_case = container.get(UpdatePlanUseCase)

    try:
        return await update_plan_use_case.execute(plan_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.delete("/plans/{plan_id}", response_model=DeleteResponse)
async def delete_plan(plan_id: str) -> DeleteResponse:
    container = get_container()
    delete_plan_use_case = container.get(DeletePlanUseCase)

    try:
        await delete_plan_use_case.execute(plan_id)
    except TakeoffError as exception:
        raise_http_error(exception)
    return DeleteResponse(id=plan_id)
