# External package imports
from fastapi import APIRouter, Query, Response

# Local application imports
from ...application.dto.count_dto import PlanCountsResponse, RecomputeCountsResponse
from ...application.use_cases.count import (
    ExportProjectUseCase,
    GetPlanCountsUseCase,
    RecomputePlanCountsUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from .errors import raise_http_error


router = APIRouter(tags=["counts"])


@router.get("/plans/{plan_id}/counts", response_model=PlanCountsResponse)
async def get_plan_counts(plan_id: str) -> PlanCountsResponse:
    """
    Device counts of a plan per location, plus per-device totals
    """
    container = get_container()
    get_counts_use_case = container.get(GetPlanCountsUseCase)

    try:
        return await get_counts_use_case.execute(plan_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.post("/plans/{plan_id}/counts/recompute", response_model=RecomputeCountsResponse)
async def recompute_plan_counts(plan_id: str) -> RecomputeCountsResponse:
    """Re-classify every stamp of the plan against the current locations"""
    container = get_container()
    recompute_use_case = container.get(RecomputePlanCountsUseCase)

    try:
        return await recompute_use_case.execute(plan_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/projects/{project_id}/export")
async def export_project(
    project_id: str,
    export_format: str = Query("csv", alias="format"),
    include_locations: bool = Query(True),
) -> Response:
    """
    Download the project's device counts as CSV or JSON

    Args:
        project_id: Project to export
        export_format: `csv` or `json` (query parameter `format`)
        include_locations: One row per device and location when true,
            one row per device otherwise
    """
    container = get_container()
    export_use_case = container.get(ExportProjectUseCase)

    try:
        result = await export_use_case.execute(project_id, export_format, include_locations)
    except TakeoffError as exception:
        raise_http_error(exception)

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": result.content_disposition},
    )
