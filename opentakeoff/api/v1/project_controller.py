# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, Request, Response, status

# Local application imports
from ...application.dto.common_dto import DeleteResponse
from ...application.dto.project_dto import (
    ProjectCreateRequest,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdateRequest,
)
from ...application.use_cases.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from ...utils.pagination import build_link_header
from .errors import raise_http_error


router = APIRouter(tags=["projects"])


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(request: ProjectCreateRequest) -> ProjectResponse:
    """
    Create a new project

    Args:
        request: Project creation request

    Returns:
        ProjectResponse with the created project
    """
    container = get_container()
    create_project_use_case = container.get(CreateProjectUseCase)

    try:
        return await create_project_use_case.execute(request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects(
    request: Request,
    response: Response,
    limit: Optional[int] = Query(None, ge=1),
    cursor: Optional[str] = Query(None),
) -> ProjectListResponse:
    """
    List projects, paginated by ID

    A `Link: <...>; rel="next"` header is set when another page exists.
    """
    container = get_container()
    list_projects_use_case = container.get(ListProjectsUseCase)

    try:
        page = await list_projects_use_case.execute(limit=limit, cursor=cursor)
    except TakeoffError as exception:
        raise_http_error(exception)

    link = build_link_header(request.url.path, {"limit": limit}, page.pagination.next_cursor)
    if link:
        response.headers["Link"] = link
    return page


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: str) -> ProjectResponse:
    container = get_container()
    get_project_use_case = container.get(GetProjectUseCase)

    try:
        return await get_project_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.patch("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(project_id: str, request: ProjectUpdateRequest) -> ProjectResponse:
    container = get_container()
    update_project_use_case = container.get(UpdateProjectUseCase)

    try:
        return await update_project_use_case.execute(project_id, request)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.delete("/projects/{project_id}", response_model=DeleteResponse)
async def delete_project(project_id: str) -> DeleteResponse:
    """
    Delete a project together with its plans, devices, locations, stamps
    and history
    """
    container = get_container()
    delete_project_use_case = container.get(DeleteProjectUseCase)

    try:
        await delete_project_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)
    return DeleteResponse(id=project_id)
