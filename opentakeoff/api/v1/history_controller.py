# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query

# Local application imports
from ...application.dto.history_dto import (
    HistoryActionResponse,
    HistoryListResponse,
    PruneHistoryResponse,
)
from ...application.use_cases.history import (
    GetProjectHistoryUseCase,
    ListEntityHistoryUseCase,
    PruneHistoryUseCase,
    RedoEntityUseCase,
    RedoProjectUseCase,
    UndoEntityUseCase,
    UndoProjectUseCase,
)
from ...core.exceptions import TakeoffError
from ...di.container import get_container
from .errors import raise_http_error


router = APIRouter(tags=["history"])


@router.get("/projects/{project_id}/history", response_model=HistoryListResponse)
async def get_project_history(
    project_id: str,
    limit: Optional[int] = Query(None, ge=1),
) -> HistoryListResponse:
    """Most recent history entries of a project, newest first"""
    container = get_container()
    get_history_use_case = container.get(GetProjectHistoryUseCase)

    try:
        return await get_history_use_case.execute(project_id, limit=limit)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.post("/projects/{project_id}/history/undo", response_model=HistoryActionResponse)
async def undo_project(project_id: str) -> HistoryActionResponse:
    """
    Undo the most recent change in the project

    Returns `success: false` when there is nothing to undo.
    """
    container = get_container()
    undo_use_case = container.get(UndoProjectUseCase)

    try:
        return await undo_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.post("/projects/{project_id}/history/redo", response_model=HistoryActionResponse)
async def redo_project(project_id: str) -> HistoryActionResponse:
    container = get_container()
    redo_use_case = container.get(RedoProjectUseCase)

    try:
        return await redo_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.post("/projects/{project_id}/history/prune", response_model=PruneHistoryResponse)
async def prune_history(project_id: str) -> PruneHistoryResponse:
    container = get_container()
    prune_use_case = container.get(PruneHistoryUseCase)

    try:
        return await prune_use_case.execute(project_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.get("/history/{entity_type}/{entity_id}", response_model=HistoryListResponse)
async def list_entity_history(entity_type: str, entity_id: str) -> HistoryListResponse:
    container = get_container()
    list_history_use_case = container.get(ListEntityHistoryUseCase)

    try:
        return await list_history_use_case.execute(entity_type, entity_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.post("/history/{entity_type}/{entity_id}/undo", response_model=HistoryActionResponse)
async def undo_entity(entity_type: str, entity_id: str) -> HistoryActionResponse:
    container = get_container()
    undo_use_case = container.get(UndoEntityUseCase)

    try:
        return await undo_use_case.execute(entity_type, entity_id)
    except TakeoffError as exception:
        raise_http_error(exception)


@router.post("/history/{entity_type}/{entity_id}/redo", response_model=HistoryActionResponse)
async def redo_entity(entity_type: str, entity_id: str) -> HistoryActionResponse:
    container = get_container()
    redo_use_case = container.get(RedoEntityUseCase)

    try:
        return await redo_use_case.execute(entity_type, entity_id)
    except TakeoffError as exception:
        raise_http_error(exception)
