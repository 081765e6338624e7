# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ...dto.history_dto import HistoryEntryResponse, HistoryListResponse
from ...services.history_service import HistoryService


class GetProjectHistoryUseCase:
    """Use case for listing the most recent changes of a project (newest first)"""

    def __init__(self, history_service: HistoryService, project_repository: ProjectRepository) -> None:
        self.history_service = history_service
        self.project_repository = project_repository

    async def execute(self, project_id: str, limit: Optional[int] = None) -> HistoryListResponse:
        if await self.project_repository.find_by_id(project_id) is None:
            raise NotFoundError(f"Project {project_id} not found")

        revisions = await self.history_service.get_history(project_id, limit)
        items = [HistoryEntryResponse.from_domain(revision) for revision in revisions]
        return HistoryListResponse(items=items, count=len(items))
