# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ...dto.history_dto import HistoryActionResponse
from ...services.history_service import HistoryService


class UndoProjectUseCase:
    """Use case for undoing the most recent change anywhere in a project"""

    def __init__(self, history_service: HistoryService, project_repository: ProjectRepository) -> None:
        self.history_service = history_service
        self.project_repository = project_repository

    async def execute(self, project_id: str) -> HistoryActionResponse:
        if await self.project_repository.find_by_id(project_id) is None:
            raise NotFoundError(f"Project {project_id} not found")
        result = await self.history_service.undo_project(project_id)
        return HistoryActionResponse.from_domain(result)
