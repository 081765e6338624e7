# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ...dto.history_dto import PruneHistoryResponse
from ...services.history_service import HistoryService


class PruneHistoryUseCase:
    """Use case for trimming a project's history to the configured window"""

    def __init__(self, history_service: HistoryService, project_repository: ProjectRepository) -> None:
        self.history_service = history_service
        self.project_repository = project_repository

    async def execute(self, project_id: str) -> PruneHistoryResponse:
        if await self.project_repository.find_by_id(project_id) is None:
            raise NotFoundError(f"Project {project_id} not found")
        deleted = await self.history_service.prune_history(project_id)
        return PruneHistoryResponse(project_id=project_id, deleted=deleted)
