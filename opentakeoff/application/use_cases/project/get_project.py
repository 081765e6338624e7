# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ...dto.project_dto import ProjectResponse


class GetProjectUseCase:
    """Use case for getting a project by ID"""

    def __init__(self, project_repository: ProjectRepository) -> None:
        self.project_repository = project_repository

    async def execute(self, project_id: str) -> ProjectResponse:
        """
        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        return ProjectResponse.from_domain(project)
