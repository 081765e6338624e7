# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ....utils.datetime_utils import utc_now
from ...dto.project_dto import ProjectResponse, ProjectUpdateRequest


class UpdateProjectUseCase:
    """Use case for renaming or re-describing a project"""

    def __init__(self, project_repository: ProjectRepository) -> None:
        self.project_repository = project_repository

    async def execute(self, project_id: str, request: ProjectUpdateRequest) -> ProjectResponse:
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")

        if request.name is not None:
            project.name = request.name.strip()
        if "description" in request.model_fields_set:
            project.description = request.description
        project.updated_at = utc_now()

        saved_project = await self.project_repository.save(project)
        return ProjectResponse.from_domain(saved_project)
