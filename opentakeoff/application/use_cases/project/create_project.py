# Standard library imports
import logging
from uuid import uuid4

# Local application imports
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.models.project import Project
from ....utils.datetime_utils import utc_now
from ...dto.project_dto import ProjectCreateRequest, ProjectResponse

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """Use case for creating a new project"""

    def __init__(self, project_repository: ProjectRepository) -> None:
        self.project_repository = project_repository

    async def execute(self, request: ProjectCreateRequest) -> ProjectResponse:
        now = utc_now()
        project = Project(
            id=str(uuid4()),
            name=request.name.strip(),
            description=request.description,
            created_at=now,
            updated_at=now,
        )
        saved_project = await self.project_repository.save(project)
        logger.info(f"Created project {saved_project.id} ({saved_project.name})")
        return ProjectResponse.from_domain(saved_project)
