# Standard library imports
import logging
from uuid import uuid4

# Local application imports
from ....core.exceptions import AlreadyExistsError, ForeignKeyViolationError, InvalidInputError
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.models.plan import Plan
from ....utils.datetime_utils import utc_now
from ...dto.plan_dto import PlanCreateRequest, PlanResponse

logger = logging.getLogger(__name__)


class CreatePlanUseCase:
    """Use case for registering a plan page of an uploaded drawing"""

    def __init__(self, plan_repository: PlanRepository, project_repository: ProjectRepository) -> None:
        self.plan_repository = plan_repository
        self.project_repository = project_repository

    async def execute(self, project_id: str, request: PlanCreateRequest) -> PlanResponse:
        """
        Register a plan

        Raises:
            ForeignKeyViolationError: If the project does not exist
            AlreadyExistsError: If the page number is already taken in the project
            InvalidInputError: If page number exceeds page count
        """
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            raise ForeignKeyViolationError(f"Project {project_id} not found")

        if await self.plan_repository.find_by_project_page(project_id, request.page_number):
            raise AlreadyExistsError(
                f"Page {request.page_number} already exists in project",
                details={"project_id": project_id, "page_number": request.page_number},
            )

        now = utc_now()
        try:
            plan = Plan(
                id=str(uuid4()),
                project_id=project_id,
                name=request.name.strip(),
                page_number=request.page_number,
                page_count=request.page_count,
                file_path=request.file_path,
                file_size=request.file_size,
                file_hash=request.file_hash,
                width=request.width,
                height=request.height,
                created_at=now,
                updated_at=now,
            )
        except ValueError as e:
            raise InvalidInputError(str(e))

        saved_plan = await self.plan_repository.save(plan)
        logger.info(f"Registered plan {saved_plan.id} (page {saved_plan.page_number}) in project {project_id}")
        return PlanResponse.from_domain(saved_plan)
