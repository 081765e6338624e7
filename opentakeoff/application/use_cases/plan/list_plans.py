# Standard library imports
from typing import List

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.repositories.plan_repository import PlanRepository
from ...dto.plan_dto import PlanResponse


class ListPlansUseCase:
    """Use case for listing the plans of a project ordered by page number"""

    def __init__(self, plan_repository: PlanRepository, project_repository: ProjectRepository) -> None:
        self.plan_repository = plan_repository
        self.project_repository = project_repository

    async def execute(self, project_id: str) -> List[PlanResponse]:
        if await self.project_repository.find_by_id(project_id) is None:
            raise NotFoundError(f"Project {project_id} not found")

        plans = await self.plan_repository.find_by_project(project_id)
        return [PlanResponse.from_domain(plan) for plan in plans]
