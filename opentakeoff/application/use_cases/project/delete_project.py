# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....domain.repositories.revision_repository import RevisionRepository

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """Use case for deleting a project together with everything it owns"""

    def __init__(
        self,
        project_repository: ProjectRepository,
        plan_repository: PlanRepository,
        device_repository: DeviceRepository,
        location_repository: LocationRepository,
        stamp_repository: StampRepository,
        revision_repository: RevisionRepository,
    ) -> None:
        self.project_repository = project_repository
        self.plan_repository = plan_repository
        self.device_repository = device_repository
        self.location_repository = location_repository
        self.stamp_repository = stamp_repository
        self.revision_repository = revision_repository

    async def execute(self, project_id: str) -> None:
        """
        Delete a project, its plans (with locations and stamps), devices and history.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")

        plans = await self.plan_repository.find_by_project(project_id)
        for plan in plans:
            await self.stamp_repository.delete_by_plan(plan.id)
            await self.location_repository.delete_by_plan(plan.id)
            await self.plan_repository.delete(plan.id)

        await self.device_repository.delete_by_project(project_id)
        await self.revision_repository.delete_by_project(project_id)
        await self.project_repository.delete(project_id)

        logger.info(f"Deleted project {project_id} with {len(plans)} plans")
