# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....domain.repositories.revision_repository import RevisionRepository

logger = logging.getLogger(__name__)


class DeletePlanUseCase:
    """Use case for deleting a plan with its locations, stamps and history"""

    def __init__(
        self,
        plan_repository: PlanRepository,
        location_repository: LocationRepository,
        stamp_repository: StampRepository,
        revision_repository: RevisionRepository,
    ) -> None:
        self.plan_repository = plan_repository
        self.location_repository = location_repository
        self.stamp_repository = stamp_repository
        self.revision_repository = revision_repository

    async def execute(self, plan_id: str) -> None:
        plan = await self.plan_repository.find_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        stamps = await self.stamp_repository.delete_by_plan(plan_id)
        locations = await self.location_repository.delete_by_plan(plan_id)
        await self.revision_repository.delete_by_plan(plan_id)
        await self.plan_repository.delete(plan_id)

        logger.info(f"Deleted plan {plan_id} ({stamps} stamps, {locations} locations)")
