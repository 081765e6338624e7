# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.models.revision import ChangeType, EntityType
from ...services.history_service import HistoryService
from ...services.stamp_placement_service import StampPlacementService

logger = logging.getLogger(__name__)


class DeleteLocationUseCase:
    """Use case for deleting a location; its stamps stay on the plan unassigned"""

    def __init__(
        self,
        location_repository: LocationRepository,
        plan_repository: PlanRepository,
        history_service: HistoryService,
        placement_service: StampPlacementService,
    ) -> None:
        self.location_repository = location_repository
        self.plan_repository = plan_repository
        self.history_service = history_service
        self.placement_service = placement_service

    async def execute(self, location_id: str) -> None:
        location = await self.location_repository.find_by_id(location_id)
        if location is None:
            raise NotFoundError(f"Location {location_id} not found")

        await self.location_repository.delete(location_id)
        plan = await self.plan_repository.find_by_id(location.plan_id)
        await self.history_service.record_revision(
            entity_type=EntityType.LOCATION,
            entity_id=location_id,
            change_type=ChangeType.DELETE,
            snapshot=None,
            project_id=plan.project_id if plan else "",
            plan_id=location.plan_id,
        )
        detached = await self.placement_service.detach_location(location.plan_id, location_id)
        logger.info(f"Deleted location {location_id}; detached {detached} stamps")
