# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ForeignKeyViolationError, NotFoundError, OptimisticLockError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....domain.models.revision import ChangeType, EntityType
from ....utils.datetime_utils import same_instant, to_iso, utc_now
from ...dto.stamp_dto import StampResponse, StampUpdateRequest
from ...services.count_notifier import CountNotifier
from ...services.history_service import HistoryService
from ...services.stamp_placement_service import StampPlacementService

logger = logging.getLogger(__name__)


class UpdateStampUseCase:
    """Use case for moving a stamp or changing its location"""

    def __init__(
        self,
        stamp_repository: StampRepository,
        plan_repository: PlanRepository,
        location_repository: LocationRepository,
        placement_service: StampPlacementService,
        history_service: HistoryService,
        notifier: CountNotifier,
    ) -> None:
        self.stamp_repository = stamp_repository
        self.plan_repository = plan_repository
        self.location_repository = location_repository
        self.placement_service = placement_service
        self.history_service = history_service
        self.notifier = notifier

    async def execute(self, stamp_id: str, request: StampUpdateRequest) -> StampResponse:
        """
        Update a stamp

        A move without an explicit location re-detects the location from the
        new position. Count events go out for the old and the new pair.

        Raises:
            NotFoundError: If the stamp does not exist
            OptimisticLockError: If `updated_at` does not match the stored value
            ForeignKeyViolationError: If the location is not on the stamp's plan
        """
        stamp = await self.stamp_repository.find_by_id(stamp_id)
        if stamp is None:
            raise NotFoundError(f"Stamp {stamp_id} not found")

        if request.updated_at is not None and not same_instant(request.updated_at, stamp.updated_at):
            raise OptimisticLockError(
                details={"stamp_id": stamp_id, "current_updated_at": to_iso(stamp.updated_at)}
            )

        previous_key = stamp.count_key

        if request.position is not None:
            stamp.position = request.position.to_domain()

        if "location_id" in request.model_fields_set:
            if request.location_id:
                location = await self.location_repository.find_by_id(request.location_id)
                if location is None or location.plan_id != stamp.plan_id:
                    raise ForeignKeyViolationError(
                        f"Location {request.location_id} not found on plan",
                        details={"location_id": request.location_id},
                    )
            stamp.location_id = request.location_id
        elif request.position is not None:
            stamp.location_id = await self.placement_service.resolve_location(stamp.plan_id, stamp.position)

        stamp.updated_at = utc_now()
        await self.stamp_repository.save(stamp)

        plan = await self.plan_repository.find_by_id(stamp.plan_id)
        await self.history_service.record_revision(
            entity_type=EntityType.STAMP,
            entity_id=stamp.id,
            change_type=ChangeType.UPDATE,
            snapshot=stamp.to_snapshot(),
            project_id=plan.project_id if plan else "",
            plan_id=stamp.plan_id,
        )
        await self.notifier.notify_many([previous_key, stamp.count_key])
        logger.debug(f"Updated stamp {stamp.id} (location {stamp.location_id})")

        return StampResponse.from_domain(stamp)
