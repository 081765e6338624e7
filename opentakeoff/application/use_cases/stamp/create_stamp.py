# Standard library imports
import logging
from uuid import uuid4

# Local application imports
from ....core.exceptions import ForeignKeyViolationError, NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....domain.models.revision import ChangeType, EntityType
from ....domain.models.stamp import Stamp
from ....utils.datetime_utils import utc_now
from ...dto.stamp_dto import StampCreateRequest, StampResponse
from ...services.count_notifier import CountNotifier
from ...services.history_service import HistoryService
from ...services.stamp_placement_service import StampPlacementService

logger = logging.getLogger(__name__)


class CreateStampUseCase:
    """Use case for placing a device stamp on a plan"""

    def __init__(
        self,
        stamp_repository: StampRepository,
        plan_repository: PlanRepository,
        device_repository: DeviceRepository,
        location_repository: LocationRepository,
        placement_service: StampPlacementService,
        history_service: HistoryService,
        notifier: CountNotifier,
    ) -> None:
        self.stamp_repository = stamp_repository
        self.plan_repository = plan_repository
        self.device_repository = device_repository
        self.location_repository = location_repository
        self.placement_service = placement_service
        self.history_service = history_service
        self.notifier = notifier

    async def execute(self, plan_id: str, request: StampCreateRequest) -> StampResponse:
        """
        Create a stamp

        Without an explicit location the stamp is assigned to the first location
        of the plan containing its position.

        Raises:
            NotFoundError: If the plan does not exist
            ForeignKeyViolationError: If the device is not part of the plan's
                project, or the location is not on the plan
        """
        plan = await self.plan_repository.find_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        device = await self.device_repository.find_by_id(request.device_id)
        if device is None or device.project_id != plan.project_id:
            raise ForeignKeyViolationError(
                f"Device {request.device_id} not found in project",
                details={"device_id": request.device_id},
            )

        position = request.position.to_domain()
        if request.location_id:
            location = await self.location_repository.find_by_id(request.location_id)
            if location is None or location.plan_id != plan_id:
                raise ForeignKeyViolationError(
                    f"Location {request.location_id} not found on plan",
                    details={"location_id": request.location_id},
                )
            location_id = location.id
        else:
            location_id = await self.placement_service.resolve_location(plan_id, position)

        now = utc_now()
        stamp = Stamp(
            id=str(uuid4()),
            plan_id=plan_id,
            device_id=device.id,
            location_id=location_id,
            position=position,
            created_at=now,
            updated_at=now,
        )
        await self.stamp_repository.save(stamp)
        await self.history_service.record_revision(
            entity_type=EntityType.STAMP,
            entity_id=stamp.id,
            change_type=ChangeType.CREATE,
            snapshot=stamp.to_snapshot(),
            project_id=plan.project_id,
            plan_id=plan_id,
        )
        await self.notifier.notify(*stamp.count_key)

        logger.debug(f"Created stamp {stamp.id} for device {device.id} on plan {plan_id}")
        return StampResponse.from_domain(stamp)
