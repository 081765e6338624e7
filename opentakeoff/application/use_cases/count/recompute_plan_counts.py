# Standard library imports
import logging
from collections import defaultdict
from typing import Dict, List, Optional

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....utils.datetime_utils import utc_now
from ....utils.geometry import classify_point
from ...dto.count_dto import RecomputeCountsResponse
from ...services.count_notifier import CountNotifier

logger = logging.getLogger(__name__)


class RecomputePlanCountsUseCase:
    """
    Use case for re-classifying every stamp of a plan against its locations.

    Each stamp is assigned to the first location (creation order) containing
    it, or detached when none does. Count events go out for every pair whose
    total changed.
    """

    def __init__(
        self,
        plan_repository: PlanRepository,
        location_repository: LocationRepository,
        stamp_repository: StampRepository,
        notifier: CountNotifier,
    ) -> None:
        self.plan_repository = plan_repository
        self.location_repository = location_repository
        self.stamp_repository = stamp_repository
        self.notifier = notifier

    async def execute(self, plan_id: str) -> RecomputeCountsResponse:
        if await self.plan_repository.find_by_id(plan_id) is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        locations = await self.location_repository.find_by_plan(plan_id)
        stamps = await self.stamp_repository.find_by_plan(plan_id)

        moves: Dict[Optional[str], List[str]] = defaultdict(list)
        keys = []
        for stamp in stamps:
            point = (stamp.position.x, stamp.position.y)
            resolved = next((loc.id for loc in locations if classify_point(point, loc)), None)
            if resolved != stamp.location_id:
                moves[resolved].append(stamp.id)
                keys.append(stamp.count_key)
                keys.append((stamp.plan_id, stamp.device_id, resolved))

        now = utc_now()
        for location_id, stamp_ids in moves.items():
            await self.stamp_repository.set_location(stamp_ids, location_id, now)
        await self.notifier.notify_many(keys)

        updated = sum(len(stamp_ids) for stamp_ids in moves.values())
        logger.info(f"Recomputed counts for plan {plan_id}: {updated} of {len(stamps)} stamps moved")
        return RecomputeCountsResponse(plan_id=plan_id, updated_stamps=updated)
