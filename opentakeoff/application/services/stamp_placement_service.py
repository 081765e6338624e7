"""Keeps stamp -> location assignments consistent with location geometry."""
import logging
from typing import List, Optional

from ...domain.models.location import Location
from ...domain.models.stamp import Stamp, StampPosition
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.stamp_repository import StampRepository
from ...utils.datetime_utils import utc_now
from ...utils.geometry import classify_point
from .count_notifier import CountNotifier

logger = logging.getLogger(__name__)


class StampPlacementService:
    """Classifies stamp positions against the locations of their plan."""

    def __init__(
        self,
        location_repository: LocationRepository,
        stamp_repository: StampRepository,
        notifier: CountNotifier,
    ) -> None:
        self.location_repository = location_repository
        self.stamp_repository = stamp_repository
        self.notifier = notifier

    async def resolve_location(self, plan_id: str, position: StampPosition) -> Optional[str]:
        """ID of the first location (creation order) containing the position, if any."""
        point = (position.x, position.y)
        for location in await self.location_repository.find_by_plan(plan_id):
            if classify_point(point, location):
                return location.id
        return None

    async def reassign_for_location(self, location: Location) -> int:
        """
        Re-classify the stamps of the location's plan after its geometry changed.

        Stamps inside the shape are assigned to it; stamps assigned to it that
        now fall outside are detached. Count events are published for every
        affected pair.

        Returns:
            Number of stamps whose location changed
        """
        stamps = await self.stamp_repository.find_by_plan(location.plan_id)

        to_assign: List[Stamp] = []
        to_detach: List[Stamp] = []
        for stamp in stamps:
            inside = classify_point((stamp.position.x, stamp.position.y), location)
            if inside and stamp.location_id != location.id:
                to_assign.append(stamp)
            elif not inside and stamp.location_id == location.id:
                to_detach.append(stamp)

        if not to_assign and not to_detach:
            return 0

        now = utc_now()
        await self.stamp_repository.set_location([s.id for s in to_assign], location.id, now)
        await self.stamp_repository.set_location([s.id for s in to_detach], None, now)

        keys = []
        for stamp in to_assign:
            keys.append(stamp.count_key)
            keys.append((stamp.plan_id, stamp.device_id, location.id))
        for stamp in to_detach:
            keys.append(stamp.count_key)
            keys.append((stamp.plan_id, stamp.device_id, None))
        await self.notifier.notify_many(keys)

        logger.info(
            f"Location {location.id}: assigned {len(to_assign)} stamps, detached {len(to_detach)} stamps"
        )
        return len(to_assign) + len(to_detach)

    async def detach_location(self, plan_id: str, location_id: str) -> int:
        """Clear the location of every stamp assigned to it; returns the number detached."""
        stamps = [
            stamp
            for stamp in await self.stamp_repository.find_by_plan(plan_id)
            if stamp.location_id == location_id
        ]
        if not stamps:
            return 0

        await self.stamp_repository.set_location([s.id for s in stamps], None, utc_now())

        keys = []
        for stamp in stamps:
            keys.append(stamp.count_key)
            keys.append((stamp.plan_id, stamp.device_id, None))
        await self.notifier.notify_many(keys)
        return len(stamps)
