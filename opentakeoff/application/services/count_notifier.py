"""Publishes aggregated stamp counts after data changes."""
import logging
from typing import Iterable, Optional, Tuple

from ...domain.models.count_event import CountEvent
from ...domain.repositories.stamp_repository import StampRepository
from ...infrastructure.events.count_event_service import CountEventService
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

CountKey = Tuple[str, str, Optional[str]]


class CountNotifier:
    """
    Reads the current total for a (plan, device, location) pair and publishes
    it on the CountEventService. Failures are logged and never propagate, so a
    stamp mutation is not failed by its notification.
    """

    def __init__(self, stamp_repository: StampRepository, event_service: CountEventService) -> None:
        self.stamp_repository = stamp_repository
        self.event_service = event_service

    async def notify(self, plan_id: str, device_id: str, location_id: Optional[str]) -> None:
        try:
            total = await self.stamp_repository.count(plan_id, device_id, location_id)
            event = CountEvent(
                plan_id=plan_id,
                device_id=device_id,
                location_id=location_id,
                total=total,
                timestamp=utc_now(),
            )
            self.event_service.publish(event)
        except Exception as e:
            logger.error(
                f"Failed to publish count event for plan {plan_id}, device {device_id}, "
                f"location {location_id}: {e}",
                exc_info=True,
            )

    async def notify_many(self, keys: Iterable[CountKey]) -> None:
        """Publish once per distinct key, in first-seen order."""
        seen = set()
        for key in keys:
            if key in seen:
                continue
            seen.add(key)
            await self.notify(*key)
