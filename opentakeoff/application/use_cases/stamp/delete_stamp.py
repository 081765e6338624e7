# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....domain.models.revision import ChangeType, EntityType
from ...services.count_notifier import CountNotifier
from ...services.history_service import HistoryService

logger = logging.getLogger(__name__)


class DeleteStampUseCase:
    """Use case for removing a stamp; its history is kept so the delete can be undone"""

    def __init__(
        self,
        stamp_repository: StampRepository,
        plan_repository: PlanRepository,
        history_service: HistoryService,
        notifier: CountNotifier,
    ) -> None:
        self.stamp_repository = stamp_repository
        self.plan_repository = plan_repository
        self.history_service = history_service
        self.notifier = notifier

    async def execute(self, stamp_id: str) -> None:
        stamp = await self.stamp_repository.find_by_id(stamp_id)
        if stamp is None:
            raise NotFoundError(f"Stamp {stamp_id} not found")

        await self.stamp_repository.delete(stamp_id)

        plan = await self.plan_repository.find_by_id(stamp.plan_id)
        await self.history_service.record_revision(
            entity_type=EntityType.STAMP,
            entity_id=stamp_id,
            change_type=ChangeType.DELETE,
            snapshot=None,
            project_id=plan.project_id if plan else "",
            plan_id=stamp.plan_id,
        )
        await self.notifier.notify(*stamp.count_key)
        logger.debug(f"Deleted stamp {stamp_id}")
