# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....domain.repositories.revision_repository import RevisionRepository
from ...services.count_notifier import CountNotifier

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device and every stamp placed with it"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        stamp_repository: StampRepository,
        revision_repository: RevisionRepository,
        notifier: CountNotifier,
    ) -> None:
        self.device_repository = device_repository
        self.stamp_repository = stamp_repository
        self.revision_repository = revision_repository
        self.notifier = notifier

    async def execute(self, device_id: str) -> None:
        """
        Delete a device. Its stamps are removed, along with the history of every stamp
        ever placed with it (including stamps deleted earlier), and
        subscribers of the affected plans receive the new (zero) totals.
        """
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise NotFoundError(f"Device {device_id} not found")

        stamps = await self.stamp_repository.find_by_device(device_id)
        await self.stamp_repository.delete_by_device(device_id)
        await self.revision_repository.delete_by_device(device_id)
        await self.device_repository.delete(device_id)

        await self.notifier.notify_many(stamp.count_key for stamp in stamps)
        logger.info(f"Deleted device {device_id} with {len(stamps)} stamps")
