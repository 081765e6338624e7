from typing import TYPE_CHECKING

from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.revision_repository import RevisionRepository
from ...domain.repositories.stamp_repository import StampRepository
from ...infrastructure.events.count_event_service import CountEventService
from ...application.services.count_notifier import CountNotifier
from ...application.services.stamp_placement_service import StampPlacementService
from ...application.services.history_service import HistoryService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventsProvider:
    """Registers the count event bus and the services that publish to it"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # One bus per process: REST handlers publish, WebSocket sessions subscribe
        event_service = CountEventService()
        container.register_singleton(CountEventService, event_service)

        notifier = CountNotifier(
            stamp_repository=container.get(StampRepository),
            event_service=event_service,
        )
        container.register_singleton(CountNotifier, notifier)

        placement_service = StampPlacementService(
            location_repository=container.get(LocationRepository),
            stamp_repository=container.get(StampRepository),
            notifier=notifier,
        )
        container.register_singleton(StampPlacementService, placement_service)

        container.register_singleton(
            HistoryService,
            HistoryService(
                revision_repository=container.get(RevisionRepository),
                stamp_repository=container.get(StampRepository),
                location_repository=container.get(LocationRepository),
                device_repository=container.get(DeviceRepository),
                notifier=notifier,
                placement_service=placement_service,
            ),
        )
