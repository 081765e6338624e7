from typing import TYPE_CHECKING
from ...domain.repositories.stamp_repository import StampRepository
from ...domain.repositories.plan_repository import PlanRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.revision_repository import RevisionRepository
from ...application.services.count_notifier import CountNotifier
from ...application.services.history_service import HistoryService
from ...application.services.stamp_placement_service import StampPlacementService
from ...application.use_cases.stamp import (
    CreateStampUseCase,
    GetStampUseCase,
    ListStampsUseCase,
    UpdateStampUseCase,
    DeleteStampUseCase,
    ListStampRevisionsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StampProvider:
    """Stamp use case provider - registers all stamp-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateStampUseCase,
            lambda: CreateStampUseCase(
                stamp_repository=container.get(StampRepository),
                plan_repository=container.get(PlanRepository),
                device_repository=container.get(DeviceRepository),
                location_repository=container.get(LocationRepository),
                placement_service=container.get(StampPlacementService),
                history_service=container.get(HistoryService),
                notifier=container.get(CountNotifier),
            ),
        )
        container.register_factory(
            GetStampUseCase,
            lambda: GetStampUseCase(stamp_repository=container.get(StampRepository)),
        )
        container.register_factory(
            ListStampsUseCase,
            lambda: ListStampsUseCase(
                stamp_repository=container.get(StampRepository),
                plan_repository=container.get(PlanRepository),
            ),
        )
        container.register_factory(
            UpdateStampUseCase,
            lambda: UpdateStampUseCase(
                stamp_repository=container.get(StampRepository),
                plan_repository=container.get(PlanRepository),
                location_repository=container.get(LocationRepository),
                placement_service=container.get(StampPlacementService),
                history_service=container.get(HistoryService),
                notifier=container.get(CountNotifier),
            ),
        )
        container.register_factory(
            DeleteStampUseCase,
            lambda: DeleteStampUseCase(
                stamp_repository=container.get(StampRepository),
                plan_repository=container.get(PlanRepository),
                history_service=container.get(HistoryService),
                notifier=container.get(CountNotifier),
            ),
        )
        container.register_factory(
            ListStampRevisionsUseCase,
            lambda: ListStampRevisionsUseCase(
                revision_repository=container.get(RevisionRepository),
                stamp_repository=container.get(StampRepository),
            ),
        )
