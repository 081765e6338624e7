from typing import TYPE_CHECKING
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.plan_repository import PlanRepository
from ...application.services.history_service import HistoryService
from ...application.services.stamp_placement_service import StampPlacementService
from ...application.use_cases.location import (
    CreateLocationUseCase,
    GetLocationUseCase,
    ListLocationsUseCase,
    UpdateLocationUseCase,
    DeleteLocationUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class LocationProvider:
    """Location use case provider - registers all location-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateLocationUseCase,
            lambda: CreateLocationUseCase(
                location_repository=container.get(LocationRepository),
                plan_repository=container.get(PlanRepository),
                history_service=container.get(HistoryService),
                placement_service=container.get(StampPlacementService),
            ),
        )
        container.register_factory(
            GetLocationUseCase,
            lambda: GetLocationUseCase(location_repository=container.get(LocationRepository)),
        )
        container.register_factory(
            ListLocationsUseCase,
            lambda: ListLocationsUseCase(
                location_repository=container.get(LocationRepository),
                plan_repository=container.get(PlanRepository),
            ),
        )
        container.register_factory(
            UpdateLocationUseCase,
            lambda: UpdateLocationUseCase(
                location_repository=container.get(LocationRepository),
                plan_repository=container.get(PlanRepository),
                history_service=container.get(HistoryService),
                placement_service=container.get(StampPlacementService),
            ),
        )
        container.register_factory(
            DeleteLocationUseCase,
            lambda: DeleteLocationUseCase(
                location_repository=container.get(LocationRepository),
                plan_repository=container.get(PlanRepository),
                history_service=container.get(HistoryService),
                placement_service=container.get(StampPlacementService),
            ),
        )
