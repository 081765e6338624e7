from typing import TYPE_CHECKING
from ...domain.repositories.project_repository import ProjectRepository
from ...domain.repositories.plan_repository import PlanRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.stamp_repository import StampRepository
from ...application.services.count_notifier import CountNotifier
from ...application.use_cases.count import (
    GetPlanCountsUseCase,
    RecomputePlanCountsUseCase,
    ExportProjectUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CountProvider:
    """Count and export use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetPlanCountsUseCase,
            lambda: GetPlanCountsUseCase(
                plan_repository=container.get(PlanRepository),
                device_repository=container.get(DeviceRepository),
                location_repository=container.get(LocationRepository),
                stamp_repository=container.get(StampRepository),
            ),
        )
        container.register_factory(
            RecomputePlanCountsUseCase,
            lambda: RecomputePlanCountsUseCase(
                plan_repository=container.get(PlanRepository),
                location_repository=container.get(LocationRepository),
                stamp_repository=container.get(StampRepository),
                notifier=container.get(CountNotifier),
            ),
        )
        container.register_factory(
            ExportProjectUseCase,
            lambda: ExportProjectUseCase(
                project_repository=container.get(ProjectRepository),
                plan_repository=container.get(PlanRepository),
                plan_counts_use_case=container.get(GetPlanCountsUseCase),
            ),
        )
