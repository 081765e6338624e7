from typing import TYPE_CHECKING
from ...domain.repositories.project_repository import ProjectRepository
from ...domain.repositories.plan_repository import PlanRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.stamp_repository import StampRepository
from ...domain.repositories.revision_repository import RevisionRepository
from ...application.services.count_notifier import CountNotifier
from ...application.use_cases.project import (
    CreateProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
)
from ...application.use_cases.plan import (
    CreatePlanUseCase,
    GetPlanUseCase,
    ListPlansUseCase,
    UpdatePlanUseCase,
    DeletePlanUseCase,
)
from ...application.use_cases.device import (
    CreateDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProjectProvider:
    """Registers project, plan and device use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all project-level use cases.
        Use cases are created on-demand via factories.
        """
        # Projects
        container.register_factory(
            CreateProjectUseCase,
            lambda: CreateProjectUseCase(project_repository=container.get(ProjectRepository)),
        )
        container.register_factory(
            GetProjectUseCase,
            lambda: GetProjectUseCase(project_repository=container.get(ProjectRepository)),
        )
        container.register_factory(
            ListProjectsUseCase,
            lambda: ListProjectsUseCase(project_repository=container.get(ProjectRepository)),
        )
        container.register_factory(
            UpdateProjectUseCase,
            lambda: UpdateProjectUseCase(project_repository=container.get(ProjectRepository)),
        )
        container.register_factory(
            DeleteProjectUseCase,
            lambda: DeleteProjectUseCase(
                project_repository=container.get(ProjectRepository),
                plan_repository=container.get(PlanRepository),
                device_repository=container.get(DeviceRepository),
                location_repository=container.get(LocationRepository),
                stamp_repository=container.get(StampRepository),
                revision_repository=container.get(RevisionRepository),
            ),
        )

        # Plans
        container.register_factory(
            CreatePlanUseCase,
            lambda: CreatePlanUseCase(
                plan_repository=container.get(PlanRepository),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            GetPlanUseCase,
            lambda: GetPlanUseCase(plan_repository=container.get(PlanRepository)),
        )
        container.register_factory(
            ListPlansUseCase,
            lambda: ListPlansUseCase(
                plan_repository=container.get(PlanRepository),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            UpdatePlanUseCase,
            lambda: UpdatePlanUseCase(plan_repository=container.get(PlanRepository)),
        )
        container.register_factory(
            DeletePlanUseCase,
            lambda: DeletePlanUseCase(
                plan_repository=container.get(PlanRepository),
                location_repository=container.get(LocationRepository),
                stamp_repository=container.get(StampRepository),
                revision_repository=container.get(RevisionRepository),
            ),
        )

        # Devices
        container.register_factory(
            CreateDeviceUseCase,
            lambda: CreateDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            GetDeviceUseCase,
            lambda: GetDeviceUseCase(device_repository=container.get(DeviceRepository)),
        )
        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(
                device_repository=container.get(DeviceRepository),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            UpdateDeviceUseCase,
            lambda: UpdateDeviceUseCase(device_repository=container.get(DeviceRepository)),
        )
        container.register_factory(
            DeleteDeviceUseCase,
            lambda: DeleteDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                stamp_repository=container.get(StampRepository),
                revision_repository=container.get(RevisionRepository),
                notifier=container.get(CountNotifier),
            ),
        )
