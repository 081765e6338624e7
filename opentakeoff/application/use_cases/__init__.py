from .project import (
    CreateProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
)
from .plan import (
    CreatePlanUseCase,
    GetPlanUseCase,
    ListPlansUseCase,
    UpdatePlanUseCase,
    DeletePlanUseCase,
)
from .device import (
    CreateDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
)
from .location import (
    CreateLocationUseCase,
    GetLocationUseCase,
    ListLocationsUseCase,
    UpdateLocationUseCase,
    DeleteLocationUseCase,
)
from .stamp import (
    CreateStampUseCase,
    GetStampUseCase,
    ListStampsUseCase,
    UpdateStampUseCase,
    DeleteStampUseCase,
    ListStampRevisionsUseCase,
)
from .history import (
    GetProjectHistoryUseCase,
    ListEntityHistoryUseCase,
    UndoEntityUseCase,
    RedoEntityUseCase,
    UndoProjectUseCase,
    RedoProjectUseCase,
    PruneHistoryUseCase,
)
from .count import (
    GetPlanCountsUseCase,
    RecomputePlanCountsUseCase,
    ExportProjectUseCase,
)

__all__ = [
    "CreateProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "CreatePlanUseCase",
    "GetPlanUseCase",
    "ListPlansUseCase",
    "UpdatePlanUseCase",
    "DeletePlanUseCase",
    "CreateDeviceUseCase",
    "GetDeviceUseCase",
    "ListDevicesUseCase",
    "UpdateDeviceUseCase",
    "DeleteDeviceUseCase",
    "CreateLocationUseCase",
    "GetLocationUseCase",
    "ListLocationsUseCase",
    "UpdateLocationUseCase",
    "DeleteLocationUseCase",
    "CreateStampUseCase",
    "GetStampUseCase",
    "ListStampsUseCase",
    "UpdateStampUseCase",
    "DeleteStampUseCase",
    "ListStampRevisionsUseCase",
    "GetProjectHistoryUseCase",
    "ListEntityHistoryUseCase",
    "UndoEntityUseCase",
    "RedoEntityUseCase",
    "UndoProjectUseCase",
    "RedoProjectUseCase",
    "PruneHistoryUseCase",
    "GetPlanCountsUseCase",
    "RecomputePlanCountsUseCase",
    "ExportProjectUseCase",
]
