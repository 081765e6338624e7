from .common_dto import PaginationInfo, DeleteResponse
from .project_dto import ProjectCreateRequest, ProjectUpdateRequest, ProjectResponse, ProjectListResponse
from .plan_dto import PlanCreateRequest, PlanUpdateRequest, PlanResponse
from .device_dto import DeviceCreateRequest, DeviceUpdateRequest, DeviceResponse
from .location_dto import (
    BoundsSchema,
    VertexSchema,
    LocationCreateRequest,
    LocationUpdateRequest,
    LocationResponse,
)
from .stamp_dto import (
    PositionSchema,
    StampCreateRequest,
    StampUpdateRequest,
    StampResponse,
    StampListResponse,
)
from .history_dto import (
    HistoryEntryResponse,
    HistoryListResponse,
    HistoryActionResponse,
    PruneHistoryResponse,
)
from .count_dto import (
    CountItem,
    DeviceTotal,
    PlanCountsResponse,
    RecomputeCountsResponse,
    ExportRow,
    ExportData,
    ExportResult,
)

__all__ = [
    "PaginationInfo",
    "DeleteResponse",
    "ProjectCreateRequest",
    "ProjectUpdateRequest",
    "ProjectResponse",
    "ProjectListResponse",
    "PlanCreateRequest",
    "PlanUpdateRequest",
    "PlanResponse",
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DeviceResponse",
    "BoundsSchema",
    "VertexSchema",
    "LocationCreateRequest",
    "LocationUpdateRequest",
    "LocationResponse",
    "PositionSchema",
    "StampCreateRequest",
    "StampUpdateRequest",
    "StampResponse",
    "StampListResponse",
    "HistoryEntryResponse",
    "HistoryListResponse",
    "HistoryActionResponse",
    "PruneHistoryResponse",
    "CountItem",
    "DeviceTotal",
    "PlanCountsResponse",
    "RecomputeCountsResponse",
    "ExportRow",
    "ExportData",
    "ExportResult",
]
