from .get_plan_counts import GetPlanCountsUseCase
from .recompute_plan_counts import RecomputePlanCountsUseCase
from .export_project import ExportProjectUseCase

__all__ = [
    "GetPlanCountsUseCase",
    "RecomputePlanCountsUseCase",
    "ExportProjectUseCase",
]
