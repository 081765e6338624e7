from .project_repository import ProjectRepository
from .plan_repository import PlanRepository
from .device_repository import DeviceRepository
from .location_repository import LocationRepository
from .stamp_repository import StampRepository, StampCountRow
from .revision_repository import RevisionRepository

__all__ = [
    "ProjectRepository",
    "PlanRepository",
    "DeviceRepository",
    "LocationRepository",
    "StampRepository",
    "StampCountRow",
    "RevisionRepository",
]
