"""Constants for domain model field names"""

from .project_fields import ProjectFields
from .plan_fields import PlanFields
from .device_fields import DeviceFields
from .location_fields import LocationFields
from .stamp_fields import StampFields
from .revision_fields import RevisionFields, HistoryCursorFields

__all__ = [
    "ProjectFields",
    "PlanFields",
    "DeviceFields",
    "LocationFields",
    "StampFields",
    "RevisionFields",
    "HistoryCursorFields",
]
