from .project import Project
from .plan import Plan
from .device import Device
from .location import Location, LocationType, RectangleBounds, Vertex
from .stamp import Stamp, StampPosition
from .revision import (
    ChangeType,
    EntityType,
    HistoryAction,
    HistoryActionResult,
    HistoryCursor,
    Revision,
)
from .count_event import CountEvent

__all__ = [
    "Project",
    "Plan",
    "Device",
    "Location",
    "LocationType",
    "RectangleBounds",
    "Vertex",
    "Stamp",
    "StampPosition",
    "ChangeType",
    "EntityType",
    "HistoryAction",
    "HistoryActionResult",
    "HistoryCursor",
    "Revision",
    "CountEvent",
]
