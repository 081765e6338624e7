from .project_controller import router as project_router
from .plan_controller import router as plan_router
from .device_controller import router as device_router
from .location_controller import router as location_router
from .stamp_controller import router as stamp_router
from .count_controller import router as count_router
from .history_controller import router as history_router
from .health_controller import router as health_router
from .count_events_controller import router as count_events_router


__all__ = [
    "project_router",
    "plan_router",
    "device_router",
    "location_router",
    "stamp_router",
    "count_router",
    "history_router",
    "health_router",
    "count_events_router",
]
