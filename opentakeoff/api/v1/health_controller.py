# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import APIRouter

# Local application imports
from ...di.container import get_container
from ...infrastructure.events.count_event_service import CountEventService
from ...utils.datetime_utils import now_iso


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Liveness probe with the number of live count event subscriptions"""
    event_service = get_container().get(CountEventService)
    return {
        "status": "ok",
        "subscribers": event_service.subscriber_count(),
        "timestamp": now_iso(),
    }
