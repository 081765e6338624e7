"""Count events API endpoint: live count updates via WebSocket"""

from fastapi import APIRouter, WebSocket

from ...di.container import get_container
from ...infrastructure.events.count_event_service import CountEventService
from ...infrastructure.events.count_events_session import CountEventsSession

router = APIRouter(tags=["count-events"])


@router.websocket("/events/counts")
async def count_events(websocket: WebSocket) -> None:
    """
    WebSocket endpoint streaming count updates for subscribed plans.

    Clients send `{"type": "subscribe", "planId": "..."}` to start receiving
    `count.updated` frames for a plan, `unsubscribe` (optionally with a
    planId) to stop, and `ping` to check liveness. Session state is dropped
    when the socket closes.
    """
    event_service = get_container().get(CountEventService)

    await websocket.accept()
    client = f"{websocket.client.host}:{websocket.client.port}" if websocket.client else None

    session = CountEventsSession(websocket, event_service, client=client)
    await session.run()
