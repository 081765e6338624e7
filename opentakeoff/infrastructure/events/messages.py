"""
Frames exchanged on the count events WebSocket.

Inbound:  subscribe {planId} | unsubscribe {planId?} | ping
Outbound: connected | subscribed | unsubscribed | count.updated | pong | error
"""

import json
from typing import Any, Dict, Optional

from ...core.exceptions import MalformedMessageError
from ...domain.models.count_event import CountEvent
from ...utils.datetime_utils import now_iso, to_iso


class MessageType:
    """WebSocket frame type constants"""
    # Client -> server
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    PING = "ping"

    # Server -> client
    CONNECTED = "connected"
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"
    COUNT_UPDATED = "count.updated"
    PONG = "pong"
    ERROR = "error"


CONNECTED_MESSAGE = "Connected to count events stream"
INVALID_FORMAT_MESSAGE = "Invalid message format"


def parse_client_message(raw: Any) -> Dict[str, Any]:
    """
    Decode an inbound frame into a dict carrying a string `type`.

    Raises:
        MalformedMessageError: not JSON, not an object, or no string `type`
    """
    try:
        message = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedMessageError(INVALID_FORMAT_MESSAGE, cause=e)

    if not isinstance(message, dict) or not isinstance(message.get("type"), str):
        raise MalformedMessageError(INVALID_FORMAT_MESSAGE)
    return message


def connected_frame() -> Dict[str, Any]:
    return {"type": MessageType.CONNECTED, "message": CONNECTED_MESSAGE, "timestamp": now_iso()}


def subscribed_frame(plan_id: str) -> Dict[str, Any]:
    return {"type": MessageType.SUBSCRIBED, "planId": plan_id, "timestamp": now_iso()}


def unsubscribed_frame(plan_id: Optional[str] = None) -> Dict[str, Any]:
    frame: Dict[str, Any] = {"type": MessageType.UNSUBSCRIBED}
    if plan_id is not None:
        frame["planId"] = plan_id
    frame["timestamp"] = now_iso()
    return frame


def pong_frame() -> Dict[str, Any]:
    return {"type": MessageType.PONG, "timestamp": now_iso()}


def error_frame(message: str) -> Dict[str, Any]:
    return {"type": MessageType.ERROR, "error": message, "timestamp": now_iso()}


def count_updated_frame(event: CountEvent) -> Dict[str, Any]:
    """Serialize a CountEvent; the event timestamp travels inside `data`."""
    return {
        "type": MessageType.COUNT_UPDATED,
        "data": {
            "planId": event.plan_id,
            "deviceId": event.device_id,
            "locationId": event.location_id,
            "total": event.total,
            "timestamp": to_iso(event.timestamp),
        },
    }
