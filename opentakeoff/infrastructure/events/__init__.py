from .count_event_service import CountEventService
from .count_events_session import CountEventsSession
from .messages import MessageType

__all__ = ["CountEventService", "CountEventsSession", "MessageType"]
