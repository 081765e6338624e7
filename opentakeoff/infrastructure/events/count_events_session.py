"""Per-connection session of the count events WebSocket"""

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Optional

from fastapi import WebSocket, WebSocketDisconnect

from ...core.exceptions import MalformedMessageError, UnknownMessageTypeError
from ...domain.models.count_event import CountEvent
from .count_event_service import CountEventService
from .messages import (
    INVALID_FORMAT_MESSAGE,
    MessageType,
    connected_frame,
    count_updated_frame,
    error_frame,
    parse_client_message,
    pong_frame,
    subscribed_frame,
    unsubscribed_frame,
)

logger = logging.getLogger(__name__)


class CountEventsSession:
    """
    Translates client control frames into CountEventService subscriptions and
    forwards published events to one WebSocket.

    Outbound frames go through a single queue drained by one sender task, so
    replies leave in processing order and events in publish order. Each plan
    has at most one subscription per session, kept in a plan ID -> unsubscribe
    table that is cleared on close.
    """

    def __init__(
        self,
        websocket: WebSocket,
        event_service: CountEventService,
        client: Optional[str] = None,
    ) -> None:
        self.websocket = websocket
        self.event_service = event_service
        self.client = client or "unknown"
        self._subscriptions: Dict[str, Callable[[], None]] = {}
        self._outbox: "asyncio.Queue[Dict[str, Any]]" = asyncio.Queue()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._sender: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def subscribed_plans(self) -> list:
        return list(self._subscriptions.keys())

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        """Start the sender task and queue the `connected` acknowledgment."""
        if self._sender is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._sender = self._loop.create_task(self._send_loop())
        self._enqueue(connected_frame())
        logger.info(f"Count events client connected: {self.client}")

    async def run(self) -> None:
        """Serve the connection until the client disconnects."""
        self.start()
        disconnected = False
        try:
            while True:
                message = await self.websocket.receive()
                if message.get("type") == "websocket.disconnect":
                    disconnected = True
                    logger.info(f"Count events client disconnected: {self.client}")
                    break
                self.handle_frame(message)
        except WebSocketDisconnect:
            disconnected = True
            logger.info(f"Count events client disconnected: {self.client}")
        except Exception as e:
            logger.error(f"Count events connection error for {self.client}: {e}", exc_info=True)
        finally:
            await self.close()
            if not disconnected:
                await self._close_socket()

    def handle_frame(self, message: Dict[str, Any]) -> None:
        """Unwrap one `websocket.receive` message; binary payloads must be UTF-8 text."""
        raw = message.get("text")
        if raw is None:
            payload = message.get("bytes")
            if payload is None:
                return
            try:
                raw = payload.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning(f"Undecodable binary frame from {self.client}")
                self._enqueue(error_frame(INVALID_FORMAT_MESSAGE))
                return
        self.handle_message(raw)

    def handle_message(self, raw: Any) -> None:
        """Dispatch one inbound frame. Protocol errors are answered with an `error` frame."""
        try:
            message = parse_client_message(raw)
        except MalformedMessageError as e:
            logger.warning(f"Malformed message from {self.client}: {raw!r}")
            self._enqueue(error_frame(e.message))
            return

        message_type = message["type"]
        handlers = {
            MessageType.SUBSCRIBE: self._handle_subscribe,
            MessageType.UNSUBSCRIBE: self._handle_unsubscribe,
            MessageType.PING: self._handle_ping,
        }
        handler = handlers.get(message_type)
        if handler is None:
            error = UnknownMessageTypeError(message_type)
            logger.warning(f"{error.message} from {self.client}")
            self._enqueue(error_frame(error.message))
            return

        try:
            handler(message)
        except MalformedMessageError as e:
            self._enqueue(error_frame(e.message))

    async def drain(self) -> None:
        """Wait until every queued frame has been handed to the socket."""
        await self._outbox.join()

    async def close(self) -> None:
        """Deregister every subscription and stop the sender. Safe to call twice."""
        if self._closed:
            return
        self._closed = True

        self._unsubscribe_all()

        if self._sender is not None:
            self._sender.cancel()
            try:
                await self._sender
            except asyncio.CancelledError:
                pass
            self._sender = None
        logger.info(f"Count events session closed: {self.client}")

    # ------------------------------------------------------------------
    # Control messages
    # ------------------------------------------------------------------

    async def _close_socket(self) -> None:
        try:
            await self.websocket.close(code=1011)
        except Exception as e:
            logger.debug(f"Could not close socket for {self.client}: {e}")

    def _handle_subscribe(self, message: Dict[str, Any]) -> None:
        plan_id = message.get("planId")
        if not isinstance(plan_id, str) or not plan_id:
            raise MalformedMessageError("planId is required to subscribe")

        previous = self._subscriptions.pop(plan_id, None)
        if previous is not None:
            previous()

        self._subscriptions[plan_id] = self.event_service.subscribe_to_plan(plan_id, self._deliver)
        logger.debug(f"{self.client} subscribed to plan {plan_id}")
        self._enqueue(subscribed_frame(plan_id))

    def _handle_unsubscribe(self, message: Dict[str, Any]) -> None:
        plan_id = message.get("planId")
        if plan_id is None:
            self._unsubscribe_all()
            self._enqueue(unsubscribed_frame())
            return

        if not isinstance(plan_id, str):
            raise MalformedMessageError("planId must be a string")

        unsubscribe = self._subscriptions.pop(plan_id, None)
        if unsubscribe is not None:
            unsubscribe()
        logger.debug(f"{self.client} unsubscribed from plan {plan_id}")
        self._enqueue(unsubscribed_frame(plan_id))

    def _handle_ping(self, message: Dict[str, Any]) -> None:
        self._enqueue(pong_frame())

    def _unsubscribe_all(self) -> None:
        subscriptions = list(self._subscriptions.values())
        self._subscriptions.clear()
        for unsubscribe in subscriptions:
            unsubscribe()

    # ------------------------------------------------------------------
    # Outbound
    # ------------------------------------------------------------------

    def _deliver(self, event: CountEvent) -> None:
        """Subscription callback; may run on any thread."""
        self._enqueue(count_updated_frame(event))

    def _enqueue(self, frame: Dict[str, Any]) -> None:
        if self._closed or self._loop is None:
            return

        try:
            on_loop = asyncio.get_running_loop() is self._loop
        except RuntimeError:
            on_loop = False

        if on_loop:
            self._outbox.put_nowait(frame)
        else:
            self._loop.call_soon_threadsafe(self._outbox.put_nowait, frame)

    async def _send_loop(self) -> None:
        while True:
            frame = await self._outbox.get()
            try:
                await self.websocket.send_text(json.dumps(frame))
            except Exception as e:
                logger.warning(f"Failed to send {frame.get('type')} frame to {self.client}: {e}")
            finally:
                self._outbox.task_done()
