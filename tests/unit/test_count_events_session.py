"""
Unit tests for CountEventsSession (WebSocket control protocol) with a fake socket.
"""
import asyncio
import json
import threading
from datetime import datetime, timezone

import pytest
from fastapi import WebSocketDisconnect

from opentakeoff.domain.models.count_event import CountEvent
from opentakeoff.infrastructure.events.count_event_service import CountEventService
from opentakeoff.infrastructure.events.count_events_session import CountEventsSession

_DISCONNECT = object()


class FakeWebSocket:
    def __init__(self, fail_sends: int = 0) -> None:
        self.sent = []
        self.inbound: asyncio.Queue = asyncio.Queue()
        self.fail_sends = fail_sends
        self.close_codes = []

    async def send_text(self, data: str) -> None:
        if self.fail_sends > 0:
            self.fail_sends -= 1
            raise RuntimeError("socket write failed")
        self.sent.append(json.loads(data))

    async def receive(self) -> dict:
        message = await self.inbound.get()
        if message is _DISCONNECT:
            return {"type": "websocket.disconnect", "code": 1000}
        if isinstance(message, Exception):
            raise message
        if isinstance(message, bytes):
            return {"type": "websocket.receive", "bytes": message}
        return {"type": "websocket.receive", "text": message}

    async def close(self, code: int = 1000) -> None:
        self.close_codes.append(code)

    def frames(self, frame_type: str):
        return [frame for frame in self.sent if frame["type"] == frame_type]


def _event(plan_id: str = "plan-1", total: int = 2) -> CountEvent:
    return CountEvent(
        plan_id=plan_id,
        device_id="device-1",
        location_id="location-1",
        total=total,
        timestamp=datetime(2025, 1, 15, 12, 0, 0, 123000, tzinfo=timezone.utc),
    )


async def _send(session: CountEventsSession, message) -> None:
    session.handle_message(json.dumps(message) if not isinstance(message, str) else message)
    await session.drain()


@pytest.fixture
def event_service():
    return CountEventService()


class TestHandshake:
    @pytest.mark.asyncio
    async def test_connected_frame_sent_first(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()
        await session.drain()

        assert websocket.sent[0]["type"] == "connected"
        assert websocket.sent[0]["message"] == "Connected to count events stream"
        assert websocket.sent[0]["timestamp"].endswith("Z")
        await session.close()


class TestSubscribe:
    @pytest.mark.asyncio
    async def test_subscribe_then_receive_event(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "subscribe", "planId": "plan-1"})
        event_service.publish(_event(total=5))
        await session.drain()

        assert websocket.frames("subscribed")[0]["planId"] == "plan-1"
        update = websocket.frames("count.updated")[0]
        assert update["data"] == {
            "planId": "plan-1",
            "deviceId": "device-1",
            "locationId": "location-1",
            "total": 5,
            "timestamp": "2025-01-15T12:00:00.123Z",
        }
        assert "timestamp" not in update
        await session.close()

    @pytest.mark.asyncio
    async def test_resubscribe_replaces_existing_subscription(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "subscribe", "planId": "plan-1"})
        await _send(session, {"type": "subscribe", "planId": "plan-1"})
        event_service.publish(_event())
        await session.drain()

        assert event_service.subscriber_count("plan-1") == 1
        assert len(websocket.frames("subscribed")) == 2
        assert len(websocket.frames("count.updated")) == 1
        await session.close()

    @pytest.mark.asyncio
    async def test_multiple_plans_are_independent(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "subscribe", "planId": "plan-1"})
        await _send(session, {"type": "subscribe", "planId": "plan-2"})
        await _send(session, {"type": "unsubscribe", "planId": "plan-1"})
        event_service.publish(_event("plan-1"))
        event_service.publish(_event("plan-2"))
        await session.drain()

        updates = websocket.frames("count.updated")
        assert [frame["data"]["planId"] for frame in updates] == ["plan-2"]
        assert session.subscribed_plans == ["plan-2"]
        await session.close()

    @pytest.mark.asyncio
    async def test_subscribe_without_plan_id_is_an_error(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "subscribe"})
        await _send(session, {"type": "subscribe", "planId": 42})

        errors = websocket.frames("error")
        assert len(errors) == 2
        assert event_service.subscriber_count() == 0
        await session.close()


class TestUnsubscribe:
    @pytest.mark.asyncio
    async def test_unsubscribe_all_omits_plan_id(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "subscribe", "planId": "plan-1"})
        await _send(session, {"type": "subscribe", "planId": "plan-2"})
        await _send(session, {"type": "unsubscribe"})

        reply = websocket.frames("unsubscribed")[0]
        assert "planId" not in reply
        assert event_service.subscriber_count() == 0
        await session.close()

    @pytest.mark.asyncio
    async def test_unsubscribe_unknown_plan_still_replies(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "unsubscribe", "planId": "plan-7"})

        assert websocket.frames("unsubscribed")[0]["planId"] == "plan-7"
        await session.close()


class TestProtocolErrors:
    @pytest.mark.asyncio
    async def test_ping_pong(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "ping"})

        assert websocket.sent[-1]["type"] == "pong"
        await session.close()

    @pytest.mark.asyncio
    async def test_unknown_type(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, {"type": "foo"})

        assert websocket.sent[-1] == {
            "type": "error",
            "error": "Unknown message type: foo",
            "timestamp": websocket.sent[-1]["timestamp"],
        }
        assert not session.closed
        await session.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["not json", "[1, 2]", '{"planId": "plan-1"}', '{"type": 3}'])
    async def test_malformed_messages(self, event_service, raw):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()

        await _send(session, raw)

        assert websocket.sent[-1]["type"] == "error"
        assert websocket.sent[-1]["error"] == "Invalid message format"
        assert not session.closed
        await session.close()


class TestDelivery:
    @pytest.mark.asyncio
    async def test_send_failure_keeps_subscription(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()
        await _send(session, {"type": "subscribe", "planId": "plan-1"})

        websocket.fail_sends = 1
        event_service.publish(_event(total=1))
        event_service.publish(_event(total=2))
        await session.drain()

        assert [frame["data"]["total"] for frame in websocket.frames("count.updated")] == [2]
        assert event_service.subscriber_count("plan-1") == 1
        await session.close()

    @pytest.mark.asyncio
    async def test_events_published_from_thread_are_delivered_in_order(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()
        await _send(session, {"type": "subscribe", "planId": "plan-1"})

        def publish_all():
            for total in range(1, 4):
                event_service.publish(_event(total=total))

        worker = threading.Thread(target=publish_all)
        worker.start()
        worker.join()
        # Let the call_soon_threadsafe callbacks run before draining
        await asyncio.sleep(0.05)
        await session.drain()

        assert [frame["data"]["total"] for frame in websocket.frames("count.updated")] == [1, 2, 3]
        await session.close()


class TestClose:
    @pytest.mark.asyncio
    async def test_close_removes_subscriptions_and_is_idempotent(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        session.start()
        await _send(session, {"type": "subscribe", "planId": "plan-1"})
        await _send(session, {"type": "subscribe", "planId": "plan-2"})

        await session.close()
        await session.close()

        assert session.closed
        assert event_service.subscriber_count() == 0
        assert event_service.publish(_event()) == 0

    @pytest.mark.asyncio
    async def test_run_closes_on_disconnect(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        task = asyncio.create_task(session.run())

        await websocket.inbound.put(json.dumps({"type": "subscribe", "planId": "plan-1"}))
        for _ in range(100):
            if websocket.frames("subscribed"):
                break
            await asyncio.sleep(0.01)
        await websocket.inbound.put(_DISCONNECT)
        await asyncio.wait_for(task, timeout=1)

        assert websocket.sent[0]["type"] == "connected"
        assert websocket.frames("subscribed")[0]["planId"] == "plan-1"
        assert session.closed
        assert event_service.subscriber_count() == 0
        assert websocket.close_codes == []

    @pytest.mark.asyncio
    async def test_run_closes_socket_after_receive_error(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        task = asyncio.create_task(session.run())

        await websocket.inbound.put(RuntimeError("transport lost"))
        await asyncio.wait_for(task, timeout=1)

        assert session.closed
        assert websocket.close_codes == [1011]

    @pytest.mark.asyncio
    async def test_run_treats_disconnect_exception_as_clean_close(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        task = asyncio.create_task(session.run())

        await websocket.inbound.put(WebSocketDisconnect(code=1001))
        await asyncio.wait_for(task, timeout=1)

        assert session.closed
        assert websocket.close_codes == []


async def _wait_for_frames(websocket: FakeWebSocket, frame_type: str, count: int = 1) -> None:
    for _ in range(100):
        if len(websocket.frames(frame_type)) >= count:
            return
        await asyncio.sleep(0.01)


class TestBinaryFrames:
    @pytest.mark.asyncio
    async def test_binary_frame_is_decoded_and_keeps_session_open(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        task = asyncio.create_task(session.run())

        await websocket.inbound.put(json.dumps({"type": "subscribe", "planId": "plan-1"}))
        await _wait_for_frames(websocket, "subscribed")
        await websocket.inbound.put(b'{"type":"ping"}')
        await _wait_for_frames(websocket, "pong")

        assert len(websocket.frames("pong")) == 1
        assert not session.closed
        assert event_service.subscriber_count("plan-1") == 1

        await websocket.inbound.put(_DISCONNECT)
        await asyncio.wait_for(task, timeout=1)

    @pytest.mark.asyncio
    async def test_undecodable_binary_frame_is_an_error(self, event_service):
        websocket = FakeWebSocket()
        session = CountEventsSession(websocket, event_service)
        task = asyncio.create_task(session.run())

        await websocket.inbound.put(json.dumps({"type": "subscribe", "planId": "plan-1"}))
        await _wait_for_frames(websocket, "subscribed")
        await websocket.inbound.put(b"\xff\xfe\x00")
        await _wait_for_frames(websocket, "error")
        await websocket.inbound.put(json.dumps({"type": "ping"}))
        await _wait_for_frames(websocket, "pong")

        assert websocket.frames("error")[0]["error"] == "Invalid message format"
        assert len(websocket.frames("pong")) == 1
        assert event_service.subscriber_count("plan-1") == 1

        await websocket.inbound.put(_DISCONNECT)
        await asyncio.wait_for(task, timeout=1)
