"""
Unit tests for CountEventService (subscription registry and fan-out).
"""
import asyncio
import threading
from datetime import datetime, timezone

import pytest

from opentakeoff.domain.models.count_event import CountEvent
from opentakeoff.infrastructure.events.count_event_service import CountEventService


def _event(plan_id: str = "plan-1", total: int = 3) -> CountEvent:
    return CountEvent(
        plan_id=plan_id,
        device_id="device-1",
        location_id=None,
        total=total,
        timestamp=datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc),
    )


class TestSubscribeAndPublish:
    def test_publish_reaches_plan_subscribers_in_order(self):
        service = CountEventService()
        calls = []
        service.subscribe_to_plan("plan-1", lambda e: calls.append(("first", e.total)))
        service.subscribe_to_plan("plan-1", lambda e: calls.append(("second", e.total)))

        delivered = service.publish(_event(total=7))

        assert delivered == 2
        assert calls == [("first", 7), ("second", 7)]

    def test_publish_ignores_other_plans(self):
        service = CountEventService()
        calls = []
        service.subscribe_to_plan("plan-2", calls.append)

        assert service.publish(_event("plan-1")) == 0
        assert calls == []

    def test_publish_without_subscribers_returns_zero(self):
        assert CountEventService().publish(_event()) == 0

    def test_global_subscriber_receives_every_plan_after_plan_subscribers(self):
        service = CountEventService()
        order = []
        service.subscribe_to_all(lambda e: order.append(("global", e.plan_id)))
        service.subscribe_to_plan("plan-1", lambda e: order.append(("plan", e.plan_id)))

        service.publish(_event("plan-1"))
        service.publish(_event("plan-9"))

        assert order == [("plan", "plan-1"), ("global", "plan-1"), ("global", "plan-9")]

    def test_empty_plan_id_rejected(self):
        with pytest.raises(ValueError):
            CountEventService().subscribe_to_plan("", lambda e: None)


class TestUnsubscribe:
    def test_unsubscribe_stops_delivery(self):
        service = CountEventService()
        calls = []
        unsubscribe = service.subscribe_to_plan("plan-1", calls.append)

        unsubscribe()
        service.publish(_event())

        assert calls == []
        assert service.subscriber_count("plan-1") == 0

    def test_unsubscribe_is_idempotent(self):
        service = CountEventService()
        unsubscribe = service.subscribe_to_plan("plan-1", lambda e: None)
        unsubscribe()
        unsubscribe()
        assert service.subscriber_count() == 0

    def test_same_callback_registered_twice_is_independent(self):
        service = CountEventService()
        calls = []
        first = service.subscribe_to_plan("plan-1", calls.append)
        service.subscribe_to_plan("plan-1", calls.append)

        first()
        first()
        service.publish(_event())

        assert len(calls) == 1
        assert service.subscriber_count("plan-1") == 1

    def test_subscriber_count_covers_plans_and_globals(self):
        service = CountEventService()
        service.subscribe_to_plan("plan-1", lambda e: None)
        service.subscribe_to_plan("plan-2", lambda e: None)
        service.subscribe_to_all(lambda e: None)

        assert service.subscriber_count("plan-1") == 1
        assert service.subscriber_count() == 3


class TestFailureIsolation:
    def test_failing_subscriber_does_not_block_others(self):
        service = CountEventService()
        calls = []

        def broken(event):
            raise RuntimeError("boom")

        service.subscribe_to_plan("plan-1", broken)
        service.subscribe_to_plan("plan-1", calls.append)

        delivered = service.publish(_event())

        assert delivered == 1
        assert len(calls) == 1
        # Failing subscription stays registered
        assert service.subscriber_count("plan-1") == 2

    def test_unsubscribe_during_publish_uses_snapshot(self):
        service = CountEventService()
        calls = []
        handles = {}

        def first(event):
            calls.append("first")
            handles["second"]()

        service.subscribe_to_plan("plan-1", first)
        handles["second"] = service.subscribe_to_plan("plan-1", lambda e: calls.append("second"))

        service.publish(_event())
        service.publish(_event())

        assert calls == ["first", "first"]

    def test_subscribe_during_publish_waits_for_next_event(self):
        service = CountEventService()
        calls = []

        def first(event):
            calls.append("first")
            service.subscribe_to_plan("plan-1", lambda e: calls.append("late"))

        unsubscribe = service.subscribe_to_plan("plan-1", first)
        service.publish(_event())
        unsubscribe()
        service.publish(_event())

        assert calls == ["first", "late"]

    def test_publish_from_worker_thread(self):
        service = CountEventService()
        calls = []
        service.subscribe_to_plan("plan-1", calls.append)

        worker = threading.Thread(target=service.publish, args=(_event(),))
        worker.start()
        worker.join()

        assert len(calls) == 1


class TestAsyncSubscribers:
    @pytest.mark.asyncio
    async def test_coroutine_subscriber_is_scheduled(self):
        service = CountEventService()
        received = asyncio.Event()

        async def subscriber(event):
            received.set()

        service.subscribe_to_plan("plan-1", subscriber)
        assert service.publish(_event()) == 1

        await asyncio.wait_for(received.wait(), timeout=1)

    def test_coroutine_subscriber_without_loop_is_dropped(self):
        service = CountEventService()
        ran = []

        async def subscriber(event):
            ran.append(event)

        service.subscribe_to_plan("plan-1", subscriber)
        service.publish(_event())

        assert ran == []
