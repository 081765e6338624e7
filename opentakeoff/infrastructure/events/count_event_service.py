"""Count Event Service - in-process fan-out of count change notifications"""

import asyncio
import inspect
import logging
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from ...domain.models.count_event import CountEvent

logger = logging.getLogger(__name__)

CountEventCallback = Callable[[CountEvent], Any]
Unsubscribe = Callable[[], None]


class _Subscription:
    """One registered callback. Identity-compared so duplicate callables stay independent."""

    __slots__ = ("callback", "plan_id", "active")

    def __init__(self, callback: CountEventCallback, plan_id: Optional[str]) -> None:
        self.callback = callback
        self.plan_id = plan_id
        self.active = True


class CountEventService:
    """
    Registry mapping plan IDs to subscriber callbacks.

    One instance is created by the DI container and shared by the data layer
    (publishers) and the WebSocket gateway (subscribers). Registry mutation and
    the subscriber snapshot taken by `publish` are guarded by a lock, so events
    may be published from worker threads as well as from the event loop.
    """

    def __init__(self) -> None:
        self._plan_subscribers: Dict[str, List[_Subscription]] = {}
        self._global_subscribers: List[_Subscription] = []
        self._lock = Lock()
        logger.info("CountEventService initialized")

    def subscribe_to_plan(self, plan_id: str, callback: CountEventCallback) -> Unsubscribe:
        """
        Register a callback for count events of one plan.

        Args:
            plan_id: Plan whose events should be delivered
            callback: Called with each CountEvent; may return an awaitable

        Returns:
            Idempotent function removing this registration
        """
        if not plan_id:
            raise ValueError("Plan ID is required to subscribe")

        subscription = _Subscription(callback, plan_id)
        with self._lock:
            self._plan_subscribers.setdefault(plan_id, []).append(subscription)

        logger.debug(f"Subscribed to plan {plan_id}. Plan subscribers: {self.subscriber_count(plan_id)}")
        return lambda: self._remove(subscription)

    def subscribe_to_all(self, callback: CountEventCallback) -> Unsubscribe:
        """Register a callback receiving the events of every plan."""
        subscription = _Subscription(callback, None)
        with self._lock:
            self._global_subscribers.append(subscription)
        return lambda: self._remove(subscription)

    def publish(self, event: CountEvent) -> int:
        """
        Deliver an event to the subscribers of its plan, then to global subscribers.

        Callbacks run in registration order over a snapshot taken at the start of
        the call. A failing callback is logged and stays registered.

        Returns:
            Number of callbacks that completed without raising
        """
        with self._lock:
            subscribers = list(self._plan_subscribers.get(event.plan_id, ()))
            subscribers.extend(self._global_subscribers)

        delivered = 0
        for subscription in subscribers:
            if not subscription.active:
                continue
            try:
                result = subscription.callback(event)
                if inspect.isawaitable(result):
                    self._schedule(result, event)
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Count event subscriber failed for plan {event.plan_id}: {e}",
                    exc_info=True,
                )

        logger.debug(
            f"Published count event for plan {event.plan_id} "
            f"(device {event.device_id}, total {event.total}) to {delivered}/{len(subscribers)} subscribers"
        )
        return delivered

    def subscriber_count(self, plan_id: Optional[str] = None) -> int:
        """Number of live subscriptions for a plan, or across all plans and globals."""
        with self._lock:
            if plan_id is not None:
                return len(self._plan_subscribers.get(plan_id, ()))
            return sum(len(subs) for subs in self._plan_subscribers.values()) + len(self._global_subscribers)

    def _remove(self, subscription: _Subscription) -> None:
        with self._lock:
            if not subscription.active:
                return
            subscription.active = False

            if subscription.plan_id is None:
                subscribers = self._global_subscribers
            else:
                subscribers = self._plan_subscribers.get(subscription.plan_id, [])

            for index, candidate in enumerate(subscribers):
                if candidate is subscription:
                    del subscribers[index]
                    break

            # Clean up empty lists
            if subscription.plan_id is not None and not subscribers:
                self._plan_subscribers.pop(subscription.plan_id, None)

    @staticmethod
    def _schedule(awaitable: Any, event: CountEvent) -> None:
        """Run an async subscriber on the current loop, logging its failure."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(
                f"Async count event subscriber for plan {event.plan_id} dropped: no running event loop"
            )
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            return

        task = loop.create_task(awaitable)

        def _log_failure(done: "asyncio.Task") -> None:
            if not done.cancelled() and done.exception() is not None:
                logger.error(
                    f"Async count event subscriber failed for plan {event.plan_id}: {done.exception()}"
                )

        task.add_done_callback(_log_failure)
