"""
In-process fan-out of back-office notifications.

Every open admin stream owns a bounded queue. Publishing never blocks: a
subscriber whose queue is full has stopped reading and is dropped, which ends
its stream so the browser reconnects with a fresh one.
"""
from __future__ import annotations

import json
import logging
import queue
import threading
import time
from typing import Any, Dict, Iterator, Optional

from django.conf import settings

logger = logging.getLogger(__name__)

BOOKING = "booking"
REVIEW = "review"
CONNECTED = "connected"


def now_ms() -> int:
    return int(time.time() * 1000)


def format_event(message: Dict[str, Any]) -> str:
    return f"data: {json.dumps(message, default=str)}\n\n"


class Subscription:
    def __init__(self, broker: "NotificationBroker", maxsize: int):
        self._broker = broker
        self.queue: "queue.Queue[Dict[str, Any]]" = queue.Queue(maxsize=maxsize)
        self.closed = False

    def get(self, timeout: float) -> Optional[Dict[str, Any]]:
        try:
            return self.queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self) -> None:
        self._broker.unsubscribe(self)


class NotificationBroker:
    def __init__(self, queue_size: Optional[int] = None):
        self._queue_size = queue_size
        self._lock = threading.Lock()
        self._subscribers: set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self) -> Subscription:
        subscription = Subscription(self, self._queue_size or settings.NOTIFICATIONS_QUEUE_SIZE)
        with self._lock:
            self._subscribers.add(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.closed = True
        with self._lock:
            self._subscribers.discard(subscription)

    def publish(self, event_type: str, data: Any) -> int:
        """Queue ``{type, data, timestamp}`` for every subscriber; returns how many received it."""
        message = {"type": event_type, "data": data, "timestamp": now_ms()}
        with self._lock:
            subscribers = list(self._subscribers)

        delivered = 0
        for subscription in subscribers:
            try:
                subscription.queue.put_nowait(message)
            except queue.Full:
                logger.warning("Dropping stalled notification subscriber (%s pending)", subscription.queue.qsize())
                self.unsubscribe(subscription)
            else:
                delivered += 1
        return delivered


class NotificationStream:
    """Server-sent event body for one admin connection."""

    def __init__(self, subscription: Subscription, *, keepalive_seconds: float, retry_ms: int):
        self.subscription = subscription
        self.keepalive_seconds = keepalive_seconds
        self.retry_ms = retry_ms

    def __iter__(self) -> Iterator[str]:
        yield f"retry: {self.retry_ms}\n\n"
        yield format_event(
            {"type": CONNECTED, "message": "Notification stream connected", "timestamp": now_ms()}
        )
        while not self.subscription.closed:
            message = self.subscription.get(timeout=self.keepalive_seconds)
            if message is None:
                yield ": keepalive\n\n"
            else:
                yield format_event(message)

    def close(self) -> None:
        self.subscription.close()


broker = NotificationBroker()


def broadcast_notification(event_type: str, data: Any) -> int:
    return broker.publish(event_type, data)
