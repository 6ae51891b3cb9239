"""In-process broadcast channel for generation events.

Publishing never blocks and never raises: a full subscriber queue drops the
event and a failing listener is logged. There is no replay for subscribers
that join after an event was published.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from vibe_cherry.common.models import StreamEvent

logger = logging.getLogger(__name__)

Listener = Callable[[StreamEvent], None]

_CLOSED = object()


class Subscription:
    """Queue-backed view of the channel for one consumer."""

    def __init__(self, channel: "EventChannel", maxsize: int):
        self._channel = channel
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self.closed = False

    def _offer(self, item) -> bool:
        try:
            self.queue.put_nowait(item)
            return True
        except asyncio.QueueFull:
            return False

    async def get(self) -> Optional[StreamEvent]:
        """Next event, or None once the channel is closed."""
        if self.closed and self.queue.empty():
            return None
        item = await self.queue.get()
        if item is _CLOSED:
            self.closed = True
            return None
        return item

    def __aiter__(self):
        return self

    async def __anext__(self) -> StreamEvent:
        event = await self.get()
        if event is None:
            raise StopAsyncIteration
        return event

    def close(self) -> None:
        self._channel.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class EventChannel:
    """Broadcasts StreamEvents to queue subscribers and plain listeners."""

    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._subscriptions: list[Subscription] = []
        self._listeners: list[Listener] = []

    def subscribe(self) -> Subscription:
        subscription = Subscription(self, self.queue_size)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions) + len(self._listeners)

    def publish(self, event: StreamEvent) -> int:
        """
        Deliver an event to every current subscriber

        Returns:
            int: Number of subscribers that received the event
        """
        delivered = 0
        for subscription in list(self._subscriptions):
            if subscription._offer(event):
                delivered += 1
            else:
                logger.warning("Dropped %s event: subscriber queue is full", event.event)
        for listener in list(self._listeners):
            try:
                listener(event)
                delivered += 1
            except Exception:
                logger.exception("Failed to deliver %s event to listener", event.event)
        return delivered

    def close(self) -> None:
        """Wake every subscriber with end-of-stream and forget them."""
        for subscription in self._subscriptions:
            if not subscription._offer(_CLOSED):
                subscription.queue.get_nowait()
                subscription._offer(_CLOSED)
        self._subscriptions.clear()
        self._listeners.clear()
