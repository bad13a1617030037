"""Fan-out of a single async stream to independent subscribers."""

import asyncio
from contextlib import aclosing
from typing import AsyncGenerator, AsyncIterator, Generic, TypeVar

from config import configure_logging

T = TypeVar("T")

_END = object()


class _Failed:
    __slots__ = ("error",)

    def __init__(self, error: BaseException):
        self.error = error


class Subscription:
    __slots__ = ("name", "queue", "closed")

    def __init__(self, name: str):
        self.name = name
        self.queue: asyncio.Queue = asyncio.Queue()
        self.closed = False


class StreamBroadcaster(Generic[T]):
    """
    Pumps one source stream into a private queue per subscriber.

    Every subscriber sees every item, in source order. Queues are unbounded
    so a slow subscriber delays only itself. A subscriber that is cancelled
    or closed stops receiving items; the others are unaffected. The source
    is closed early only once no subscriber is left.

    Subscribe before calling ``run()``.
    """

    def __init__(self, source: AsyncGenerator[T, None], log_level: str = "INFO"):
        self._source = source
        self._subscriptions: list[Subscription] = []
        self.log = configure_logging("broadcaster", log_level)

    def subscribe(self, name: str | None = None) -> AsyncIterator[T]:
        sub = Subscription(name or f"subscriber-{len(self._subscriptions)}")
        self._subscriptions.append(sub)
        return self._drain(sub)

    async def _drain(self, sub: Subscription) -> AsyncIterator[T]:
        try:
            while True:
                item = await sub.queue.get()
                if item is _END:
                    return
                if isinstance(item, _Failed):
                    raise item.error
                yield item
        finally:
            if not sub.closed:
                sub.closed = True
                self.log.debug("subscriber_detached", subscriber=sub.name)

    async def run(self) -> int:
        """Deliver the whole source to all open subscribers. Returns items delivered."""
        delivered = 0
        outcome: object = _END
        try:
            async with aclosing(self._source) as source:
                while self.subscriber_count:
                    try:
                        item = await anext(source)
                    except StopAsyncIteration:
                        break
                    for sub in self._subscriptions:
                        if not sub.closed:
                            sub.queue.put_nowait(item)
                    delivered += 1
                    # Let subscribers run before the next pull.
                    await asyncio.sleep(0)
                else:
                    self.log.info("broadcast_abandoned", delivered=delivered)
        except Exception as e:
            outcome = _Failed(e)
            raise
        finally:
            for sub in self._subscriptions:
                if not sub.closed:
                    sub.queue.put_nowait(outcome)
        self.log.debug("broadcast_complete", delivered=delivered)
        return delivered

    @property
    def subscriber_count(self) -> int:
        return sum(1 for s in self._subscriptions if not s.closed)
