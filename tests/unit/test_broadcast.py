"""Tests for the stream fan-out."""

import asyncio
from contextlib import aclosing

import pytest

from processor.broadcast import StreamBroadcaster


async def _numbers(count: int, pause: float = 0.0):
    for i in range(count):
        yield i
        await asyncio.sleep(pause)


async def _collect(feed, delay: float = 0.0):
    items = []
    async for item in feed:
        items.append(item)
        await asyncio.sleep(delay)
    return items


class TestStreamBroadcaster:
    @pytest.mark.asyncio
    async def test_every_subscriber_sees_every_item(self):
        broadcaster = StreamBroadcaster(_numbers(10))
        a = broadcaster.subscribe("a")
        b = broadcaster.subscribe("b")

        delivered, items_a, items_b = await asyncio.gather(
            broadcaster.run(), _collect(a), _collect(b, delay=0.001)
        )
        assert delivered == 10
        assert items_a == list(range(10))
        assert items_b == list(range(10))

    @pytest.mark.asyncio
    async def test_late_consumer_gets_buffered_items(self):
        broadcaster = StreamBroadcaster(_numbers(5))
        feed = broadcaster.subscribe()
        await broadcaster.run()
        assert await _collect(feed) == [0, 1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_cancelled_subscriber_does_not_affect_others(self):
        broadcaster = StreamBroadcaster(_numbers(20, pause=0.001))
        victim = asyncio.ensure_future(_collect(broadcaster.subscribe("victim")))
        survivor = asyncio.ensure_future(_collect(broadcaster.subscribe("survivor")))
        pump = asyncio.ensure_future(broadcaster.run())

        await asyncio.sleep(0.005)
        victim.cancel()

        assert await survivor == list(range(20))
        assert await pump == 20
        assert victim.cancelled()
        assert broadcaster.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_source_closed_when_all_subscribers_leave(self):
        closed = asyncio.Event()

        async def endless():
            try:
                i = 0
                while True:
                    yield i
                    i += 1
                    await asyncio.sleep(0)
            finally:
                closed.set()

        broadcaster = StreamBroadcaster(endless())
        only = asyncio.ensure_future(_collect(broadcaster.subscribe()))
        pump = asyncio.ensure_future(broadcaster.run())
        await asyncio.sleep(0.01)
        only.cancel()

        delivered = await asyncio.wait_for(pump, timeout=1.0)
        assert delivered > 0
        assert closed.is_set()

    @pytest.mark.asyncio
    async def test_source_error_reaches_subscribers(self):
        async def failing():
            yield 1
            raise RuntimeError("source broke")

        broadcaster = StreamBroadcaster(failing())
        feed = broadcaster.subscribe()
        with pytest.raises(RuntimeError):
            await broadcaster.run()

        received = []
        with pytest.raises(RuntimeError, match="source broke"):
            async for item in feed:
                received.append(item)
        assert received == [1]

    @pytest.mark.asyncio
    async def test_no_extra_pull_after_last_subscriber_leaves(self):
        produced = []

        async def counting():
            for i in range(10):
                produced.append(i)
                yield i

        async def take_first(feed):
            async with aclosing(feed) as items:
                async for item in items:
                    return item

        broadcaster = StreamBroadcaster(counting())
        feed = broadcaster.subscribe()
        delivered, first = await asyncio.gather(broadcaster.run(), take_first(feed))

        assert first == 0
        assert delivered == 1
        assert produced == [0]

    @pytest.mark.asyncio
    async def test_no_subscribers_pulls_nothing(self):
        produced = []

        async def counting():
            for i in range(3):
                produced.append(i)
                yield i

        assert await StreamBroadcaster(counting()).run() == 0
        assert produced == []
