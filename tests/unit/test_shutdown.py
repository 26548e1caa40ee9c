"""Tests for in-flight request tracking during shutdown."""

import asyncio

import pytest

from src.workflow_sync.core.shutdown import RequestTracker

pytestmark = pytest.mark.unit


class TestRequestTracker:
    async def test_request_tracking(self):
        tracker = RequestTracker()

        async with tracker.track_request():
            assert tracker.in_flight_count == 1

        assert tracker.in_flight_count == 0
        assert not tracker.is_shutting_down

    async def test_drain_waits_for_in_flight_fan_out(self):
        tracker = RequestTracker()
        release = asyncio.Event()

        async def fan_out():
            async with tracker.track_request():
                await release.wait()

        task = asyncio.create_task(fan_out())
        await asyncio.sleep(0)
        await tracker.start_shutdown()

        assert tracker.is_shutting_down
        assert not await tracker.wait_for_drain(timeout=0.01)

        release.set()
        assert await tracker.wait_for_drain(timeout=1)
        await task

    async def test_idle_tracker_drains_immediately(self):
        tracker = RequestTracker()
        await tracker.start_shutdown()
        assert await tracker.wait_for_drain(timeout=0.01)

    async def test_reset(self):
        tracker = RequestTracker()
        await tracker.start_shutdown()
        tracker.reset()
        assert not tracker.is_shutting_down
        assert tracker.in_flight_count == 0
