"""
Tests for KeyedLock.
"""

import asyncio

import pytest

from clinic_booking.core.shared import KeyedLock


class TestKeyedLock:
    """Test suite for per-key locking."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_same_key_is_serialized(self):
        """Should never let two holders of the same key overlap."""
        locks: KeyedLock[str] = KeyedLock()
        events: list[str] = []

        async def worker(name: str):
            async with locks.hold("doctor-1"):
                events.append(f"{name}-in")
                await asyncio.sleep(0.01)
                events.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))

        assert events == ["a-in", "a-out", "b-in", "b-out"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_different_keys_run_concurrently(self):
        locks: KeyedLock[str] = KeyedLock()
        entered = asyncio.Event()
        release = asyncio.Event()

        async def first():
            async with locks.hold("a"):
                entered.set()
                await release.wait()

        async def second():
            await entered.wait()
            async with locks.hold("b"):
                release.set()

        await asyncio.wait_for(asyncio.gather(first(), second()), timeout=1)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_registry_is_emptied_after_use(self):
        locks: KeyedLock[tuple[int, str]] = KeyedLock()

        async with locks.hold((1, "2025-03-10")):
            assert locks.is_locked((1, "2025-03-10"))
            assert len(locks) == 1

        assert not locks.is_locked((1, "2025-03-10"))
        assert len(locks) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_released_when_block_raises(self):
        locks: KeyedLock[str] = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("k"):
                raise RuntimeError("boom")

        assert len(locks) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_leak(self):
        """A waiter cancelled before acquiring must leave the registry clean."""
        locks: KeyedLock[str] = KeyedLock()
        release = asyncio.Event()

        async def holder():
            async with locks.hold("k"):
                await release.wait()

        holder_task = asyncio.create_task(holder())
        await asyncio.sleep(0)
        waiter_task = asyncio.create_task(locks.hold("k").__aenter__())
        await asyncio.sleep(0)

        waiter_task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter_task

        release.set()
        await holder_task

        assert len(locks) == 0
