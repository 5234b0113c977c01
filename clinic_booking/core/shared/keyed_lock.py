"""
Keyed Lock

Per-key asyncio locks. Callers holding different keys run concurrently;
callers holding the same key are serialized in arrival order.
"""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)


class KeyedLock(Generic[K]):
    """
    Registry of asyncio locks indexed by key.

    Entries are dropped once the last holder or waiter leaves, so the
    registry only contains keys that are currently contended.

    Example:
        ```python
        locks: KeyedLock[tuple[int, date]] = KeyedLock()
        async with locks.hold((doctor_id, appointment_date)):
            ...
        ```
    """

    def __init__(self) -> None:
        self._locks: dict[K, asyncio.Lock] = {}
        self._holders: dict[K, int] = {}

    def _acquire_entry(self, key: K) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        self._holders[key] = self._holders.get(key, 0) + 1
        return lock

    def _release_entry(self, key: K) -> None:
        remaining = self._holders[key] - 1
        if remaining:
            self._holders[key] = remaining
            return
        del self._holders[key]
        del self._locks[key]

    @asynccontextmanager
    async def hold(self, key: K) -> AsyncIterator[None]:
        """Hold the lock for ``key`` for the duration of the block."""
        # Registry bookkeeping never awaits, so the event loop keeps it consistent.
        lock = self._acquire_entry(key)
        try:
            async with lock:
                yield
        finally:
            self._release_entry(key)

    def is_locked(self, key: K) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
