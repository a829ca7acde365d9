"""Per-property asyncio locks serializing occupancy writes.

Entries are reference counted and dropped once no coroutine holds or waits
on them, so the registry does not grow with the number of properties ever
touched.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager


class PropertyLockRegistry:
    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, property_id: str):
        """Hold the write lock for one property for the duration of the block."""
        lock = self._locks.get(property_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[property_id] = lock
        self._users[property_id] = self._users.get(property_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[property_id] -= 1
            if self._users[property_id] == 0:
                del self._users[property_id]
                del self._locks[property_id]

    def __len__(self) -> int:
        return len(self._locks)


property_locks = PropertyLockRegistry()
