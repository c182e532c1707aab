"""Per-user mutual exclusion."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class UserLocks:
    """One asyncio.Lock per user id, dropped when nobody holds or waits on it.

    Waiters are woken in FIFO order, so turns of a user run in the order
    they were submitted.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}  # user_id -> holders + waiters

    @asynccontextmanager
    async def hold(self, user_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(user_id, asyncio.Lock())
        self._users[user_id] = self._users.get(user_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[user_id] -= 1
            if self._users[user_id] == 0:
                del self._users[user_id]
                del self._locks[user_id]

    def locked(self, user_id: str) -> bool:
        lock = self._locks.get(user_id)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
