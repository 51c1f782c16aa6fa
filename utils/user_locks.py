"""
utils/user_locks.py
-------------------
One lock per Telegram user.

Two updates from the same user are processed one after the other, while
updates from different users never wait on each other. Locks live in a
WeakValueDictionary and disappear once nobody holds a reference.

UserLocks guards the synchronous decision procedure in worker threads.
AsyncUserLocks makes a user's queued updates wait on the event loop, so
they never occupy a worker thread while blocked on their own user.
"""

import asyncio
import threading
import weakref
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterator


class UserLocks:
    def __init__(self):
        self._guard = threading.Lock()
        self._locks: "weakref.WeakValueDictionary[int, threading.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, user_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock

    @contextmanager
    def hold(self, user_id: int) -> Iterator[None]:
        lock = self._lock_for(user_id)
        with lock:
            yield


class AsyncUserLocks:
    """Per-user asyncio.Lock; only touched from the event loop thread."""

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[int, asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    @asynccontextmanager
    async def hold(self, user_id: int) -> AsyncIterator[None]:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        async with lock:
            yield
