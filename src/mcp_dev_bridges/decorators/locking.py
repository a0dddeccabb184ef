# mcp_dev_bridges/decorators/locking.py

"""
Per-session serialization for BrowserManager methods.

Calls that address the same session identifier run one at a time, so a
second launch always sees the first session and a second close always sees
the first close. Calls on different identifiers never wait on each other.
"""

import asyncio
import inspect
import functools
import contextlib
from typing import Callable, Dict


__all__ = [
    "SessionLocks",
    "exclusive_session_access",
]


class SessionLocks:
    """
    asyncio.Lock per session identifier, alive only while someone holds or
    waits for it.

    An entry is dropped when its last holder leaves, so the table never
    outgrows the number of identifiers with calls in flight.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    def get(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[session_id] = lock
        return lock

    @contextlib.asynccontextmanager
    async def hold(self, session_id: str):
        lock = self.get(session_id)
        self._users[session_id] = self._users.get(session_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            remaining = self._users[session_id] - 1
            if remaining:
                self._users[session_id] = remaining
            else:
                del self._users[session_id]
                del self._locks[session_id]

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._locks

    def __len__(self) -> int:
        return len(self._locks)


def exclusive_session_access(func: Callable):
    """
    Serialize an async method of an object with a `session_locks` attribute
    on its first positional argument (the session identifier).
    """
    if not inspect.iscoroutinefunction(func):
        raise TypeError(f"{func.__name__} must be a coroutine function")

    sig = inspect.signature(func)
    id_param = list(sig.parameters)[1]

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        bound = sig.bind(self, *args, **kwargs)
        bound.apply_defaults()
        session_id = bound.arguments[id_param]
        async with self.session_locks.hold(session_id):
            return await func(self, *args, **kwargs)
    return wrapper
