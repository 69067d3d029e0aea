"""
This module provides :class:`NumberRunning`, an observed counter of running work.
"""

import asyncio
import logging

from typing import Callable


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class NumberRunning:
    """
    A counter that never goes below zero and tells an observer about every change.

    Every method is a coroutine serialized through a lock, so the counter can be shared between tasks.  The update
    callback runs synchronously, under the lock, with the new value.
    """

    def __init__(self) -> None:
        self._count: int = 0
        self._lock: asyncio.Lock = asyncio.Lock()
        self._update_callback: Callable[[int], None] | None = None

    def _set(self, count: int) -> None:
        self._count = count
        if self._update_callback is not None:
            self._update_callback(count)

    async def set_update_callback(self, update_callback: Callable[[int], None]) -> None:
        """
        Register the observer, which is immediately called with the current value.
        """
        async with self._lock:
            self._update_callback = update_callback
            update_callback(self._count)

    async def increment(self) -> None:
        async with self._lock:
            self._set(self._count + 1)

    async def decrement(self) -> None:
        """
        Count down by one.  At zero the request is refused and logged, leaving the counter at zero.
        """
        async with self._lock:
            if self._count > 0:
                self._set(self._count - 1)
            else:
                _LOGGER.error('cannot decrement past zero')

    async def current_value(self) -> int:
        async with self._lock:
            return self._count

    async def start_on_increment(self, max_running: int) -> bool:
        """
        Count up by one only if the counter is below `max_running`.

        :return: whether the counter was incremented
        """
        async with self._lock:
            if self._count >= max_running:
                return False
            self._set(self._count + 1)
            return True
