"""
This module provides :class:`MethodList`, a keyed registry of deferred work.
"""

import asyncio
import logging

from typing import Callable, Generic, Mapping

from skystreak._typing import THUNK, T


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class MethodList(Generic[T]):
    """
    Units of deferred asynchronous work keyed by integer, drained smallest key first.

    Every method is a coroutine serialized through a lock.  After each removal the remove callback, if any, is called
    with how many entries remain.
    """

    def __init__(self, methods: Mapping[int, THUNK[T]] | None = None,
                 remove_callback: Callable[[int], None] | None = None) -> None:
        """
        :param methods: the initial work keyed by index
        :param remove_callback: called with the remaining count after every removal
        """

        self._methods: dict[int, THUNK[T]] = dict(methods) if methods is not None else {}
        self._remove_callback: Callable[[int], None] | None = remove_callback
        self._lock: asyncio.Lock = asyncio.Lock()

    async def add(self, index: int, method: THUNK[T]) -> None:
        """
        Register `method` under `index`, replacing anything already there.
        """
        async with self._lock:
            self._methods[index] = method

    async def set_remove_callback(self, remove_callback: Callable[[int], None]) -> None:
        async with self._lock:
            self._remove_callback = remove_callback

    async def remove_value(self, key: int) -> None:
        """
        Remove the work under `key`, if any, then report the remaining count to the remove callback.
        """
        async with self._lock:
            self._methods.pop(key, None)
            _LOGGER.debug(f'removed method {key}, {len(self._methods)} remain')
            if self._remove_callback is not None:
                self._remove_callback(len(self._methods))

    async def value(self, key: int) -> THUNK[T] | None:
        """
        The work registered under `key`, or ``None``
        """
        async with self._lock:
            return self._methods.get(key)

    async def count(self) -> int:
        async with self._lock:
            return len(self._methods)

    async def next_key(self) -> int | None:
        """
        The smallest registered key, or ``None`` when empty
        """
        async with self._lock:
            return min(self._methods, default=None)
