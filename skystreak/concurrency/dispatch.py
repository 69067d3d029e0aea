"""
This module tracks named units of work that must not run twice at once, and lets callers wait for all of them.
"""

import asyncio
import logging

from skystreak.errors import InvariantViolationError


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class WaitGroup:
    """
    Waits for a group of operations to finish.

    Each operation calls :meth:`add` when it starts and :meth:`done` when it finishes.  :meth:`wait` returns once every
    started operation is done, immediately if none are running.
    """

    def __init__(self) -> None:
        self._pending: int = 0
        self._idle: asyncio.Event = asyncio.Event()
        self._idle.set()

    @property
    def pending(self) -> int:
        """
        How many operations have started without finishing
        """
        return self._pending

    def add(self) -> None:
        self._pending += 1
        self._idle.clear()

    def done(self) -> None:
        """
        Mark one operation finished.

        :raises InvariantViolationError: if no operation is running
        """

        if self._pending == 0:
            raise InvariantViolationError('done called on a wait group with nothing pending')

        self._pending -= 1
        if self._pending == 0:
            self._idle.set()

    async def wait(self) -> None:
        await self._idle.wait()


class DispatchHandler:
    """
    A set of entered names, each of which may only be entered once at a time.

    Entering joins the shared :attr:`dispatch_group` and leaving departs it, so ``await
    handler.dispatch_group.wait()`` waits for everything entered to leave.
    """

    def __init__(self) -> None:
        self._running: set[str] = set()
        self._lock: asyncio.Lock = asyncio.Lock()

        self.dispatch_group: WaitGroup = WaitGroup()
        """
        The group every entered name belongs to until it leaves
        """

    async def enter(self, name: str) -> bool:
        """
        Mark `name` as running.

        :return: ``False`` if `name` was already running, which is logged and leaves it running once
        """

        async with self._lock:
            if name in self._running:
                _LOGGER.error(f'more than one {name} not allowed')
                return False

            self._running.add(name)
            self.dispatch_group.add()
            return True

    async def leave(self, name: str) -> None:
        """
        Mark `name` as finished.

        :raises InvariantViolationError: if `name` is not running
        """

        async with self._lock:
            if name not in self._running:
                raise InvariantViolationError(f'{name} was not entered, cannot leave')

            self._running.remove(name)
            self.dispatch_group.done()

    async def running(self) -> frozenset[str]:
        """
        A snapshot of the names currently running
        """
        async with self._lock:
            return frozenset(self._running)

    async def count(self) -> int:
        """
        How many names are currently running
        """
        async with self._lock:
            return len(self._running)
