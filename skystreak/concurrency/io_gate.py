"""
This module provides the :class:`IOGate` which bounds how many file loads and saves run at once.
"""

import asyncio

from contextlib import asynccontextmanager
from typing import AsyncIterator

from skystreak._typing import THUNK, T


class IOGate:
    """
    Two independent permit pools, one for loading files and one for saving them.

    Work run through :meth:`load` or :meth:`save` (or inside :meth:`loading` / :meth:`saving`) holds one permit of the
    matching kind for as long as it runs, and gives it back however it finishes.  Waiters are served in arrival order.

    Example::

        gate = IOGate(max_concurrent_loads=4, max_concurrent_saves=2)
        image = await gate.load(lambda: read_frame(filename))
    """

    def __init__(self, max_concurrent_loads: int, max_concurrent_saves: int) -> None:
        """
        :param max_concurrent_loads: how many loads may run at once
        :param max_concurrent_saves: how many saves may run at once
        :raises ValueError: if either maximum is not positive
        """

        if max_concurrent_loads <= 0:
            raise ValueError(f'max_concurrent_loads must be positive, got {max_concurrent_loads}')

        if max_concurrent_saves <= 0:
            raise ValueError(f'max_concurrent_saves must be positive, got {max_concurrent_saves}')

        self.max_concurrent_loads: int = max_concurrent_loads
        self.max_concurrent_saves: int = max_concurrent_saves

        self._loads: asyncio.Semaphore = asyncio.Semaphore(max_concurrent_loads)
        self._saves: asyncio.Semaphore = asyncio.Semaphore(max_concurrent_saves)

    @asynccontextmanager
    async def loading(self) -> AsyncIterator[None]:
        """
        Hold a load permit for the body of an ``async with`` block
        """
        async with self._loads:
            yield

    @asynccontextmanager
    async def saving(self) -> AsyncIterator[None]:
        """
        Hold a save permit for the body of an ``async with`` block
        """
        async with self._saves:
            yield

    async def load(self, work: THUNK[T]) -> T:
        """
        Run `work` holding a load permit.

        :return: whatever `work` returns.  Anything it raises propagates once the permit is released
        """
        async with self.loading():
            return await work()

    async def save(self, work: THUNK[T]) -> T:
        """
        Run `work` holding a save permit.

        :return: whatever `work` returns.  Anything it raises propagates once the permit is released
        """
        async with self.saving():
            return await work()
