"""
This module provides :class:`TaskRunner`, which spreads work across tasks up to a limit and runs the rest inline.

Spawning a task for every frame or detector of a long sequence starves the event loop of the CPU time the work
itself needs.  A :class:`TaskRunner` only spawns a new :class:`asyncio.Task` while fewer than
:attr:`~TaskRunner.max_concurrent_tasks` of its tasks are running.  Beyond that the work runs to completion in the
caller before a finished future holding its result is returned, so either way the caller gets something to await.

Example::

    runner = TaskRunner()
    pending = [await runner.run(lambda frame=frame: process(frame)) for frame in frames]
    results = [await task for task in pending]
"""

import asyncio
import logging
import os

from typing import Awaitable

from skystreak.concurrency.number_running import NumberRunning
from skystreak._typing import THUNK, T


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def default_max_concurrent_tasks() -> int:
    """
    Three quarters of the processors, but never fewer than 2
    """

    processors = os.cpu_count() or 1
    processors -= processors // 4
    return max(processors, 2)


class TaskRunner:
    """
    Runs work in new tasks while below a limit, inline otherwise.
    """

    def __init__(self, max_concurrent_tasks: int | None = None) -> None:
        """
        :param max_concurrent_tasks: how many spawned tasks may run at once, :func:`default_max_concurrent_tasks` if
                                     ``None``
        :raises ValueError: if `max_concurrent_tasks` is not positive
        """

        if max_concurrent_tasks is None:
            max_concurrent_tasks = default_max_concurrent_tasks()

        if max_concurrent_tasks <= 0:
            raise ValueError(f'max_concurrent_tasks must be positive, got {max_concurrent_tasks}')

        self.max_concurrent_tasks: int = max_concurrent_tasks

        self.number_running: NumberRunning = NumberRunning()
        """
        How many spawned tasks are currently running
        """

        _LOGGER.debug(f'using a maximum of {max_concurrent_tasks} concurrent tasks')

    async def _run_and_release(self, work: THUNK[T]) -> T:
        try:
            return await work()
        finally:
            await self.number_running.decrement()

    async def run(self, work: THUNK[T]) -> Awaitable[T]:
        """
        Start `work`.

        :return: a task or future resolving to the result of `work`.  When `work` runs inline anything it raises
                 propagates from this call directly
        """

        if await self.number_running.start_on_increment(self.max_concurrent_tasks):
            return asyncio.create_task(self._run_and_release(work))

        result = await work()

        future = asyncio.get_running_loop().create_future()
        future.set_result(result)
        return future

    async def start_sync_io(self) -> None:
        """
        Give up a task slot for the duration of blocking I/O.  Pair with :meth:`end_sync_io`.
        """
        await self.number_running.decrement()

    async def end_sync_io(self) -> None:
        await self.number_running.increment()


_DEFAULT_RUNNER: TaskRunner | None = None


def default_task_runner() -> TaskRunner:
    """
    The runner shared by :func:`run_task`, created on first use
    """

    global _DEFAULT_RUNNER

    if _DEFAULT_RUNNER is None:
        _DEFAULT_RUNNER = TaskRunner()

    return _DEFAULT_RUNNER


async def run_task(work: THUNK[T]) -> Awaitable[T]:
    """
    Start `work` with the shared :func:`default_task_runner`.
    """
    return await default_task_runner().run(work)
