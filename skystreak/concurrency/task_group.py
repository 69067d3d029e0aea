"""
This module provides task groups whose members are started through a :class:`.TaskRunner`.

Adding work to a :class:`LimitedTaskGroup` hands it to the group's runner, so only a bounded number of the members run
in their own tasks while the rest run inline as they are added.  Results come back in the order the work was added,
through :meth:`~LimitedTaskGroup.next`, ``async for``, :meth:`~LimitedTaskGroup.for_each` or
:meth:`~LimitedTaskGroup.wait_for_all`.

A :class:`LimitedTaskGroup` logs and drops work that fails.  A :class:`ThrowingLimitedTaskGroup` raises the failure
instead, from :meth:`~LimitedTaskGroup.add_task` when the work ran inline and from whichever call collects its result
otherwise.

Example::

    async with ThrowingLimitedTaskGroup() as group:
        for index in range(frame_count):
            await group.add_task(partial(process_frame, index))

        results = await group.wait_for_all()
"""

import asyncio
import logging

from typing import Awaitable, Callable, Generic

from skystreak.concurrency.task_runner import TaskRunner, default_task_runner
from skystreak._typing import THUNK, T


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


_FAILED = object()

_EXHAUSTED = object()


class LimitedTaskGroup(Generic[T]):
    """
    A group of units of work started through a :class:`.TaskRunner`, collected in the order they were added.

    Work that raises is logged and left out of the results.
    """

    def __init__(self, task_runner: TaskRunner | None = None) -> None:
        """
        :param task_runner: the runner starting the work, :func:`.default_task_runner` if ``None``
        """

        self.task_runner: TaskRunner = task_runner if task_runner is not None else default_task_runner()

        self._pending: list[Awaitable[T]] = []
        self._position: int = 0

    def __len__(self) -> int:
        return len(self._pending)

    def _handle_error(self, error: Exception) -> object:
        _LOGGER.error(f'task failed and was dropped: {error!r}')
        return _FAILED

    async def _outcome(self, pending: Awaitable[T]) -> T | object:

        try:
            return await pending
        except Exception as error:
            return self._handle_error(error)

    async def add_task(self, work: THUNK[T]) -> None:
        """
        Start `work` through the task runner.

        If the runner is at its limit the work runs to completion before this returns.
        """

        try:
            pending = await self.task_runner.run(work)
        except Exception as error:
            self._handle_error(error)
            return

        self._pending.append(pending)

    async def _advance(self) -> T | object:

        while self._position < len(self._pending):
            pending = self._pending[self._position]
            self._position += 1

            outcome = await self._outcome(pending)
            if outcome is not _FAILED:
                return outcome

        return _EXHAUSTED

    async def next(self) -> T | None:
        """
        The result of the next unit of work not yet returned, waiting for it if needed.

        :return: the result, or ``None`` once every result has been returned
        """

        outcome = await self._advance()
        return None if outcome is _EXHAUSTED else outcome

    def __aiter__(self) -> "LimitedTaskGroup[T]":
        return self

    async def __anext__(self) -> T:

        outcome = await self._advance()
        if outcome is _EXHAUSTED:
            raise StopAsyncIteration

        return outcome

    async def for_each(self, callback: Callable[[T], None]) -> None:
        """
        Call `callback` with the result of every unit of work, in the order the work was added.
        """

        for pending in list(self._pending):
            outcome = await self._outcome(pending)
            if outcome is not _FAILED:
                callback(outcome)

    async def wait_for_all(self) -> list[T]:
        """
        Wait for every unit of work added so far.

        :return: the results in the order the work was added
        """

        results = []
        for pending in list(self._pending):
            outcome = await self._outcome(pending)
            if outcome is not _FAILED:
                results.append(outcome)

        return results

    async def __aenter__(self) -> "LimitedTaskGroup[T]":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:

        if exc_type is None:
            await self.wait_for_all()
            return

        for pending in self._pending:
            if isinstance(pending, asyncio.Task) and not pending.done():
                pending.cancel()


class ThrowingLimitedTaskGroup(LimitedTaskGroup[T]):
    """
    A :class:`LimitedTaskGroup` which raises the failures of its work instead of dropping them.

    Work that already started keeps running after a failure is raised.
    """

    def _handle_error(self, error: Exception) -> object:
        raise error
