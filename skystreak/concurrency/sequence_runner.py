"""
This module provides :class:`SequenceRunner`, which drains a :class:`.MethodList` of per frame work.

Frames are started in key order, smallest first, each through a :class:`.TaskRunner` so only a bounded number run in
their own tasks at once.  Every frame in flight is entered in a :class:`.DispatchHandler` under its name, which guards
against the same frame running twice and lets the runner wait for stragglers.  Subclasses customize the run by
overriding :meth:`~SequenceRunner.startup_hook`, :meth:`~SequenceRunner.result_hook` and
:meth:`~SequenceRunner.finished_hook`.
"""

import asyncio
import logging

from dataclasses import dataclass
from typing import Generic

from skystreak.concurrency.dispatch import DispatchHandler
from skystreak.concurrency.method_list import MethodList
from skystreak.concurrency.task_runner import TaskRunner
from skystreak.utilities.options import UserOptions
from skystreak.utilities.mixin_classes import UserOptionConfigured
from skystreak._typing import THUNK, T


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


_SKIPPED = object()
"""
Returned in place of a result for a frame whose name was already entered elsewhere
"""


@dataclass
class SequenceRunnerOptions(UserOptions):
    max_concurrent_tasks: int | None = None
    """
    How many frames may run in their own tasks at once.

    ``None`` uses :func:`.default_max_concurrent_tasks`.
    """

    name_prefix: str = "frame"
    """
    The start of the name each frame is entered in the dispatch handler under, completed with its key
    """


class SequenceRunner(UserOptionConfigured[SequenceRunnerOptions], SequenceRunnerOptions, Generic[T]):
    """
    Runs every unit of work in a :class:`.MethodList`, smallest key first.

    Example::

        methods = MethodList({index: partial(process_frame, index) for index in range(frame_count)})
        results = await SequenceRunner(methods).run()
    """

    def __init__(self, method_list: MethodList[T], options: SequenceRunnerOptions | None = None) -> None:
        """
        :param method_list: the work to run keyed by frame index.  It is emptied by :meth:`run`
        :param options: the options configuring the runner
        """

        super().__init__(SequenceRunnerOptions, options=options)

        self.method_list: MethodList[T] = method_list

        self.dispatch_handler: DispatchHandler = DispatchHandler()
        """
        Tracks the frames in flight
        """

        self.task_runner: TaskRunner = TaskRunner(self.max_concurrent_tasks)

    async def startup_hook(self) -> None:
        """
        Called once before any work starts
        """
        pass

    async def result_hook(self, key: int, result: T) -> None:
        """
        Called with the result of each unit of work as it finishes successfully
        """
        pass

    def finished_hook(self) -> None:
        """
        Called once after all of the work has finished, whether or not any of it failed
        """
        pass

    async def _process(self, key: int, method: THUNK[T]) -> T | object:

        name = f"{self.name_prefix}_{key}"

        if not await self.dispatch_handler.enter(name):
            _LOGGER.warning(f'{name} is already running, skipping frame {key}')
            return _SKIPPED

        try:
            result = await method()
        finally:
            await self.dispatch_handler.leave(name)

        await self.result_hook(key, result)

        return result

    async def run(self) -> dict[int, T]:
        """
        Run everything in the method list.

        Work keeps being started after a failure.  Once everything has finished the first failure, in key order, is
        raised.

        :return: the result of each unit of work keyed by its key.  Frames skipped because their name was
                 already running are left out
        """

        await self.startup_hook()

        _LOGGER.info(f'processing a total of {await self.method_list.count()} frames')

        pending: dict[int, asyncio.Future] = {}
        failures: dict[int, BaseException] = {}

        while True:
            key = await self.method_list.next_key()
            if key is None:
                break

            method = await self.method_list.value(key)
            await self.method_list.remove_value(key)

            if method is None:
                continue

            _LOGGER.debug(f'starting frame {key}')

            try:
                pending[key] = await self.task_runner.run(lambda key=key, method=method: self._process(key, method))
            except Exception as error:
                failures[key] = error

        keys = list(pending)
        outcomes = await asyncio.gather(*(pending[key] for key in keys), return_exceptions=True)

        await self.dispatch_handler.dispatch_group.wait()

        results: dict[int, T] = {}
        for key, outcome in zip(keys, outcomes):
            if isinstance(outcome, BaseException):
                failures[key] = outcome
            elif outcome is _SKIPPED:
                continue
            else:
                results[key] = outcome

        self.finished_hook()

        if failures:
            first = min(failures)
            _LOGGER.error(f'{len(failures)} frames failed, the first was frame {first}')
            raise failures[first]

        _LOGGER.info('done')

        return results
