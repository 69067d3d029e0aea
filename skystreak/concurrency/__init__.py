"""
This package holds the asyncio primitives used to run detection, classification and file I/O for many frames at
once.

Shared state is only ever touched through these objects.  Each serializes access to its own state through a lock so
requests are handled in arrival order, and none of them block the event loop while waiting.
"""

from skystreak.concurrency.io_gate import IOGate
from skystreak.concurrency.number_running import NumberRunning
from skystreak.concurrency.dispatch import WaitGroup, DispatchHandler
from skystreak.concurrency.method_list import MethodList
from skystreak.concurrency.actors import ArrayActor, ProcessedBlobs, PixelStatus, PixelStatusTracker
from skystreak.concurrency.task_runner import TaskRunner, run_task, default_task_runner, default_max_concurrent_tasks
from skystreak.concurrency.sequence_runner import SequenceRunner, SequenceRunnerOptions
from skystreak.concurrency.task_group import LimitedTaskGroup, ThrowingLimitedTaskGroup

__all__ = ["IOGate", "NumberRunning", "WaitGroup", "DispatchHandler", "MethodList", "ArrayActor", "ProcessedBlobs",
           "PixelStatus", "PixelStatusTracker", "TaskRunner", "run_task", "default_task_runner",
           "default_max_concurrent_tasks", "SequenceRunner", "SequenceRunnerOptions", "LimitedTaskGroup",
           "ThrowingLimitedTaskGroup"]
