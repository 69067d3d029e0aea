"""
This module defines how errors are categorized and handled throughout skystreak.

Each category in :class:`ErrorKind` has a single policy:

========================== ========================================================================================
Kind                       Policy
========================== ========================================================================================
``INVARIANT_VIOLATION``    A bug in the calling discipline (for instance leaving a :class:`.DispatchHandler` entry
                           that was never entered).  An :class:`InvariantViolationError` is raised and never caught
                           inside the package.
``DUPLICATE_OPERATION``    A contended or repeated request (entering a name twice).  Logged at error level and
                           refused; prior state is left intact and the caller gets ``False``.
``RESOURCE_REFUSAL``       A request that would break a bound (decrementing a counter past zero, a conditional
                           increment beyond its maximum).  Refused; logged when it indicates misuse.
``IO_FAILURE``             Reading or writing files.  The ``OSError`` propagates to the caller untouched and no
                           partial writes are rolled back.
``ABSORPTION_REFUSAL``     A blob declining to merge.  Not an error: the rectifier registers the blob on its own.
========================== ========================================================================================
"""

from enum import Enum, auto


class ErrorKind(Enum):
    """
    An enum specifying the categories of failure and refusal recognized by skystreak.
    """

    INVARIANT_VIOLATION = auto()
    """
    Programmer error.  Fatal to the current operation.
    """

    DUPLICATE_OPERATION = auto()
    """
    A repeated request that is logged and refused.
    """

    RESOURCE_REFUSAL = auto()
    """
    A request that would exceed a bound, refused without raising.
    """

    IO_FAILURE = auto()
    """
    File system failure, propagated to the caller.
    """

    ABSORPTION_REFUSAL = auto()
    """
    A blob declined a merge.  Handled as a normal outcome.
    """

    @property
    def is_fatal(self) -> bool:
        """
        Whether this kind aborts the current operation by raising
        """
        return self in (ErrorKind.INVARIANT_VIOLATION, ErrorKind.IO_FAILURE)


class SkyStreakError(Exception):
    """
    Base class for the exceptions raised by skystreak itself.
    """

    kind: ErrorKind = ErrorKind.INVARIANT_VIOLATION


class InvariantViolationError(SkyStreakError, RuntimeError):
    """
    Raised when a caller breaks an invariant of one of the coordination primitives.
    """

    kind = ErrorKind.INVARIANT_VIOLATION
