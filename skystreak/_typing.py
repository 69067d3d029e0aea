from typing import Union, Protocol, runtime_checkable, Callable, Awaitable, TypeVar, Any
from pathlib import Path

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
BOOL_ARRAY = npt.NDArray[np.bool_]
INT_ARRAY = npt.NDArray[np.int64]

PATH = Union[Path, str]

PIXEL = tuple[int, int]
"""
A pixel coordinate as ``(x, y)``, x being the column and y the row
"""

T = TypeVar("T")

THUNK = Callable[[], Awaitable[T]]
"""
A zero argument callable returning an awaitable, a unit of deferred asynchronous work
"""


@runtime_checkable
class DecisionValueSource(Protocol):
    """
    Anything that can report the value of a feature, which is all a classifier needs from an outlier group
    """

    def decision_tree_value(self, feature: Any, /) -> float: ...
