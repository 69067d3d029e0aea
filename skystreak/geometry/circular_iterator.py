"""
This module provides the :class:`CircularIterator` which visits the pixels around a point in an expanding circle.
"""

from typing import Callable, NamedTuple

import numpy as np

from skystreak.geometry.circular_mask import window_distances
from skystreak._typing import PIXEL


class CoordWithDistance(NamedTuple):
    """
    A window local coordinate together with its distance from the window center.
    """

    coord: PIXEL
    """
    The ``(x, y)`` window local coordinate
    """

    distance: float
    """
    The euclidean distance of the coordinate from the window center
    """


class CircularIterator:
    """
    Iterate in an expanding circle around a central point.

    All of the offsets within the window are computed once at construction and sorted by their distance from the
    center.  Ties keep the row-major order they were generated in, so the traversal is deterministic.

    Iteration visits offsets whose distance is less than *or equal to* the radius, while :class:`.CircularMask`
    only contains offsets strictly within the radius.  Callers relying on both must account for the ring of offsets
    sitting exactly on the radius.

    Typical use is a nearest first search which stops as soon as something is found::

        found = []

        def visit(x, y):
            if image[y, x] > threshold:
                found.append((x, y))
                return False  # stop
            return True

        CircularIterator(5).iterate(100, 200, visit)
    """

    def __init__(self, radius: int) -> None:
        """
        :param radius: the radius to search within in pixels (>= 0)
        """

        self.radius: int = radius

        self.size, self.center, distances = window_distances(radius)

        flat = distances.ravel()
        order = np.argsort(flat, kind='stable')

        values = []
        for flat_index in order:
            y, x = divmod(int(flat_index), self.size)
            values.append(CoordWithDistance((x, y), float(flat[flat_index])))

        self._values: tuple[CoordWithDistance, ...] = tuple(values)

    @property
    def values(self) -> tuple[CoordWithDistance, ...]:
        """
        Every window coordinate with its distance, nearest first
        """
        return self._values

    def iterate(self, x: int, y: int, visit: Callable[[int, int], bool]) -> None:
        """
        Visit the pixels around ``(x, y)`` nearest first.

        `visit` is called with the world coordinates of each pixel within :attr:`radius` of the point.  Iteration stops
        the first time `visit` returns ``False``.

        :param x: the x coordinate of the center of the search
        :param y: the y coordinate of the center of the search
        :param visit: called with ``(x, y)`` world coordinates, returns whether to keep going
        """

        for (cx, cy), distance in self._values:
            if distance > self.radius:
                # sorted, so nothing further can be within the radius
                return
            if visit(cx - self.center + x, cy - self.center + y) is False:
                return

    def coordinates(self, x: int, y: int) -> list[PIXEL]:
        """
        The world coordinates that :meth:`iterate` would visit around ``(x, y)``, in visiting order.
        """

        ret: list[PIXEL] = []

        def collect(px: int, py: int) -> bool:
            ret.append((px, py))
            return True

        self.iterate(x, y, collect)

        return ret
