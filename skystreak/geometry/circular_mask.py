"""
This module provides square windows of precomputed circular footprints.

:class:`CircularMask` answers "is this offset within the radius" and :class:`PaintMask` gives an opacity for each offset
which fades out towards the radius.  Both share the window geometry of the :class:`.CircularIterator`: for a radius ``r``
the window is ``2*(r+1)+1`` pixels on a side with its center at ``(r+1, r+1)``.
"""

from typing import Callable

import numpy as np

from skystreak.utilities.mixin_classes import AttributeEqualityComparison
from skystreak._typing import DOUBLE_ARRAY, BOOL_ARRAY


def window_distances(radius: float) -> tuple[int, int, DOUBLE_ARRAY]:
    """
    Compute the window geometry for a radius.

    :param radius: the radius of the footprint in pixels
    :return: the window side length, the center index, and a ``size x size`` array (indexed ``[y, x]``) of the distance
             of each window pixel from the center
    :raises ValueError: if the radius is negative
    """

    if radius < 0:
        raise ValueError(f'the radius must be non-negative, got {radius}')

    center = int(radius + 1)
    size = 1 + 2 * center

    y, x = np.mgrid[0:size, 0:size]

    distances = np.hypot(x - center, y - center)

    return size, center, distances


class CircularMask(AttributeEqualityComparison):
    """
    A square boolean mask which is true for every offset strictly closer to the center than the radius.

    The mask is built once per radius and never modified.  Use it when only membership matters (painting, counting);
    use :class:`.CircularIterator` when the offsets must be visited nearest first.
    """

    def __init__(self, radius: int) -> None:
        """
        :param radius: the radius of the mask in pixels (>= 0)
        """

        self.radius: int = radius

        self.size, self.center, distances = window_distances(radius)

        values = distances < radius
        values.setflags(write=False)

        self.values: BOOL_ARRAY = values
        """
        The membership of each window pixel, indexed ``[y, x]``
        """

    def contains(self, x: int, y: int) -> bool:
        """
        Whether the window local coordinate is within the mask.

        Coordinates outside of the window are never contained.
        """

        if not (0 <= x < self.size and 0 <= y < self.size):
            return False

        return bool(self.values[y, x])

    def iterate(self, visit: Callable[[int, int], None]) -> None:
        """
        Call `visit(x, y)` for every window local coordinate within the mask.

        :param visit: the callable to call with each member coordinate
        """

        for x in range(self.size):
            for y in range(self.size):
                if self.values[y, x]:
                    visit(x, y)

    @property
    def member_count(self) -> int:
        """
        The number of window pixels within the mask
        """
        return int(self.values.sum())


class PaintMask(AttributeEqualityComparison):
    """
    A square mask of opacity levels used when painting over an outlier group.

    Offsets closer than :attr:`inner_wall_size` are fully opaque (1.0).  Between the inner wall and the radius the opacity
    fades linearly to zero, and from the radius out it is zero.
    """

    def __init__(self, inner_wall_size: float, radius: float) -> None:
        """
        :param inner_wall_size: the distance from the center within which opacity is 100%
        :param radius: the total size of the mask from the center
        :raises ValueError: if the inner wall is larger than the radius
        """

        if inner_wall_size > radius:
            raise ValueError(f'the inner wall ({inner_wall_size}) cannot be larger than the radius ({radius})')

        self.inner_wall_size: float = inner_wall_size
        self.radius: float = radius

        self.size, self.center, distances = window_distances(radius)

        fade_size = radius - inner_wall_size

        pixels = np.zeros(distances.shape, dtype=np.float64)

        fading = (distances >= inner_wall_size) & (distances < radius)
        if fade_size > 0:
            pixels[fading] = (fade_size - (distances[fading] - inner_wall_size)) / fade_size

        pixels[distances < inner_wall_size] = 1.0

        pixels.setflags(write=False)

        self.pixels: DOUBLE_ARRAY = pixels
        """
        The opacity of each window pixel in [0, 1], indexed ``[y, x]``
        """

    def opacity(self, x: int, y: int) -> float:
        """
        The opacity at a window local coordinate, zero outside of the window.
        """

        if not (0 <= x < self.size and 0 <= y < self.size):
            return 0.0

        return float(self.pixels[y, x])
