"""
This module provides the :class:`BoundingBox` describing the inclusive pixel extent of a group of pixels.
"""

from dataclasses import dataclass
from typing import Iterable
import math

from skystreak._typing import PIXEL


@dataclass(frozen=True)
class BoundingBox:
    """
    An inclusive, axis aligned box in pixel coordinates.
    """

    min: PIXEL
    """
    The ``(x, y)`` of the top left pixel
    """

    max: PIXEL
    """
    The ``(x, y)`` of the bottom right pixel, inclusive
    """

    @classmethod
    def from_pixels(cls, pixels: Iterable[PIXEL]) -> "BoundingBox":
        """
        Build the smallest box containing every pixel.

        :raises ValueError: if no pixels are given
        """

        pixels = list(pixels)
        if not pixels:
            raise ValueError('cannot bound an empty set of pixels')

        xs = [pixel[0] for pixel in pixels]
        ys = [pixel[1] for pixel in pixels]

        return cls((min(xs), min(ys)), (max(xs), max(ys)))

    @property
    def width(self) -> int:
        return self.max[0] - self.min[0] + 1

    @property
    def height(self) -> int:
        return self.max[1] - self.min[1] + 1

    @property
    def size(self) -> int:
        """
        The number of pixels in the box
        """
        return self.width * self.height

    @property
    def center(self) -> PIXEL:
        return (self.min[0] + self.width // 2, self.min[1] + self.height // 2)

    @property
    def hypotenuse(self) -> float:
        """
        The length of the diagonal of the box in pixels
        """
        return math.hypot(self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        return self.min[0] <= x <= self.max[0] and self.min[1] <= y <= self.max[1]

    def overlaps(self, other: "BoundingBox") -> bool:
        return not (other.min[0] > self.max[0] or other.max[0] < self.min[0] or
                    other.min[1] > self.max[1] or other.max[1] < self.min[1])
