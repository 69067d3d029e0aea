"""
This package provides the radius parameterized coordinate tables used for local spatial searches and painting.

* :class:`.CircularMask` - unordered membership within a radius (strictly less than)
* :class:`.CircularIterator` - nearest first traversal within a radius (less than or equal), with early termination
* :class:`.PaintMask` - an opacity window fading out towards a radius
* :class:`.BoundingBox` - the inclusive extent of a set of pixels
"""

from skystreak.geometry.circular_mask import CircularMask, PaintMask, window_distances
from skystreak.geometry.circular_iterator import CircularIterator, CoordWithDistance
from skystreak.geometry.bounding_box import BoundingBox

__all__ = ["CircularMask", "PaintMask", "window_distances", "CircularIterator", "CoordWithDistance", "BoundingBox"]
