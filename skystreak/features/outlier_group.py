"""
This module computes the feature values of a single outlier group.

An :class:`OutlierGroup` is built from the pixels of a blob that survived rectification, the size of the frame it came
from, and the ranked Hough lines found in it.  The features that only depend on the group itself (its geometry, its
brightness, the Hough lines) are computed here.  The features that depend on other groups in the same or neighboring
frames (see :attr:`.Feature.needs_async`) are supplied by the caller, either up front through `context_values` or on
demand through an asynchronous `context_provider`.  Anything not supplied is 0.
"""

import logging

from dataclasses import dataclass
from typing import Mapping, Sequence, Callable, Awaitable

import numpy as np
from scipy import ndimage

from skystreak.blobs.blob import PixelBlob
from skystreak.geometry.bounding_box import BoundingBox
from skystreak.hough.line_histogram import HoughLine, HoughLineHistogram
from skystreak.features.feature import Feature, canonical_features
from skystreak.features.feature_data import OutlierFeatureData
from skystreak.utilities.options import UserOptions
from skystreak.utilities.mixin_classes import UserOptionConfigured
from skystreak._typing import PIXEL, INT_ARRAY, BOOL_ARRAY


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


CONTEXT_PROVIDER = Callable[["OutlierGroup", Feature], Awaitable[float]]
"""
An async callable computing a context dependent feature of a group
"""

_EDGE_NEIGHBORS = np.array([[0, 1, 0],
                            [1, 0, 1],
                            [0, 1, 0]], dtype=bool)

_DIAGONAL_NEIGHBORS = np.array([[1, 0, 1],
                                [0, 0, 0],
                                [1, 0, 1]], dtype=np.int64)


def ratio_of_surface_area_to_size(mask: BOOL_ARRAY) -> float:
    """
    The fraction of the member pixels of `mask` which are missing at least one of their 4 edge neighbors.

    Pixels beyond the edge of `mask` count as missing.

    :param mask: a boolean array of member pixels
    :return: the ratio of surface pixels to all member pixels, 0 for an empty mask
    """

    size = int(mask.sum())
    if size == 0:
        return 0.0

    interior = ndimage.binary_erosion(mask, structure=_EDGE_NEIGHBORS, border_value=0)

    return float((mask & ~interior).sum()) / size


def pixel_border_amount(mask: BOOL_ARRAY) -> float:
    """
    The mean number of diagonal neighbors of each member pixel of `mask` that are also members.

    :param mask: a boolean array of member pixels
    :return: the mean diagonal neighbor count, 0 for an empty mask
    """

    size = int(mask.sum())
    if size == 0:
        return 0.0

    neighbors = ndimage.convolve(mask.astype(np.int64), _DIAGONAL_NEIGHBORS, mode='constant', cval=0)

    return float(neighbors[mask].sum()) / size


@dataclass
class OutlierGroupOptions(UserOptions):
    histogram_degree_increment: int = 5
    """
    The bucket width in degrees of the :attr:`OutlierGroup.hough_line_histogram`
    """

    leading_line_count: int = 10
    """
    How many of the strongest lines the "first 10" Hough line features consider
    """


class OutlierGroup(UserOptionConfigured[OutlierGroupOptions], OutlierGroupOptions):
    """
    A group of outlying pixels from one frame, able to report the value of every :class:`.Feature`.

    Feature values are computed lazily and cached.
    """

    def __init__(self, name: str, pixels: Mapping[PIXEL, int], frame_width: int, frame_height: int,
                 frame_index: int = 0, lines: Sequence[HoughLine] = (),
                 context_values: Mapping[Feature, float] | None = None,
                 context_provider: CONTEXT_PROVIDER | None = None,
                 options: OutlierGroupOptions | None = None) -> None:
        """
        :param name: a name for the group, unique within its frame
        :param pixels: the intensity of every pixel in the group keyed by ``(x, y)``
        :param frame_width: the width of the frame the group came from
        :param frame_height: the height of the frame the group came from
        :param frame_index: the index of the frame in its sequence
        :param lines: the ranked Hough lines of the group, strongest first
        :param context_values: known values of the features that depend on other groups
        :param context_provider: called for any context dependent feature not in `context_values` by
                                 :meth:`decision_tree_value_async`
        :param options: the options configuring the feature computations
        :raises ValueError: if the group is empty or the frame size is not positive
        """

        super().__init__(OutlierGroupOptions, options=options)

        if not pixels:
            raise ValueError(f'outlier group {name} has no pixels')

        if frame_width <= 0 or frame_height <= 0:
            raise ValueError(f'the frame size must be positive, got {frame_width}x{frame_height}')

        self.name: str = name
        self.frame_index: int = frame_index
        self.frame_width: int = frame_width
        self.frame_height: int = frame_height
        self.lines: tuple[HoughLine, ...] = tuple(lines)
        self.context_provider: CONTEXT_PROVIDER | None = context_provider

        self.bounds: BoundingBox = BoundingBox.from_pixels(pixels)

        values = np.zeros((self.bounds.height, self.bounds.width), dtype=np.int64)
        mask = np.zeros(values.shape, dtype=bool)
        for (x, y), intensity in pixels.items():
            values[y - self.bounds.min[1], x - self.bounds.min[0]] = intensity
            mask[y - self.bounds.min[1], x - self.bounds.min[0]] = True

        self.pixel_values: INT_ARRAY = values
        """
        The intensities over the bounding box, indexed ``[y, x]`` relative to the box
        """

        self.mask: BOOL_ARRAY = mask
        """
        The member pixels over the bounding box
        """

        self.size: int = int(mask.sum())

        self.brightness: int = int(values[mask].sum() // self.size)
        """
        The mean intensity of the group, truncated
        """

        self._cache: dict[Feature, float] = {}
        if context_values:
            for feature, value in context_values.items():
                self._cache[feature] = float(value)

        self._hough_line_histogram: HoughLineHistogram | None = None

    @classmethod
    def from_blob(cls, blob: PixelBlob, frame_width: int, frame_height: int, **kwargs) -> "OutlierGroup":
        """
        Build a group from a :class:`.PixelBlob`, named after the blob id.

        Extra keyword arguments are passed to the initializer.
        """
        return cls(str(blob.blob_id), blob.intensities, frame_width, frame_height, **kwargs)

    @property
    def first_line(self) -> HoughLine | None:
        """
        The strongest Hough line, if any
        """
        return self.lines[0] if self.lines else None

    @property
    def hough_line_histogram(self) -> HoughLineHistogram:
        """
        The angle histogram of the Hough lines of this group
        """
        if self._hough_line_histogram is None:
            self._hough_line_histogram = HoughLineHistogram(self.histogram_degree_increment, self.lines, self.size)
        return self._hough_line_histogram

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"OutlierGroup(name={self.name!r}, frame_index={self.frame_index}, size={self.size})"

    def clear_feature_value_cache(self) -> None:
        self._cache.clear()

    def decision_tree_value(self, feature: Feature) -> float:
        """
        The value of a feature of this group.

        Context dependent features that were not supplied are 0.
        """

        cached = self._cache.get(feature)
        if cached is not None:
            return cached

        if feature.needs_async:
            return 0.0

        ret = float(self._compute(feature))
        self._cache[feature] = ret
        return ret

    async def decision_tree_value_async(self, feature: Feature) -> float:
        """
        The value of a feature of this group, asking the context provider for context dependent features.
        """

        if feature.needs_async and feature not in self._cache and self.context_provider is not None:
            self._cache[feature] = float(await self.context_provider(self, feature))

        return self.decision_tree_value(feature)

    async def decision_tree_values(self) -> list[float]:
        """
        The value of every feature in sort order
        """
        return [await self.decision_tree_value_async(feature) for feature in canonical_features()]

    async def feature_data(self) -> OutlierFeatureData:
        """
        The feature vector of this group
        """
        return OutlierFeatureData(await self.decision_tree_values())

    def _compute(self, feature: Feature) -> float:

        width = float(self.frame_width)
        height = float(self.frame_height)
        bounds = self.bounds

        match feature:
            case Feature.SIZE:
                return self.size / (height * width)
            case Feature.WIDTH:
                return bounds.width / width
            case Feature.HEIGHT:
                return bounds.height / height
            case Feature.CENTER_X:
                return bounds.center[0] / width
            case Feature.CENTER_Y:
                return bounds.center[1] / height
            case Feature.MIN_X:
                return bounds.min[0] / width
            case Feature.MIN_Y:
                return bounds.min[1] / height
            case Feature.MAX_X:
                return bounds.max[0] / width
            case Feature.MAX_Y:
                return bounds.max[1] / height
            case Feature.HYPOTENUSE:
                return bounds.hypotenuse / (height * width)
            case Feature.ASPECT_RATIO:
                return bounds.width / bounds.height
            case Feature.FILL_AMOUNT:
                return self.size / (bounds.width * bounds.height)
            case Feature.SURFACE_AREA_RATIO:
                return ratio_of_surface_area_to_size(self.mask)
            case Feature.AVERAGE_BRIGHTNESS:
                return self.brightness
            case Feature.MEDIAN_BRIGHTNESS:
                lit = np.sort(self.pixel_values[self.pixel_values > 0])
                return float(lit[lit.size // 2]) if lit.size else 0.0
            case Feature.MAX_BRIGHTNESS:
                return float(self.pixel_values.max(initial=0))
            case Feature.AVG_COUNT_OF_FIRST_10_HOUGH_LINES:
                return self._average_count(self.lines[:self.leading_line_count])
            case Feature.MAX_THETA_DIFF_OF_FIRST_10_HOUGH_LINES:
                return self._max_difference(self.lines[:self.leading_line_count], 'theta')
            case Feature.MAX_RHO_DIFF_OF_FIRST_10_HOUGH_LINES:
                return self._max_difference(self.lines[:self.leading_line_count], 'rho')
            case Feature.AVG_COUNT_OF_ALL_HOUGH_LINES:
                return self._average_count(self.lines)
            case Feature.MAX_THETA_DIFF_OF_ALL_HOUGH_LINES:
                return self._max_difference(self.lines, 'theta')
            case Feature.MAX_RHO_DIFF_OF_ALL_HOUGH_LINES:
                return self._max_difference(self.lines, 'rho')
            case Feature.MAX_HOUGH_TRANSFORM_COUNT:
                first = self.first_line
                return first.count / self.size if first is not None else 0.0
            case Feature.MAX_HOUGH_THETA:
                first = self.first_line
                return float(first.theta) if first is not None else 0.0
            case Feature.PIXEL_BORDER_AMOUNT:
                return pixel_border_amount(self.mask)

        _LOGGER.warning(f'no computation for {feature} of group {self.name}, using 0')
        return 0.0

    def _average_count(self, lines: Sequence[HoughLine]) -> float:
        if not lines:
            return 0.0
        return sum(line.count / self.size for line in lines) / len(lines)

    @staticmethod
    def _max_difference(lines: Sequence[HoughLine], attribute: str) -> float:
        if not lines:
            return 0.0
        first = getattr(lines[0], attribute)
        return float(max(abs(getattr(line, attribute) - first) for line in lines))
