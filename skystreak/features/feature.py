"""
This module enumerates the measurable properties of an outlier group used for classification.
"""

from enum import Enum


class Feature(Enum):
    """
    An enum of every kind of feature that makes up a feature vector.

    The value of each member is its canonical name, which is what is written to ``types.csv``.  Each member always
    occupies the slot given by :attr:`sort_order` in a feature vector, whatever order features are supplied in.

    .. warning::
        The sort order is persisted in training data and generated classifiers.  New members must be appended, never
        inserted or reordered.
    """

    SIZE = "size"
    WIDTH = "width"
    HEIGHT = "height"
    CENTER_X = "centerX"
    CENTER_Y = "centerY"
    MIN_X = "minX"
    MIN_Y = "minY"
    MAX_X = "maxX"
    MAX_Y = "maxY"
    HYPOTENUSE = "hypotenuse"
    ASPECT_RATIO = "aspectRatio"
    FILL_AMOUNT = "fillAmount"
    SURFACE_AREA_RATIO = "surfaceAreaRatio"
    AVERAGE_BRIGHTNESS = "averagebrightness"
    MEDIAN_BRIGHTNESS = "medianBrightness"
    MAX_BRIGHTNESS = "maxBrightness"
    AVG_COUNT_OF_FIRST_10_HOUGH_LINES = "avgCountOfFirst10HoughLines"
    MAX_THETA_DIFF_OF_FIRST_10_HOUGH_LINES = "maxThetaDiffOfFirst10HoughLines"
    MAX_RHO_DIFF_OF_FIRST_10_HOUGH_LINES = "maxRhoDiffOfFirst10HoughLines"
    AVG_COUNT_OF_ALL_HOUGH_LINES = "avgCountOfAllHoughLines"
    MAX_THETA_DIFF_OF_ALL_HOUGH_LINES = "maxThetaDiffOfAllHoughLines"
    MAX_RHO_DIFF_OF_ALL_HOUGH_LINES = "maxRhoDiffOfAllHoughLines"
    NUMBER_OF_NEARBY_OUTLIERS_IN_SAME_FRAME = "numberOfNearbyOutliersInSameFrame"
    ADJECENT_FRAME_NEIGHBORING_OUTLIERS_BEST_THETA = "adjecentFrameNeighboringOutliersBestTheta"
    HISTOGRAM_STREAK_DETECTION = "histogramStreakDetection"
    LONGER_HISTOGRAM_STREAK_DETECTION = "longerHistogramStreakDetection"
    MAX_HOUGH_TRANSFORM_COUNT = "maxHoughTransformCount"
    MAX_HOUGH_THETA = "maxHoughTheta"
    NEIGHBORING_INTER_FRAME_OUTLIER_THETA_SCORE = "neighboringInterFrameOutlierThetaScore"
    MAX_OVERLAP = "maxOverlap"
    MAX_OVERLAP_TIMES_THETA_HISTO = "maxOverlapTimesThetaHisto"
    PIXEL_BORDER_AMOUNT = "pixelBorderAmount"

    @property
    def sort_order(self) -> int:
        """
        The slot this feature occupies in a feature vector
        """
        return _SORT_ORDER[self]

    @property
    def needs_async(self) -> bool:
        """
        Whether computing this feature needs information from other groups or frames
        """
        return self in _NEEDS_ASYNC

    @classmethod
    def from_name(cls, name: str) -> "Feature":
        """
        Look up a feature by its canonical name.

        :raises ValueError: if no feature has that name
        """
        return cls(name.strip())

    @classmethod
    def all_cases_string(cls) -> str:
        """
        The canonical names of every feature, one per line
        """
        return "".join(f"{feature.value}\n" for feature in canonical_features())

    def __lt__(self, other: "Feature") -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.sort_order < other.sort_order


_SORT_ORDER: dict[Feature, int] = {feature: index for index, feature in enumerate(Feature)}

_NEEDS_ASYNC: frozenset[Feature] = frozenset({
    Feature.NUMBER_OF_NEARBY_OUTLIERS_IN_SAME_FRAME,
    Feature.ADJECENT_FRAME_NEIGHBORING_OUTLIERS_BEST_THETA,
    Feature.HISTOGRAM_STREAK_DETECTION,
    Feature.LONGER_HISTOGRAM_STREAK_DETECTION,
    Feature.NEIGHBORING_INTER_FRAME_OUTLIER_THETA_SCORE,
    Feature.MAX_OVERLAP,
    Feature.MAX_OVERLAP_TIMES_THETA_HISTO,
})

FEATURE_COUNT: int = len(_SORT_ORDER)
"""
The length of every feature vector
"""


def canonical_features() -> list[Feature]:
    """
    Every feature, in sort order
    """
    return sorted(Feature, key=lambda feature: feature.sort_order)
