"""
This module provides angle histograms of the lines a Hough transform found in an outlier group.

The transform itself is an external collaborator.  All that is needed from it is a ranked list of
:class:`HoughLine` instances, strongest first.  Histograms of two groups can then be compared with
:meth:`HoughLineHistogram.match_score` to see whether they are streaking in the same direction.
"""

from typing import NamedTuple, Sequence

import numpy as np

from skystreak.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting
from skystreak._typing import DOUBLE_ARRAY


class HoughLine(NamedTuple):
    """
    A single line from a Hough transform in polar form.
    """

    theta: float
    """
    The angle of the line in degrees, in [0, 360)
    """

    rho: float
    """
    The distance of the line from the origin in pixels
    """

    count: int
    """
    The number of votes the line received
    """


class HoughLineHistogram(AttributeEqualityComparison, AttributePrinting):
    """
    Votes of a set of lines bucketed by angle.

    Bucket ``i`` covers angles ``[i*increment, (i+1)*increment)`` and accumulates ``count / group_size`` for every
    line within it, so histograms of groups of different size are comparable.
    """

    def __init__(self, increment: int, lines: Sequence[HoughLine], group_size: int) -> None:
        """
        :param increment: the width of each bucket in degrees.  Must evenly divide 360
        :param lines: the lines to bucket.  Every theta must be in [0, 360)
        :param group_size: the number of pixels in the group the lines came from, used to normalize the votes
        :raises ValueError: if the increment does not divide 360, the group size is not positive or a theta is outside
                            [0, 360)
        """

        if increment <= 0 or 360 % increment != 0:
            raise ValueError(f'the degree increment must evenly divide 360, got {increment}')

        if group_size <= 0:
            raise ValueError(f'the group size must be positive, got {group_size}')

        self.increment: int = increment

        values = np.zeros(360 // increment, dtype=np.float64)

        for line in lines:
            if not 0 <= line.theta < 360:
                raise ValueError(f'line theta must be in [0, 360), got {line.theta}')

            index = int(line.theta // increment)
            values[index] += line.count / group_size

        values.setflags(write=False)

        self.values: DOUBLE_ARRAY = values
        """
        The normalized vote sum of each bucket
        """

    def match_score(self, other: "HoughLineHistogram") -> float:
        """
        How well the two histograms line up.

        This is the overlap of the best aligned bucket, the maximum over all buckets of the smaller of the two values.
        Histograms with different increments cannot be compared and score 0.

        :param other: the histogram to compare against
        :return: the match score, 0 meaning no overlap
        """

        if self.increment != other.increment:
            return 0.0

        return float(np.max(np.minimum(self.values, other.values), initial=0.0))

    @property
    def max_theta(self) -> float:
        """
        The starting angle in degrees of the bucket with the most votes.

        The first bucket wins ties, and an empty histogram reports 0.
        """

        max_index = int(np.argmax(self.values)) if self.values.size else 0

        ret = float(max_index * self.increment)
        if ret >= 360:
            ret -= 360

        return ret
