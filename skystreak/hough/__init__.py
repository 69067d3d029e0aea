"""
This package consumes the ranked line output of a Hough transform.

See :mod:`.line_histogram` for details.
"""

from skystreak.hough.line_histogram import HoughLine, HoughLineHistogram

__all__ = ["HoughLine", "HoughLineHistogram"]
