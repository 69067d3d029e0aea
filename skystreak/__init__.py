"""
skystreak finds, merges, measures and scores the streaks of outlying pixels left in astronomical image sequences by
airplanes, satellites and the like, so that they can be painted over while stars are kept.

The package is organized by stage:

* :mod:`skystreak.geometry` - the radial windows used for local searches and painting, and bounding boxes
* :mod:`skystreak.hough` - histograms of the ranked lines found by a Hough transform
* :mod:`skystreak.blobs` - the blobs found by detectors and the :class:`.BlobRectifier` which merges overlapping ones
* :mod:`skystreak.features` - the feature vectors measured for each outlier group and the training matrices they are
  stored in
* :mod:`skystreak.classification` - the classifiers scoring those vectors and the export of trained trees as Python
* :mod:`skystreak.concurrency` - the asyncio primitives used to process many frames at once
* :mod:`skystreak.config` - the settings of a whole run
* :mod:`skystreak.errors` - how failures are categorized and handled

skystreak reports through the standard :mod:`logging` module, one logger per module, and never configures handlers
itself.
"""

from skystreak.config import Config
from skystreak.errors import ErrorKind, SkyStreakError, InvariantViolationError

__version__ = "0.1.0"

__all__ = ["Config", "ErrorKind", "SkyStreakError", "InvariantViolationError"]
