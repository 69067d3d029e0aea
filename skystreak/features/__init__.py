"""
This package defines the features measured for each outlier group, the fixed length vectors they are collected into,
and the training matrices those vectors are written to.

The :class:`.Feature` enum fixes the slot each kind of measurement occupies in a vector.  :class:`.OutlierGroup`
computes the measurements for a single group, :class:`.OutlierFeatureData` and :class:`.OutlierGroupFeatureData` hold
them, and :class:`.CondensedOutlierGroupValueMatrix` / :class:`.OutlierGroupValueMatrix` persist them.
"""

from skystreak.features.feature import Feature, FEATURE_COUNT, canonical_features
from skystreak.features.feature_data import OutlierFeatureData, OutlierGroupFeatureData
from skystreak.features.outlier_group import OutlierGroup, OutlierGroupOptions
from skystreak.features.value_matrix import (CondensedOutlierGroupValueMatrix, OutlierGroupValueMatrix,
                                             TYPES_FILENAME, OUTLIER_DATA_FILENAME, POSITIVE_DATA_FILENAME,
                                             NEGATIVE_DATA_FILENAME)

__all__ = ["Feature", "FEATURE_COUNT", "canonical_features", "OutlierFeatureData", "OutlierGroupFeatureData",
           "OutlierGroup", "OutlierGroupOptions", "CondensedOutlierGroupValueMatrix", "OutlierGroupValueMatrix",
           "TYPES_FILENAME", "OUTLIER_DATA_FILENAME", "POSITIVE_DATA_FILENAME", "NEGATIVE_DATA_FILENAME"]
