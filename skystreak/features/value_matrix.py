"""
This module provides the training matrices that feature vectors are written to and read back from.

A training directory holds a ``types.csv`` file, a single line naming every feature in sort order, along with one or
more data files holding one comma separated feature vector per line.  :class:`CondensedOutlierGroupValueMatrix`
accumulates the vectors of every group processed in a frame and writes ``outlier_data.csv``.  Once those have been
sorted into positive (paint) and negative (keep) examples :class:`OutlierGroupValueMatrix` reads
``positive_data.csv`` and ``negative_data.csv`` back for training.
"""

import logging
import os

from pathlib import Path
from typing import Protocol, runtime_checkable

import pandas as pd

from skystreak.features.feature import Feature, canonical_features
from skystreak.features.feature_data import OutlierFeatureData
from skystreak._typing import PATH


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


TYPES_FILENAME: str = "types.csv"
"""
The name of the file listing the feature names
"""

OUTLIER_DATA_FILENAME: str = "outlier_data.csv"
"""
The name of the file holding unsorted feature vectors
"""

POSITIVE_DATA_FILENAME: str = "positive_data.csv"
"""
The name of the file holding the feature vectors of groups that should be painted
"""

NEGATIVE_DATA_FILENAME: str = "negative_data.csv"
"""
The name of the file holding the feature vectors of groups that should be kept
"""


@runtime_checkable
class FeatureValueSource(Protocol):
    """
    Anything able to compute every feature value of an outlier group, such as :class:`.OutlierGroup`
    """

    async def decision_tree_values(self) -> list[float]:
        ...


def _remove_existing(filename: Path) -> None:
    if filename.exists():
        filename.unlink()


class CondensedOutlierGroupValueMatrix:
    """
    Accumulates the feature vectors of outlier groups in the order they are appended.

    Example::

        matrix = CondensedOutlierGroupValueMatrix()
        for group in groups:
            await matrix.append(group)
        matrix.write_csv(output_dir)
    """

    def __init__(self) -> None:

        self.types: list[Feature] = canonical_features()
        """
        The features in the order of each row
        """

        self.outlier_values: list[list[float]] = []
        """
        One row of feature values per appended group
        """

    def __len__(self) -> int:
        return len(self.outlier_values)

    async def append(self, group: FeatureValueSource | OutlierFeatureData) -> None:
        """
        Add the feature vector of a group as the next row.

        :param group: either a group whose values are computed here, or an already computed vector
        """

        if isinstance(group, OutlierFeatureData):
            values = list(group.values)
        else:
            values = list(await group.decision_tree_values())

        self.outlier_values.append(values)

    def write_csv(self, directory: PATH) -> None:
        """
        Write ``types.csv`` and ``outlier_data.csv`` to `directory`, replacing any existing files.

        :param directory: the existing directory to write to
        :raises OSError: if an existing file cannot be removed or a new one cannot be written
        """

        directory = Path(directory)

        types_file = directory / TYPES_FILENAME
        _remove_existing(types_file)
        with types_file.open('w') as out_file:
            out_file.write(",".join(feature.value for feature in self.types))

        data_file = directory / OUTLIER_DATA_FILENAME
        _remove_existing(data_file)
        frame = pd.DataFrame(self.outlier_values, columns=[feature.value for feature in self.types], dtype=float)
        frame.to_csv(data_file, header=False, index=False, lineterminator='\n')

        _LOGGER.info(f'wrote {len(self.outlier_values)} feature vectors to {directory}')


class OutlierGroupValueMatrix:
    """
    The positive and negative training examples of a training directory.

    Use :meth:`read` to load one.
    """

    def __init__(self, types: list[Feature], positive_values: list[list[float]],
                 negative_values: list[list[float]]) -> None:
        """
        :param types: the features in the order of each row
        :param positive_values: the feature vectors of groups that should be painted
        :param negative_values: the feature vectors of groups that should be kept
        """

        self.types: list[Feature] = types
        self.positive_values: list[list[float]] = positive_values
        self.negative_values: list[list[float]] = negative_values

    @classmethod
    def read(cls, directory: PATH) -> "OutlierGroupValueMatrix | None":
        """
        Read a training directory.

        A final row with the wrong number of values, as left behind by an interrupted write, is dropped.

        :param directory: the directory holding ``types.csv``, ``positive_data.csv`` and ``negative_data.csv``
        :return: the matrix, or ``None`` if any of the three files is missing
        :raises ValueError: if ``types.csv`` names an unknown feature
        """

        directory = Path(directory)

        types_file = directory / TYPES_FILENAME
        positive_file = directory / POSITIVE_DATA_FILENAME
        negative_file = directory / NEGATIVE_DATA_FILENAME

        for filename in (types_file, positive_file, negative_file):
            if not filename.exists():
                _LOGGER.warning(f'{filename} does not exist, unable to read training data from {directory}')
                return None

        with types_file.open('r') as in_file:
            types = [Feature.from_name(name) for name in in_file.read().strip().split(',') if name.strip()]

        positive = cls._read_values(positive_file, len(types))
        negative = cls._read_values(negative_file, len(types))

        _LOGGER.info(f'read {len(positive)} positive and {len(negative)} negative feature vectors from {directory}')

        return cls(types, positive, negative)

    @staticmethod
    def _read_values(filename: Path, width: int) -> list[list[float]]:

        if os.path.getsize(filename) == 0:
            return []

        frame = pd.read_csv(filename, header=None, index_col=False, dtype=float)

        if frame.shape[1] != width:
            raise ValueError(f'{filename} has {frame.shape[1]} columns but {width} features are named')

        rows = frame.values.tolist()

        if rows and frame.iloc[-1].isna().any():
            _LOGGER.warning(f'dropping the incomplete final row of {filename}')
            rows.pop()

        return rows
