"""
This module provides the fixed length feature vectors that classifiers score.
"""

from typing import Callable, Sequence, Iterable

from skystreak.features.feature import Feature, FEATURE_COUNT


class OutlierFeatureData:
    """
    An immutable vector of feature values for a single outlier group.

    Values are indexed by :attr:`.Feature.sort_order`.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        """
        :param values: the value of every feature, in sort order
        :raises ValueError: if the number of values is not the number of features
        """

        values = tuple(float(value) for value in values)

        if len(values) != FEATURE_COUNT:
            raise ValueError(f'a feature vector needs {FEATURE_COUNT} values, got {len(values)}')

        self._values: tuple[float, ...] = values

    @classmethod
    def from_generator(cls, generator: Callable[[int], float]) -> "OutlierFeatureData":
        """
        Build a vector by calling `generator` once for each index ``0 .. FEATURE_COUNT-1``.
        """
        return cls(generator(index) for index in range(FEATURE_COUNT))

    @staticmethod
    def raw_values() -> list[float]:
        """
        A mutable zero filled list the length of a feature vector
        """
        return [0.0] * FEATURE_COUNT

    @property
    def values(self) -> tuple[float, ...]:
        return self._values

    def decision_tree_value(self, feature: Feature) -> float:
        """
        The value of a feature
        """
        return self._values[feature.sort_order]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutlierFeatureData):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)})"


class OutlierGroupFeatureData(OutlierFeatureData):
    """
    A feature vector built from parallel lists of features and values in any order.

    Each value is placed in the slot of its feature.  Features that are not supplied read back as exactly ``0.0``.
    If a feature is supplied more than once the last value wins.
    """

    __slots__ = ()

    def __init__(self, features: Sequence[Feature], values: Sequence[float]) -> None:
        """
        :param features: the features, parallel to `values`
        :param values: the value of each feature in `features`
        :raises ValueError: if the two sequences differ in length
        """

        if len(features) != len(values):
            raise ValueError(f'{len(features)} features were given with {len(values)} values')

        raw = OutlierFeatureData.raw_values()
        for feature, value in zip(features, values):
            raw[feature.sort_order] = float(value)

        super().__init__(raw)
