import numpy as np

from typing import Any


class AttributeEqualityComparison:
    """
    A base class that implements equality comparison based on attributes.

    Two instances are equal when they are of the same class, have the same attribute names, and every attribute
    compares equal.  Numeric array-like attributes are compared with :func:`numpy.allclose` so precomputed tables
    (masks, histograms) can be compared directly.

    Usage::

        class Table(AttributeEqualityComparison):
            def __init__(self, values):
                self.values = np.asarray(values)

        Table([1, 2]) == Table([1, 2])  # True
    """

    def __eq__(self, other: Any) -> bool:
        """
        Compare this object with another for equality by checking equality of all attributes.

        :param other: The object to compare with
        :return: True if the objects are equal, False otherwise
        """

        if not isinstance(other, self.__class__):
            return False

        if set(self.__dict__.keys()) != set(other.__dict__.keys()):
            return False

        return all(self.comparison_dictionary(other).values())

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def _value_comparison(val1: Any, val2: Any) -> bool:
        """
        Compare two values, handling array-like objects.

        :param val1: First value to compare
        :param val2: Second value to compare
        :return: True if values are equal, False otherwise
        """
        if isinstance(val1, (np.ndarray, list, tuple)) and isinstance(val2, (np.ndarray, list, tuple)):
            if np.shape(val1) != np.shape(val2):
                return False
            try:
                return bool(np.allclose(val1, val2))
            except TypeError:
                # non-numeric contents
                return bool(np.all(np.asarray(val1, dtype=object) == np.asarray(val2, dtype=object)))
        return bool(val1 == val2)

    def comparison_dictionary(self, other: Any) -> dict[str, bool]:
        """
        Map each attribute name to whether it is equal between self and other.

        This assumes that other and self are the same type and have the same attributes.

        :param other: The other instance to compare with
        :return: A dictionary mapping attribute names to comparison results
        """

        return {
            key: self._value_comparison(getattr(self, key), getattr(other, key))
            for key in self.__dict__.keys()
        }
