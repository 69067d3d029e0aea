"""
Provides abstract base classes for the classifiers that score outlier groups.

A classifier turns the features of an outlier group into a score between -1 and 1.  -1 means the group should
confidently be kept (a star, say), 1 means it should confidently be painted over (an airplane streak, say), 0 means
nothing is known, and anything in between expresses partial confidence.

The classes here build on one another.

================================================ =======================================================================
Class                                            Adds
================================================ =======================================================================
:class:`OutlierGroupClassifier`                  :meth:`~OutlierGroupClassifier.classification` of anything offering
                                                 ``decision_tree_value(feature)`` and
                                                 :meth:`~OutlierGroupClassifier.classification_of` parallel lists of
                                                 features and values.
:class:`NamedOutlierGroupClassifier`             a human readable :attr:`~NamedOutlierGroupClassifier.name` and a
                                                 :attr:`~NamedOutlierGroupClassifier.type` telling whether it is a tree
                                                 or a forest, along with the parameters it was built with.
:class:`DecisionTree`                            the :attr:`~DecisionTree.sha256` and
                                                 :attr:`~DecisionTree.generation_seconds_since_1970` of a trained
                                                 artifact.
:class:`PythonDecisionTree`                      :attr:`~PythonDecisionSubtree.python_code`, which renders the tree as
                                                 the body of a Python function along with the subtrees that must be
                                                 rendered as separate functions.
================================================ =======================================================================
"""

from abc import ABCMeta, abstractmethod

from dataclasses import dataclass
from typing import Sequence, Union

from skystreak.features.feature import Feature
from skystreak.classification.params import DecisionTreeParams, DecisionForestParams
from skystreak._typing import DecisionValueSource


@dataclass(frozen=True)
class TreeClassifierType:
    """
    Tags a classifier as a single decision tree
    """

    params: DecisionTreeParams


@dataclass(frozen=True)
class ForestClassifierType:
    """
    Tags a classifier as a forest of decision trees
    """

    params: DecisionForestParams


ClassifierType = Union[TreeClassifierType, ForestClassifierType]
"""
The kinds of named classifier
"""


def lookup_value(feature: Feature, features: Sequence[Feature], values: Sequence[float]) -> float:
    """
    Find the value of `feature` in parallel lists of features and values.

    :raises ValueError: if the lists differ in length or `feature` is not in `features`
    """

    if len(features) != len(values):
        raise ValueError(f'{len(features)} features were given with {len(values)} values')

    for candidate, value in zip(features, values):
        if candidate == feature:
            return value

    raise ValueError(f'cannot find {feature.value} in the supplied features')


class OutlierGroupClassifier(metaclass=ABCMeta):
    """
    Scores outlier groups between -1 (keep) and 1 (paint).
    """

    @abstractmethod
    def classification(self, group: DecisionValueSource) -> float:
        """
        Score a group.

        :param group: an outlier group, feature vector, or anything else offering ``decision_tree_value(feature)``
        :return: the score between -1 and 1
        """
        pass

    @abstractmethod
    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        """
        Score a group described by parallel lists of features and values, in any order.

        :param features: the features, parallel to `values`
        :param values: the value of each feature in `features`
        :return: the score between -1 and 1
        """
        pass


class NamedOutlierGroupClassifier(OutlierGroupClassifier, metaclass=ABCMeta):
    """
    A classifier with a name and a record of how it was built.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        A human readable name for the classifier
        """
        pass

    @property
    @abstractmethod
    def type(self) -> ClassifierType:
        """
        Whether this is a tree or a forest, along with the parameters used to build it
        """
        pass


class DecisionTree(NamedOutlierGroupClassifier, metaclass=ABCMeta):
    """
    A trained classifier that records where it came from.
    """

    @property
    @abstractmethod
    def sha256(self) -> str:
        """
        The hex digest identifying the training inputs of this tree
        """
        pass

    @property
    @abstractmethod
    def generation_seconds_since_1970(self) -> float:
        """
        When the tree was generated, in seconds since the unix epoch
        """
        pass


class PythonDecisionSubtree(metaclass=ABCMeta):
    """
    Something that can render itself as Python source.
    """

    @property
    @abstractmethod
    def python_code(self) -> tuple[str, list["PythonDecisionSubtree"]]:
        """
        The rendered source along with any subtrees it calls, which must be rendered alongside it.

        For tree nodes the source is a block of statements, unindented, that returns the score given a ``group`` in
        scope.  For subtrees it is a complete function definition.
        """
        pass


class PythonDecisionTree(OutlierGroupClassifier, PythonDecisionSubtree, metaclass=ABCMeta):
    """
    A classifier that can render itself as Python source doing the same classification.
    """
    pass
