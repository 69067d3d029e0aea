"""
This module provides classifiers combining the scores of several trees.
"""

from typing import NamedTuple, Sequence

from skystreak.features.feature import Feature
from skystreak.classification.classifier import (OutlierGroupClassifier, NamedOutlierGroupClassifier,
                                                 ForestClassifierType, ClassifierType)
from skystreak.classification.params import DecisionForestParams
from skystreak._typing import DecisionValueSource


class TreeForestResult(NamedTuple):
    """
    A tree of a forest along with how well it scored against test data, which weights its vote.
    """

    tree: OutlierGroupClassifier
    """
    The classifier
    """

    test_score: float
    """
    The weight of the classifier
    """


class ForestClassifier(OutlierGroupClassifier):
    """
    Scores a group as the mean of the weighted scores of its trees.

    The weighted sum is divided by the number of trees rather than the sum of weights, so trees that did poorly against
    test data pull the score towards 0.
    """

    def __init__(self, trees: Sequence[TreeForestResult]) -> None:
        """
        :param trees: the trees of the forest with their weights
        :raises ValueError: if `trees` is empty
        """

        if not trees:
            raise ValueError('a forest needs at least one tree')

        self.trees: tuple[TreeForestResult, ...] = tuple(TreeForestResult(*result) for result in trees)

    def classification(self, group: DecisionValueSource) -> float:
        total = sum(result.tree.classification(group) * result.test_score for result in self.trees)
        return total / len(self.trees)

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        total = sum(result.tree.classification_of(features, values) * result.test_score for result in self.trees)
        return total / len(self.trees)


class DecisionForest(ForestClassifier, NamedOutlierGroupClassifier):
    """
    A named forest.

    Trees that are themselves named contribute their name to :attr:`type`, others are named by their position.
    """

    def __init__(self, name: str, trees: Sequence[TreeForestResult]) -> None:
        """
        :param name: the name of the forest
        :param trees: the trees of the forest with their weights
        """

        super().__init__(trees)

        self._name: str = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> ClassifierType:
        tree_names = tuple(result.tree.name if isinstance(result.tree, NamedOutlierGroupClassifier) else str(index)
                           for index, result in enumerate(self.trees))
        return ForestClassifierType(DecisionForestParams(self._name, len(self.trees), tree_names))
