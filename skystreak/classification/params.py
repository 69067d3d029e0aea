"""
This module holds the parameters decision trees and forests are trained with.

Training itself happens elsewhere.  These only record how a classifier was built so it can be reported and reproduced.
"""

from dataclasses import dataclass, field
from enum import Enum

from skystreak.features.feature import Feature


class DecisionSplitType(Enum):
    """
    How the split value of a decision node is chosen from the training values of its feature.
    """

    MEDIAN = "median"
    """
    Split at the median value
    """

    MEAN = "mean"
    """
    Split at the mean value
    """


@dataclass(frozen=True)
class DecisionTreeParams:
    """
    The parameters a single decision tree was trained with.
    """

    name: str
    """
    The name of the tree
    """

    input_sequences: tuple[str, ...] = ()
    """
    The image sequences the training data came from
    """

    positive_training_size: int = 0
    """
    How many groups known to need painting were trained on
    """

    negative_training_size: int = 0
    """
    How many groups known not to need painting were trained on
    """

    decision_types: tuple[Feature, ...] = field(default_factory=lambda: tuple(Feature))
    """
    The features the tree was allowed to split on
    """

    decision_split_types: tuple[DecisionSplitType, ...] = (DecisionSplitType.MEDIAN,)
    """
    The ways the tree was allowed to pick split values
    """

    max_depth: int | None = None
    """
    The depth the tree was limited to, if any
    """

    pruned: bool = False
    """
    Whether the tree was pruned against test data after training
    """


@dataclass(frozen=True)
class DecisionForestParams:
    """
    The parameters a forest of decision trees was built with.
    """

    name: str
    """
    The name of the forest
    """

    tree_count: int
    """
    How many trees are in the forest
    """

    tree_names: tuple[str, ...] = ()
    """
    The names of the trees in the forest
    """
