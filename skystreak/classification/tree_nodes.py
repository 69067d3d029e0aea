"""
This module provides the nodes trained decision trees are built from.

Every node can both classify directly and render itself as Python source doing the same thing.  Rendered source is a
block of statements returning the score for a ``group`` in scope, with ``Feature`` imported.  Deep trees are split
into separate functions every :attr:`DecisionTreeNode.new_method_level` levels so no single generated function grows
unmanageably long.
"""

import math
import textwrap
import uuid

from typing import Sequence

from skystreak.features.feature import Feature
from skystreak.classification.classifier import PythonDecisionTree, PythonDecisionSubtree, lookup_value
from skystreak._typing import DecisionValueSource


INDENT: str = "    "
"""
One level of indentation in generated source
"""


def python_literal(value: float) -> str:
    """
    Render a float as a Python expression that evaluates back to exactly `value`.
    """

    value = float(value)
    if math.isfinite(value):
        return repr(value)
    return f"float('{value}')"


def _indented(code: str) -> str:
    return textwrap.indent(code, INDENT)


def _feature_access(feature: Feature) -> str:
    return f"group.decision_tree_value(Feature.{feature.name})"


class FullyPositiveTreeNode(PythonDecisionTree):
    """
    A leaf that always scores 1 (paint).
    """

    def __init__(self, indent: int = 0) -> None:
        """
        :param indent: the depth of this node in its tree
        """
        self.indent: int = indent

    def classification(self, group: DecisionValueSource) -> float:
        return 1.0

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        return 1.0

    @property
    def python_code(self) -> tuple[str, list[PythonDecisionSubtree]]:
        return "return 1.0", []


class FullyNegativeTreeNode(PythonDecisionTree):
    """
    A leaf that always scores -1 (keep).
    """

    def __init__(self, indent: int = 0) -> None:
        """
        :param indent: the depth of this node in its tree
        """
        self.indent: int = indent

    def classification(self, group: DecisionValueSource) -> float:
        return -1.0

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        return -1.0

    @property
    def python_code(self) -> tuple[str, list[PythonDecisionSubtree]]:
        return "return -1.0", []


class LinearChoiceTreeNode(PythonDecisionTree):
    """
    A leaf that maps a feature value linearly onto a score, -1 at :attr:`min` and 1 at :attr:`max`.

    Values outside of ``[min, max]`` give scores outside of ``[-1, 1]``.
    """

    def __init__(self, feature: Feature, min_value: float, max_value: float, indent: int = 0) -> None:
        """
        :param feature: the feature deciding the score
        :param min_value: the value scoring -1
        :param max_value: the value scoring 1
        :param indent: the depth of this node in its tree
        :raises ValueError: if `min_value` and `max_value` are equal
        """

        if min_value == max_value:
            raise ValueError(f'the range of a linear choice on {feature.value} must not be empty, got {min_value}')

        self.feature: Feature = feature
        self.min: float = float(min_value)
        self.max: float = float(max_value)
        self.indent: int = indent

    def _score(self, value: float) -> float:
        return (value - self.min) / (self.max - self.min) * 2 - 1

    def classification(self, group: DecisionValueSource) -> float:
        return self._score(group.decision_tree_value(self.feature))

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        return self._score(lookup_value(self.feature, features, values))

    @property
    def python_code(self) -> tuple[str, list[PythonDecisionSubtree]]:
        minimum = python_literal(self.min)
        maximum = python_literal(self.max)
        return f"return ({_feature_access(self.feature)} - {minimum}) / ({maximum} - {minimum}) * 2 - 1", []


class DecisionSubtree(PythonDecisionSubtree):
    """
    Renders the branch below a :class:`DecisionTreeNode` as a function of its own.
    """

    def __init__(self, root_node: "DecisionTreeNode") -> None:
        self.root_node: DecisionTreeNode = root_node
        self.method_name: str = f"subtree_{uuid.uuid4().hex}"

    @property
    def python_code(self) -> tuple[str, list[PythonDecisionSubtree]]:
        body, further_subtrees = self.root_node.further_recurse_python_code
        return f"def {self.method_name}(group):\n{_indented(body)}\n", further_subtrees


class DecisionTreeNode(PythonDecisionTree):
    """
    A branch comparing one feature against a split value.

    Values less than :attr:`value` go to :attr:`less_than`, everything else to :attr:`greater_than`.  A stump ends the
    tree here, returning :attr:`less_than_stump_value` or :attr:`greater_than_stump_value` instead of descending.
    """

    def __init__(self, feature: Feature, value: float,
                 less_than: PythonDecisionTree, less_than_stump_value: float,
                 greater_than: PythonDecisionTree, greater_than_stump_value: float,
                 indent: int, new_method_level: int, stump: bool = False) -> None:
        """
        :param feature: the feature to split on
        :param value: the split value
        :param less_than: the branch for values less than `value`
        :param less_than_stump_value: the score of the less than side when this node is a stump
        :param greater_than: the branch for values greater than or equal to `value`
        :param greater_than_stump_value: the score of the greater than side when this node is a stump
        :param indent: the depth of this node in its tree
        :param new_method_level: how many levels deep generated code goes before starting a new function
        :param stump: whether to stop at this node
        :raises ValueError: if `new_method_level` is not positive
        """

        if new_method_level <= 0:
            raise ValueError(f'new_method_level must be positive, got {new_method_level}')

        self.feature: Feature = feature
        self.value: float = float(value)
        self.less_than: PythonDecisionTree = less_than
        self.less_than_stump_value: float = float(less_than_stump_value)
        self.greater_than: PythonDecisionTree = greater_than
        self.greater_than_stump_value: float = float(greater_than_stump_value)
        self.indent: int = indent
        self.new_method_level: int = new_method_level
        self.stump: bool = stump

    def _branch(self, feature_value: float) -> PythonDecisionTree | float:
        if self.stump:
            return self.less_than_stump_value if feature_value < self.value else self.greater_than_stump_value
        return self.less_than if feature_value < self.value else self.greater_than

    def classification(self, group: DecisionValueSource) -> float:
        branch = self._branch(group.decision_tree_value(self.feature))
        if isinstance(branch, float):
            return branch
        return branch.classification(group)

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        branch = self._branch(lookup_value(self.feature, features, values))
        if isinstance(branch, float):
            return branch
        return branch.classification_of(features, values)

    @property
    def further_recurse_python_code(self) -> tuple[str, list[PythonDecisionSubtree]]:
        """
        The source of this node as an ``if``/``else`` over the source of both branches
        """

        less_than_code, less_than_subtrees = self.less_than.python_code
        greater_than_code, greater_than_subtrees = self.greater_than.python_code

        code = (f"if {_feature_access(self.feature)} < {python_literal(self.value)}:\n"
                f"{_indented(less_than_code)}\n"
                f"else:\n"
                f"{_indented(greater_than_code)}")

        return code, less_than_subtrees + greater_than_subtrees

    @property
    def python_code(self) -> tuple[str, list[PythonDecisionSubtree]]:

        if self.stump:
            code = (f"if {_feature_access(self.feature)} < {python_literal(self.value)}:\n"
                    f"{INDENT}return {python_literal(self.less_than_stump_value)}\n"
                    f"else:\n"
                    f"{INDENT}return {python_literal(self.greater_than_stump_value)}")
            return code, []

        if self.indent != 0 and self.indent % self.new_method_level == 0:
            subtree = DecisionSubtree(self)
            return f"return {subtree.method_name}(group)", [subtree]

        return self.further_recurse_python_code
