"""
This package scores outlier groups between -1 (keep) and 1 (paint).

:mod:`.classifier` defines the classifier interfaces, :mod:`.tree_nodes` and :mod:`.forest` the trained trees and
forests, :mod:`.generated` the export of trees as standalone Python modules, and :mod:`.registry` a lookup table of
named classifiers.
"""

from skystreak.classification.params import DecisionSplitType, DecisionTreeParams, DecisionForestParams
from skystreak.classification.classifier import (OutlierGroupClassifier, NamedOutlierGroupClassifier, DecisionTree,
                                                 PythonDecisionTree, PythonDecisionSubtree, TreeClassifierType,
                                                 ForestClassifierType, ClassifierType, lookup_value)
from skystreak.classification.tree_nodes import (FullyPositiveTreeNode, FullyNegativeTreeNode, LinearChoiceTreeNode,
                                                 DecisionTreeNode, DecisionSubtree)
from skystreak.classification.forest import TreeForestResult, ForestClassifier, DecisionForest
from skystreak.classification.generated import (GeneratedDecisionTree, DecisionTreeStruct, decision_tree_sha256,
                                                render_classifier_module, generate_decision_tree_struct,
                                                load_classifier_module)
from skystreak.classification.registry import ClassifierRegistry

__all__ = ["DecisionSplitType", "DecisionTreeParams", "DecisionForestParams", "OutlierGroupClassifier",
           "NamedOutlierGroupClassifier", "DecisionTree", "PythonDecisionTree", "PythonDecisionSubtree",
           "TreeClassifierType", "ForestClassifierType", "ClassifierType", "lookup_value", "FullyPositiveTreeNode",
           "FullyNegativeTreeNode", "LinearChoiceTreeNode", "DecisionTreeNode", "DecisionSubtree", "TreeForestResult",
           "ForestClassifier", "DecisionForest", "GeneratedDecisionTree", "DecisionTreeStruct",
           "decision_tree_sha256", "render_classifier_module", "generate_decision_tree_struct",
           "load_classifier_module", "ClassifierRegistry"]
