"""
test_tree_nodes
===============

Tests the decision tree nodes contained in the tree_nodes submodule of skystreak.classification.
"""

from unittest import TestCase
import textwrap

from skystreak.features import Feature, OutlierGroupFeatureData
from skystreak.classification import (FullyPositiveTreeNode, FullyNegativeTreeNode, LinearChoiceTreeNode,
                                      DecisionTreeNode, DecisionSubtree)
from skystreak.classification.generated import collect_subtree_code
from skystreak.classification.tree_nodes import python_literal, INDENT


def compile_tree(tree):
    """
    Turn the generated source of a tree into a callable taking a group.
    """

    body, subtrees = tree.python_code

    source = "def classify(group):\n" + textwrap.indent(body, INDENT) + "\n\n" + "\n\n".join(
        collect_subtree_code(subtrees))

    namespace = {"Feature": Feature}
    exec(source, namespace)

    return namespace["classify"]


def group_of(**values):
    features = [Feature[name] for name in values]
    return OutlierGroupFeatureData(features, list(values.values()))


class TestLeaves(TestCase):

    def test_fully_positive(self):

        node = FullyPositiveTreeNode()

        self.assertEqual(node.classification(group_of(SIZE=0.4)), 1.0)
        self.assertEqual(node.classification_of([], []), 1.0)
        self.assertEqual(node.python_code, ("return 1.0", []))

    def test_fully_negative(self):

        node = FullyNegativeTreeNode(indent=3)

        self.assertEqual(node.indent, 3)
        self.assertEqual(node.classification(group_of(SIZE=0.4)), -1.0)
        self.assertEqual(node.python_code, ("return -1.0", []))

    def test_linear_choice(self):

        node = LinearChoiceTreeNode(Feature.MAX_BRIGHTNESS, 0, 100)

        self.assertEqual(node.classification(group_of(MAX_BRIGHTNESS=0)), -1.0)
        self.assertEqual(node.classification(group_of(MAX_BRIGHTNESS=50)), 0.0)
        self.assertEqual(node.classification(group_of(MAX_BRIGHTNESS=75)), 0.5)
        self.assertEqual(node.classification_of([Feature.SIZE, Feature.MAX_BRIGHTNESS], [1, 100]), 1.0)

        self.assertAlmostEqual(compile_tree(node)(group_of(MAX_BRIGHTNESS=25)), -0.5)

    def test_linear_choice_empty_range(self):

        with self.assertRaises(ValueError):
            LinearChoiceTreeNode(Feature.SIZE, 2, 2)

    def test_missing_feature(self):

        node = LinearChoiceTreeNode(Feature.MAX_BRIGHTNESS, 0, 100)

        with self.assertRaises(ValueError):
            node.classification_of([Feature.SIZE], [0.5])

        with self.assertRaises(ValueError):
            node.classification_of([Feature.MAX_BRIGHTNESS], [0.5, 0.2])


class TestPythonLiteral(TestCase):

    def test_finite(self):

        self.assertEqual(python_literal(0.1), "0.1")
        self.assertEqual(python_literal(3), "3.0")
        self.assertEqual(eval(python_literal(1 / 3)), 1 / 3)

    def test_infinite(self):

        self.assertEqual(python_literal(float('inf')), "float('inf')")
        self.assertEqual(eval(python_literal(float('-inf'))), float('-inf'))


class TestDecisionTreeNode(TestCase):

    def setUp(self):

        self.tree = DecisionTreeNode(Feature.SIZE, 0.5,
                                     FullyNegativeTreeNode(1), 0,
                                     LinearChoiceTreeNode(Feature.MAX_BRIGHTNESS, 0, 100, 1), 0,
                                     indent=0, new_method_level=4)

    def test_classification(self):

        self.assertEqual(self.tree.classification(group_of(SIZE=0.2, MAX_BRIGHTNESS=75)), -1.0)
        self.assertEqual(self.tree.classification(group_of(SIZE=0.6, MAX_BRIGHTNESS=75)), 0.5)

        # the split value itself goes to the greater than side
        self.assertEqual(self.tree.classification(group_of(SIZE=0.5, MAX_BRIGHTNESS=100)), 1.0)

        self.assertEqual(self.tree.classification_of([Feature.MAX_BRIGHTNESS, Feature.SIZE], [25, 0.9]), -0.5)

    def test_generated_code_matches(self):

        classify = compile_tree(self.tree)

        for size in (0.0, 0.25, 0.5, 0.75):
            for brightness in (0, 30, 100):
                group = group_of(SIZE=size, MAX_BRIGHTNESS=brightness)
                with self.subTest(size=size, brightness=brightness):
                    self.assertAlmostEqual(classify(group), self.tree.classification(group))

    def test_code_shape(self):

        code, subtrees = self.tree.python_code

        self.assertEqual(subtrees, [])
        self.assertTrue(code.startswith("if group.decision_tree_value(Feature.SIZE) < 0.5:\n    return -1.0\nelse:\n"))

    def test_stump(self):

        stump = DecisionTreeNode(Feature.SIZE, 0.5, FullyNegativeTreeNode(1), -0.5, FullyPositiveTreeNode(1), 0.75,
                                 indent=0, new_method_level=1, stump=True)

        self.assertEqual(stump.classification(group_of(SIZE=0.1)), -0.5)
        self.assertEqual(stump.classification_of([Feature.SIZE], [0.9]), 0.75)

        code, subtrees = stump.python_code

        self.assertEqual(subtrees, [])
        self.assertIn("return -0.5", code)
        self.assertIn("return 0.75", code)
        self.assertEqual(compile_tree(stump)(group_of(SIZE=0.1)), -0.5)

    def test_subtree_split(self):

        deepest = DecisionTreeNode(Feature.WIDTH, 0.3, FullyNegativeTreeNode(3), 0, FullyPositiveTreeNode(3), 0,
                                   indent=2, new_method_level=2)
        middle = DecisionTreeNode(Feature.HEIGHT, 0.2, deepest, 0, FullyPositiveTreeNode(2), 0,
                                  indent=1, new_method_level=2)
        root = DecisionTreeNode(Feature.SIZE, 0.1, FullyNegativeTreeNode(1), 0, middle, 0,
                                indent=0, new_method_level=2)

        code, subtrees = root.python_code

        self.assertEqual(len(subtrees), 1)
        self.assertIsInstance(subtrees[0], DecisionSubtree)
        self.assertTrue(subtrees[0].method_name.startswith("subtree_"))
        self.assertIn(f"return {subtrees[0].method_name}(group)", code)

        subtree_code, further = subtrees[0].python_code
        self.assertEqual(further, [])
        self.assertTrue(subtree_code.startswith(f"def {subtrees[0].method_name}(group):\n    if "))

        classify = compile_tree(root)

        for size, height, width in [(0.0, 0, 0), (0.5, 0.1, 0.1), (0.5, 0.1, 0.5), (0.5, 0.9, 0.0)]:
            group = group_of(SIZE=size, HEIGHT=height, WIDTH=width)
            with self.subTest(size=size, height=height, width=width):
                self.assertEqual(classify(group), root.classification(group))

    def test_bad_new_method_level(self):

        with self.assertRaises(ValueError):
            DecisionTreeNode(Feature.SIZE, 0.5, FullyNegativeTreeNode(), 0, FullyPositiveTreeNode(), 0,
                             indent=0, new_method_level=0)


if __name__ == '__main__':
    import unittest
    unittest.main()
