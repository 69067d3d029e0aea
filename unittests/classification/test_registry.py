"""
test_registry
=============

Tests the ClassifierRegistry class contained in the registry submodule of skystreak.classification.
"""

from unittest import TestCase
from pathlib import Path
import tempfile

from skystreak.classification import (ClassifierRegistry, DecisionTreeParams, FullyPositiveTreeNode,
                                      FullyNegativeTreeNode, GeneratedDecisionTree, generate_decision_tree_struct)


def make_struct(positive_size, tree=None):
    return generate_decision_tree_struct(tree or FullyPositiveTreeNode(),
                                         DecisionTreeParams("tree", positive_training_size=positive_size,
                                                            decision_types=()),
                                         generation_seconds_since_1970=0)


class TestClassifierRegistry(TestCase):

    def test_register_by_name(self):

        registry = ClassifierRegistry()
        struct = make_struct(1)

        self.assertTrue(registry.register(struct))

        self.assertIn(struct.name, registry)
        self.assertIs(registry.get(struct.name), struct)
        self.assertEqual(registry.names, [struct.name])
        self.assertEqual(len(registry), 1)
        self.assertEqual(list(registry), [struct])

    def test_prefix_lookup(self):

        registry = ClassifierRegistry()
        first = make_struct(1)
        second = make_struct(2)

        registry.register(first, "abc123")
        registry.register(second, "abd456")

        self.assertIs(registry.get("abc"), first)
        self.assertIs(registry.get("abd4"), second)
        self.assertIs(registry.get("abd456"), second)

        with self.assertRaises(ValueError):
            registry.get("ab")

        with self.assertRaises(KeyError):
            registry.get("xyz")

    def test_exact_key_beats_prefix(self):

        registry = ClassifierRegistry()
        first = make_struct(1)

        registry.register(first, "abc")
        registry.register(make_struct(2), "abcd")

        self.assertIs(registry.get("abc"), first)

    def test_duplicate(self):

        registry = ClassifierRegistry()
        first = make_struct(1)

        registry.register(first, "same")

        with self.assertLogs('skystreak.classification.registry', 'ERROR'):
            self.assertFalse(registry.register(make_struct(2), "same"))

        self.assertIs(registry.get("same"), first)

    def test_load_directory(self):

        with tempfile.TemporaryDirectory() as directory:

            positive = make_struct(1)
            negative = make_struct(2, FullyNegativeTreeNode())

            positive.write(directory)
            negative.write(directory)
            (Path(directory) / "unrelated.py").write_text("raise RuntimeError('not a classifier')\n")

            registry = ClassifierRegistry()

            self.assertEqual(registry.load_directory(directory), 2)

            self.assertEqual(sorted(registry.names), sorted([positive.name, negative.name]))

            loaded = registry.get(negative.name)
            self.assertIsInstance(loaded, GeneratedDecisionTree)
            self.assertEqual(loaded.classification_of([], []), -1.0)

            # loading again registers nothing new
            with self.assertLogs('skystreak.classification.registry', 'ERROR'):
                self.assertEqual(registry.load_directory(directory), 0)


if __name__ == '__main__':
    import unittest
    unittest.main()
