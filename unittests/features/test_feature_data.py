"""
test_feature_data
=================

Tests the OutlierFeatureData and OutlierGroupFeatureData classes contained in the feature_data submodule of
skystreak.features.
"""

from unittest import TestCase

from skystreak.features import Feature, FEATURE_COUNT, OutlierFeatureData, OutlierGroupFeatureData


class TestOutlierFeatureData(TestCase):

    def test_from_generator(self):

        calls = []

        def generator(index):
            calls.append(index)
            return index * 0.5

        data = OutlierFeatureData.from_generator(generator)

        self.assertEqual(calls, list(range(FEATURE_COUNT)))
        self.assertEqual(len(data), FEATURE_COUNT)
        self.assertEqual(data.decision_tree_value(Feature.WIDTH), 0.5)
        self.assertEqual(data.decision_tree_value(Feature.PIXEL_BORDER_AMOUNT), 15.5)

    def test_wrong_length(self):

        with self.assertRaises(ValueError):
            OutlierFeatureData([1.0, 2.0])

    def test_raw_values(self):

        raw = OutlierFeatureData.raw_values()

        self.assertEqual(raw, [0.0] * FEATURE_COUNT)

        raw[0] = 3
        self.assertEqual(OutlierFeatureData.raw_values()[0], 0.0)

    def test_immutable(self):

        values = [1.0] * FEATURE_COUNT
        data = OutlierFeatureData(values)

        values[0] = 2.0

        self.assertEqual(data.values[0], 1.0)
        with self.assertRaises(AttributeError):
            data.extra = 1

    def test_equality(self):

        self.assertEqual(OutlierFeatureData([1.0] * FEATURE_COUNT), OutlierFeatureData([1] * FEATURE_COUNT))
        self.assertNotEqual(OutlierFeatureData([1.0] * FEATURE_COUNT), OutlierFeatureData([0.0] * FEATURE_COUNT))


class TestOutlierGroupFeatureData(TestCase):

    def test_absent_is_zero(self):

        data = OutlierGroupFeatureData([Feature.MAX_OVERLAP], [0.75])

        for feature in Feature:
            with self.subTest(feature=feature):
                if feature is Feature.MAX_OVERLAP:
                    self.assertEqual(data.decision_tree_value(feature), 0.75)
                else:
                    self.assertEqual(data.decision_tree_value(feature), 0.0)

    def test_order_independent(self):

        forward = OutlierGroupFeatureData([Feature.SIZE, Feature.HEIGHT, Feature.MAX_BRIGHTNESS], [0.1, 0.2, 0.3])
        backward = OutlierGroupFeatureData([Feature.MAX_BRIGHTNESS, Feature.HEIGHT, Feature.SIZE], [0.3, 0.2, 0.1])

        self.assertEqual(forward, backward)
        self.assertEqual(backward.decision_tree_value(Feature.SIZE), 0.1)
        self.assertEqual(backward.values[Feature.MAX_BRIGHTNESS.sort_order], 0.3)

    def test_last_duplicate_wins(self):

        data = OutlierGroupFeatureData([Feature.SIZE, Feature.SIZE], [1.0, 2.0])

        self.assertEqual(data.decision_tree_value(Feature.SIZE), 2.0)

    def test_mismatched_lengths(self):

        with self.assertRaises(ValueError):
            OutlierGroupFeatureData([Feature.SIZE], [1.0, 2.0])


if __name__ == '__main__':
    import unittest
    unittest.main()
