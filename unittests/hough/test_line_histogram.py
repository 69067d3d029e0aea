"""
test_line_histogram
===================

Tests the HoughLineHistogram class contained in the line_histogram submodule of skystreak.hough.
"""

from unittest import TestCase

import numpy as np
import numpy.testing as npt

from skystreak.hough import HoughLine, HoughLineHistogram


class TestHoughLineHistogram(TestCase):

    def setUp(self):

        self.histogram = HoughLineHistogram(10, [HoughLine(5, 0, 10), HoughLine(15, 3, 20)], 10)

    def test_buckets(self):

        expected = np.zeros(36)
        expected[0] = 1.0
        expected[1] = 2.0

        npt.assert_array_equal(self.histogram.values, expected)

    def test_max_theta(self):

        self.assertEqual(self.histogram.max_theta, 10)

    def test_max_theta_empty(self):

        self.assertEqual(HoughLineHistogram(5, [], 4).max_theta, 0)

    def test_max_theta_tie(self):

        histogram = HoughLineHistogram(45, [HoughLine(100, 0, 4), HoughLine(300, 0, 4)], 1)

        self.assertEqual(histogram.max_theta, 90)

    def test_lines_share_bucket(self):

        histogram = HoughLineHistogram(90, [HoughLine(0, 0, 1), HoughLine(89.9, 0, 3), HoughLine(359, 0, 2)], 2)

        npt.assert_array_almost_equal(histogram.values, [2.0, 0, 0, 1.0])

    def test_match_score_symmetric(self):

        other = HoughLineHistogram(10, [HoughLine(12, 0, 5), HoughLine(200, 0, 50)], 10)

        self.assertEqual(self.histogram.match_score(other), other.match_score(self.histogram))
        self.assertEqual(self.histogram.match_score(other), 0.5)

    def test_match_score_self(self):

        self.assertEqual(self.histogram.match_score(self.histogram), self.histogram.values.max())

    def test_match_score_different_increments(self):

        other = HoughLineHistogram(5, [HoughLine(5, 0, 10), HoughLine(15, 3, 20)], 10)

        self.assertEqual(self.histogram.match_score(other), 0)
        self.assertEqual(other.match_score(self.histogram), 0)

    def test_bad_increment(self):

        with self.assertRaises(ValueError):
            HoughLineHistogram(7, [], 1)

        with self.assertRaises(ValueError):
            HoughLineHistogram(0, [], 1)

    def test_bad_group_size(self):

        with self.assertRaises(ValueError):
            HoughLineHistogram(10, [], 0)

    def test_theta_out_of_range(self):

        with self.assertRaises(ValueError):
            HoughLineHistogram(10, [HoughLine(5, 0, 1), HoughLine(-5, 0, 1)], 1)

        with self.assertRaises(ValueError):
            HoughLineHistogram(10, [HoughLine(360, 0, 1)], 1)

    def test_values_read_only(self):

        with self.assertRaises(ValueError):
            self.histogram.values[0] = 3


if __name__ == '__main__':
    import unittest
    unittest.main()
