"""
test_circular_mask
==================

Tests the CircularMask and PaintMask classes contained in the circular_mask submodule of skystreak.geometry.
"""

from unittest import TestCase

import numpy as np

from skystreak.geometry import CircularMask, PaintMask, window_distances


class TestWindowDistances(TestCase):

    def test_geometry(self):

        size, center, distances = window_distances(2)

        self.assertEqual(size, 7)
        self.assertEqual(center, 3)
        self.assertEqual(distances.shape, (7, 7))
        self.assertEqual(distances[3, 3], 0)
        self.assertAlmostEqual(distances[3, 6], 3)
        self.assertAlmostEqual(distances[0, 0], np.sqrt(18))

    def test_negative_radius(self):

        with self.assertRaises(ValueError):
            window_distances(-1)


class TestCircularMask(TestCase):

    def test_radius_zero(self):

        mask = CircularMask(0)

        self.assertEqual(mask.size, 3)
        self.assertEqual(mask.center, 1)
        self.assertEqual(mask.member_count, 0)

    def test_radius_one(self):

        mask = CircularMask(1)

        self.assertEqual(mask.size, 5)
        self.assertEqual(mask.member_count, 1)
        self.assertTrue(mask.contains(2, 2))
        self.assertFalse(mask.contains(3, 2))

    def test_radius_two(self):

        mask = CircularMask(2)

        self.assertEqual(mask.size, 7)
        self.assertEqual(mask.center, 3)

        # the center, its 4 edge neighbors and its 4 diagonal neighbors
        self.assertEqual(mask.member_count, 9)

        self.assertTrue(mask.contains(4, 4))
        # exactly on the radius is outside
        self.assertFalse(mask.contains(5, 3))
        self.assertFalse(mask.contains(-1, 3))
        self.assertFalse(mask.contains(7, 3))

    def test_values_read_only(self):

        mask = CircularMask(3)

        with self.assertRaises(ValueError):
            mask.values[0, 0] = True

    def test_iterate_column_major(self):

        mask = CircularMask(2)

        visited = []
        mask.iterate(lambda x, y: visited.append((x, y)))

        self.assertEqual(len(visited), 9)
        self.assertEqual(visited[:3], [(2, 2), (2, 3), (2, 4)])
        self.assertEqual(set(visited), {(x, y) for y, x in zip(*np.nonzero(mask.values))})

    def test_equality(self):

        self.assertEqual(CircularMask(4), CircularMask(4))
        self.assertNotEqual(CircularMask(4), CircularMask(5))


class TestPaintMask(TestCase):

    def test_opacity(self):

        mask = PaintMask(1, 3)

        self.assertEqual(mask.size, 9)
        self.assertEqual(mask.center, 4)

        self.assertEqual(mask.opacity(4, 4), 1.0)
        self.assertAlmostEqual(mask.opacity(6, 4), 0.5)
        self.assertEqual(mask.opacity(7, 4), 0.0)
        self.assertEqual(mask.opacity(-3, 4), 0.0)

        self.assertTrue(((mask.pixels >= 0) & (mask.pixels <= 1)).all())

    def test_no_fade(self):

        mask = PaintMask(2, 2)

        self.assertEqual(mask.opacity(mask.center + 1, mask.center), 1.0)
        self.assertEqual(mask.opacity(mask.center + 2, mask.center), 0.0)

    def test_inner_wall_too_big(self):

        with self.assertRaises(ValueError):
            PaintMask(3, 1)


if __name__ == '__main__':
    import unittest
    unittest.main()
