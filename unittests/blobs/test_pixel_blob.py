"""
test_pixel_blob
===============

Tests the PixelBlob class contained in the blob submodule of skystreak.blobs.
"""

from unittest import TestCase

import numpy.testing as npt

from skystreak.blobs import Blob, PixelBlob, PixelBlobOptions


class TestPixelBlob(TestCase):

    def test_protocol(self):

        self.assertIsInstance(PixelBlob(1, [(0, 0)]), Blob)

    def test_from_mapping(self):

        blob = PixelBlob(4, {(1, 1): 10, (2, 1): 20, (2, 2): 40})

        self.assertEqual(blob.blob_id, 4)
        self.assertEqual(blob.pixels, [(1, 1), (2, 1), (2, 2)])
        self.assertEqual(blob.size, 3)
        self.assertEqual(blob.intensity, 23)
        self.assertIn((2, 2), blob)
        self.assertNotIn((1, 2), blob)

        npt.assert_array_equal(blob.pixel_values, [[10, 20], [0, 40]])

    def test_from_pixels(self):

        blob = PixelBlob(1, [(0, 0), (0, 1)])

        self.assertEqual(blob.intensities, {(0, 0): 0, (0, 1): 0})
        self.assertEqual(blob.bounding_box.height, 2)

    def test_absorb(self):

        first = PixelBlob(1, {(0, 0): 5, (1, 0): 5})
        second = PixelBlob(2, {(1, 0): 9, (2, 0): 7})

        self.assertTrue(first.absorb(second))

        self.assertEqual(first.pixels, [(0, 0), (1, 0), (2, 0)])
        # existing pixels keep their intensity
        self.assertEqual(first.intensities[(1, 0)], 5)
        self.assertEqual(first.intensities[(2, 0)], 7)
        self.assertEqual(first.bounding_box.width, 3)

    def test_absorb_self(self):

        blob = PixelBlob(1, [(0, 0)])

        self.assertFalse(blob.absorb(blob))
        self.assertFalse(blob.absorb(PixelBlob(1, [(5, 5)])))
        self.assertEqual(blob.size, 1)

    def test_absorb_too_big(self):

        blob = PixelBlob(1, [(0, 0), (1, 0)], options=PixelBlobOptions(max_absorbed_size=3))

        self.assertFalse(blob.absorb(PixelBlob(2, [(2, 0), (3, 0)])))
        self.assertEqual(blob.size, 2)

        # only new pixels count towards the limit
        self.assertTrue(blob.absorb(PixelBlob(3, [(1, 0), (2, 0)])))
        self.assertEqual(blob.size, 3)

    def test_reset_settings(self):

        blob = PixelBlob(1, [(0, 0)], options=PixelBlobOptions(max_absorbed_size=3))

        blob.max_absorbed_size = 100
        blob.reset_settings()

        self.assertEqual(blob.max_absorbed_size, 3)

    def test_identity(self):

        self.assertNotEqual(PixelBlob(1, [(0, 0)]), PixelBlob(1, [(0, 0)]))
        self.assertEqual(len({PixelBlob(1, [(0, 0)]), PixelBlob(1, [(0, 0)])}), 2)


if __name__ == '__main__':
    import unittest
    unittest.main()
