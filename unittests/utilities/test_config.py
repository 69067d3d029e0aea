"""
test_config
===========

Tests the Config class contained in the config module of skystreak.
"""

from unittest import TestCase
from pathlib import Path
import json
import tempfile

from skystreak import Config
from skystreak.config import sixteen_bit_version


class TestConfig(TestCase):

    def setUp(self):

        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name)

    def tearDown(self):

        self._tmp.cleanup()

    def test_sixteen_bit_version(self):

        self.assertEqual(sixteen_bit_version(100), 0xFFFF)
        self.assertEqual(sixteen_bit_version(50), 32767)
        self.assertEqual(Config(outlier_max_threshold=50).max_pixel_distance, 32767)

    def test_round_trip(self):

        config = Config(outlier_max_threshold=13.0, min_group_size=150, max_concurrent_tasks=3,
                        image_sequence_dirname="LRT_00001")

        filename = self.directory / "config.json"

        self.assertTrue(config.write_json(filename))
        self.assertEqual(Config.read(filename), config)

    def test_no_overwrite(self):

        filename = self.directory / "config.json"

        Config(min_group_size=1).write_json(filename)

        with self.assertLogs('skystreak.config', 'WARNING'):
            self.assertFalse(Config(min_group_size=2).write_json(filename))

        self.assertEqual(Config.read(filename).min_group_size, 1)

    def test_unknown_setting(self):

        filename = self.directory / "config.json"
        filename.write_text(json.dumps({"min_group_size": 3, "paint_color": "red"}))

        with self.assertRaises(ValueError):
            Config.read(filename)

    def test_not_an_object(self):

        filename = self.directory / "config.json"
        filename.write_text("[1, 2]")

        with self.assertRaises(ValueError):
            Config.read(filename)

    def test_missing_file(self):

        with self.assertRaises(OSError):
            Config.read(self.directory / "nothing.json")


if __name__ == '__main__':
    import unittest
    unittest.main()
