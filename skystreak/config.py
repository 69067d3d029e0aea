"""
This module provides :class:`Config`, the settings of a whole run.

A config can be saved next to the output of a run with :meth:`Config.write_json` and read back with
:meth:`Config.read`, so a run can be reproduced.
"""

import json
import logging

from dataclasses import dataclass
from pathlib import Path

from skystreak.utilities.options import UserOptions
from skystreak._typing import PATH


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def sixteen_bit_version(percentage: float) -> int:
    """
    Convert a percentage of the full brightness range into a 16 bit pixel value.
    """
    return int((percentage / 100) * 0xFFFF)


@dataclass
class Config(UserOptions):
    """
    The settings of a run over one image sequence.
    """

    output_path: str = "."
    """
    The directory under which the output of the run is written
    """

    image_sequence_dirname: str = ""
    """
    The name of the directory holding the image sequence
    """

    image_sequence_path: str = ""
    """
    The path to the directory holding the image sequence
    """

    outlier_max_threshold: float = 0.0
    """
    How much brighter than its neighbors, as a percentage of the full range, a pixel must be to be an outlier
    """

    min_group_size: int = 0
    """
    The fewest pixels a group may have to be considered at all
    """

    max_concurrent_loads: int = 4
    """
    How many frames may be read from disk at once
    """

    max_concurrent_saves: int = 4
    """
    How many frames may be written to disk at once
    """

    max_concurrent_tasks: int | None = None
    """
    How many frames may be processed in their own tasks at once, ``None`` to base it on the processor count
    """

    histogram_degree_increment: int = 5
    """
    The bucket width in degrees of the Hough line histograms
    """

    outlier_group_paint_border_pixels: float = 12.0
    """
    How far past the edge of a painted group the paint extends
    """

    outlier_group_paint_border_inner_wall_pixels: float = 4.0
    """
    How much of the paint border is fully opaque before fading out
    """

    write_outlier_group_files: bool = False
    """
    Whether to write the training matrices of each frame
    """

    @property
    def max_pixel_distance(self) -> int:
        """
        :attr:`outlier_max_threshold` as a 16 bit pixel value
        """
        return sixteen_bit_version(self.outlier_max_threshold)

    @classmethod
    def read(cls, filename: PATH) -> "Config":
        """
        Read a config from a json file.

        :raises OSError: if the file cannot be read
        :raises ValueError: if the file is not valid json or names an unknown setting
        """

        with open(filename, 'r') as in_file:
            values = json.load(in_file)

        if not isinstance(values, dict):
            raise ValueError(f'{filename} does not hold a json object')

        config = cls.from_dict(values)

        _LOGGER.info(f'read config from {filename}')

        return config

    def write_json(self, filename: PATH) -> bool:
        """
        Write this config as json.

        An existing file is never overwritten.

        :return: ``False`` if the file already existed and was left alone
        :raises OSError: if the file cannot be written
        """

        path = Path(filename)

        if path.exists():
            _LOGGER.warning(f'cannot write to {path}, it already exists')
            return False

        _LOGGER.info(f'creating {path}')
        with path.open('w') as out_file:
            json.dump(self.to_dict(), out_file, indent=4)

        return True
