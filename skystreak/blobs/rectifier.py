"""
This module provides the :class:`BlobRectifier` which merges blobs that share pixels.

Several independent detectors may find the same streak, producing blobs that overlap.  The rectifier keeps a reference
grid with one owning blob id per pixel.  Each blob is visited in turn and its pixels are scanned against the grid: the
first pixel already owned by a different blob picks the blob to merge into.  If that blob accepts the merge the visited
blob is dropped from the blob map and its pixels are pointed at the survivor, otherwise (or when nothing overlaps) the
visited blob claims whatever pixels are still unowned.

A single pass can under-merge.  When blob ``B`` bridges two blobs ``A`` and ``C`` that were both registered before it,
``B`` merges into one of them and the survivor now overlaps the other.  By default passes are repeated until one makes
no merges, which resolves such chains.  Set :attr:`~BlobRectifierOptions.max_passes` to 1 for the single pass behavior.

The rectifier is strictly sequential.  Run one rectifier per frame to work on frames in parallel.
"""

import logging

from dataclasses import dataclass
from typing import Mapping

import numpy as np

from skystreak.blobs.blob import Blob
from skystreak.utilities.options import UserOptions
from skystreak.utilities.mixin_classes import UserOptionConfigured
from skystreak._typing import PIXEL, INT_ARRAY


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


NO_BLOB: int = -1
"""
The reference grid value of a pixel no blob owns
"""


@dataclass
class BlobRectifierOptions(UserOptions):
    max_passes: int | None = None
    """
    The maximum number of passes over the blobs.

    Passes stop early once one makes no merges.  ``None`` means keep going until that happens, which always terminates
    since every merging pass removes at least one blob.
    """


class BlobRectifier(UserOptionConfigured[BlobRectifierOptions], BlobRectifierOptions):
    """
    Combines any overlapping blobs of a single frame.

    Example::

        rectifier = BlobRectifier({blob.blob_id: blob for blob in blobs}, width, height, frame_index=12)
        rectifier.rectify()
        surviving = rectifier.blob_map
    """

    def __init__(self, blob_map: Mapping[int, Blob], width: int, height: int, frame_index: int = 0,
                 options: BlobRectifierOptions | None = None) -> None:
        """
        :param blob_map: the blobs of the frame keyed by id.  The mapping is copied; the blobs themselves are merged in
                         place
        :param width: the width of the frame in pixels
        :param height: the height of the frame in pixels
        :param frame_index: which frame of the sequence the blobs came from, used for reporting
        :param options: the options configuring the rectifier
        """

        super().__init__(BlobRectifierOptions, options=options)

        if width <= 0 or height <= 0:
            raise ValueError(f'the frame size must be positive, got {width}x{height}')

        self.width: int = width
        self.height: int = height
        self.frame_index: int = frame_index

        self._blob_map: dict[int, Blob] = dict(blob_map)

        self._blob_refs: INT_ARRAY = np.full(width * height, NO_BLOB, dtype=np.int64)

        self._absorbed_ids: set[int] = set()

        self.passes_run: int = 0
        """
        How many passes the last call to :meth:`rectify` made
        """

    @property
    def blob_map(self) -> dict[int, Blob]:
        """
        The live blobs keyed by id
        """
        return self._blob_map

    @property
    def blob_refs(self) -> INT_ARRAY:
        """
        A read only view of the reference grid, row major, holding the owning blob id of each pixel or
        :data:`NO_BLOB`
        """
        view = self._blob_refs.view()
        view.setflags(write=False)
        return view

    @property
    def absorbed_ids(self) -> frozenset[int]:
        """
        The ids of every blob that has been merged into another
        """
        return frozenset(self._absorbed_ids)

    def pixel_index(self, pixel: PIXEL) -> int:
        """
        The reference grid index of an ``(x, y)`` pixel.

        :raises ValueError: if the pixel lies outside of the frame
        """

        x, y = pixel
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f'pixel {pixel} is outside of the {self.width}x{self.height} frame {self.frame_index}')

        return y * self.width + x

    def owner_at(self, x: int, y: int) -> int | None:
        """
        The id of the blob owning a pixel, or ``None`` if no blob does
        """

        owner = int(self._blob_refs[self.pixel_index((x, y))])
        return None if owner == NO_BLOB else owner

    def run_pass(self) -> int:
        """
        Visit every live blob once, merging each into the first different blob it overlaps.

        The reference grid is rebuilt from scratch.

        :return: the number of merges made
        """

        self._blob_refs.fill(NO_BLOB)

        absorbed = 0

        for blob_id in list(self._blob_map):
            if blob_id in self._absorbed_ids:
                continue

            blob = self._blob_map[blob_id]

            indices = [self.pixel_index(pixel) for pixel in blob.pixels]

            overlapping: Blob | None = None
            for index in indices:
                owner = int(self._blob_refs[index])
                if owner != NO_BLOB and owner != blob_id and owner in self._blob_map:
                    overlapping = self._blob_map[owner]
                    break

            if overlapping is not None and overlapping.absorb(blob):
                self._absorbed_ids.add(blob_id)
                del self._blob_map[blob_id]
                self._blob_refs[indices] = overlapping.blob_id
                absorbed += 1

            else:
                unclaimed = [index for index in indices if self._blob_refs[index] == NO_BLOB]
                self._blob_refs[unclaimed] = blob_id

        _LOGGER.debug(f'frame {self.frame_index}: pass absorbed {absorbed} blobs, {len(self._blob_map)} remain')

        return absorbed

    def rectify(self) -> int:
        """
        Run passes until one makes no merges or :attr:`max_passes` is reached.

        :return: the total number of merges made
        """

        total = 0
        self.passes_run = 0

        while self.max_passes is None or self.passes_run < self.max_passes:
            absorbed = self.run_pass()
            self.passes_run += 1
            total += absorbed
            if absorbed == 0:
                break

        return total

    def shared_pixels(self) -> dict[PIXEL, list[int]]:
        """
        Every pixel that belongs to more than one live blob, mapped to the ids of those blobs.

        After a pass that made no merges, any remaining entries come from blobs that declined to merge.
        """

        owners: dict[PIXEL, list[int]] = {}
        for blob_id, blob in self._blob_map.items():
            for pixel in blob.pixels:
                owners.setdefault((pixel[0], pixel[1]), []).append(blob_id)

        return {pixel: ids for pixel, ids in owners.items() if len(ids) > 1}
