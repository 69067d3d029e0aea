"""
This module defines what the rest of skystreak needs from a blob, and provides :class:`PixelBlob`, a simple blob holding
its pixels and their intensities.

Blobs are produced by detectors (blobbers) that live outside of this package.  Anything satisfying the :class:`Blob`
protocol can be handed to the :class:`.BlobRectifier`.
"""

from dataclasses import dataclass
from typing import Protocol, Iterable, Mapping, runtime_checkable

import numpy as np

from skystreak.geometry.bounding_box import BoundingBox
from skystreak.utilities.options import UserOptions
from skystreak.utilities.mixin_classes import UserOptionConfigured
from skystreak._typing import PIXEL, INT_ARRAY


@runtime_checkable
class Blob(Protocol):
    """
    A detector defined set of pixels considered a single candidate anomaly.
    """

    @property
    def blob_id(self) -> int:
        """
        The unique id of the blob within its frame
        """
        ...

    @property
    def pixels(self) -> Iterable[PIXEL]:
        """
        The ``(x, y)`` coordinates of every pixel in the blob
        """
        ...

    def absorb(self, other: "Blob") -> bool:
        """
        Try to merge `other` into this blob, keeping this blob's identity.

        :return: ``True`` if the merge happened, ``False`` if this blob declined it
        """
        ...


@dataclass
class PixelBlobOptions(UserOptions):
    max_absorbed_size: int | None = None
    """
    The largest number of pixels a blob may reach by absorbing others.

    A merge which would leave the blob larger than this is declined.  ``None`` allows any size.
    """


class PixelBlob(UserOptionConfigured[PixelBlobOptions], PixelBlobOptions):
    """
    A blob of pixels with an intensity for each.

    Pixels are kept in the order they were added, which is the order the :class:`.BlobRectifier` scans them in.
    """

    def __init__(self, blob_id: int, pixels: Mapping[PIXEL, int] | Iterable[PIXEL],
                 options: PixelBlobOptions | None = None) -> None:
        """
        :param blob_id: the unique id of this blob
        :param pixels: either a mapping of ``(x, y)`` to intensity or an iterable of ``(x, y)`` (intensity 0)
        :param options: the options configuring how this blob absorbs others
        """

        super().__init__(PixelBlobOptions, options=options)

        self._blob_id: int = int(blob_id)

        if isinstance(pixels, Mapping):
            self._pixels: dict[PIXEL, int] = {(int(x), int(y)): int(v) for (x, y), v in pixels.items()}
        else:
            self._pixels = {(int(x), int(y)): 0 for x, y in pixels}

        self._bounding_box: BoundingBox | None = None

    @property
    def blob_id(self) -> int:
        return self._blob_id

    @property
    def pixels(self) -> list[PIXEL]:
        return list(self._pixels)

    @property
    def intensities(self) -> dict[PIXEL, int]:
        """
        A copy of the intensity of each pixel
        """
        return dict(self._pixels)

    @property
    def size(self) -> int:
        return len(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)

    def __contains__(self, pixel: object) -> bool:
        return pixel in self._pixels

    def add(self, pixel: PIXEL, intensity: int = 0) -> None:
        """
        Add a single pixel to the blob, replacing the intensity if it is already a member
        """

        self._pixels[(int(pixel[0]), int(pixel[1]))] = int(intensity)
        self._bounding_box = None

    @property
    def intensity(self) -> int:
        """
        The mean intensity of the pixels in the blob, truncated to an integer
        """

        if not self._pixels:
            return 0

        return int(sum(self._pixels.values()) // len(self._pixels))

    @property
    def bounding_box(self) -> BoundingBox:
        if self._bounding_box is None:
            self._bounding_box = BoundingBox.from_pixels(self._pixels)
        return self._bounding_box

    @property
    def pixel_values(self) -> INT_ARRAY:
        """
        The intensities laid out over the bounding box as a ``height x width`` array, 0 where the blob has no pixel
        """

        box = self.bounding_box
        ret = np.zeros((box.height, box.width), dtype=np.int64)
        for (x, y), value in self._pixels.items():
            ret[y - box.min[1], x - box.min[0]] = value
        return ret

    def absorb(self, other: Blob) -> bool:
        """
        Merge another blob into this one.

        The merge is declined when `other` is this blob (or has the same id), or when the result would grow past
        :attr:`max_absorbed_size`.  Pixels already in this blob keep their intensity.

        :param other: the blob to take the pixels from
        :return: whether the merge happened
        """

        if other is self or other.blob_id == self._blob_id:
            return False

        if isinstance(other, PixelBlob):
            incoming = other.intensities
        else:
            incoming = {(int(x), int(y)): 0 for x, y in other.pixels}

        new_pixels = [pixel for pixel in incoming if pixel not in self._pixels]

        if self.max_absorbed_size is not None and len(self._pixels) + len(new_pixels) > self.max_absorbed_size:
            return False

        for pixel in new_pixels:
            self._pixels[pixel] = incoming[pixel]

        self._bounding_box = None

        return True

    # identity semantics, not the field comparison inherited from the options dataclass
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"PixelBlob(blob_id={self._blob_id}, size={len(self._pixels)})"
