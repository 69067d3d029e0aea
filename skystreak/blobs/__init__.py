"""
This package holds the blob model consumed from the detectors and the :class:`.BlobRectifier` which merges blobs that
overlap.
"""

from skystreak.blobs.blob import Blob, PixelBlob, PixelBlobOptions
from skystreak.blobs.rectifier import BlobRectifier, BlobRectifierOptions, NO_BLOB

__all__ = ["Blob", "PixelBlob", "PixelBlobOptions", "BlobRectifier", "BlobRectifierOptions", "NO_BLOB"]
