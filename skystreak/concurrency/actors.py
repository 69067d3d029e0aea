"""
This module provides small containers that are safe to share between tasks.

Each one keeps its state private and routes every read and write through a coroutine serialized by its own lock.
Reads hand back snapshots, never the live container.
"""

import asyncio

from enum import Enum
from typing import Generic, Hashable

from skystreak._typing import T


class ArrayActor(Generic[T]):
    """
    An append only list.
    """

    def __init__(self) -> None:
        self._elements: list[T] = []
        self._lock: asyncio.Lock = asyncio.Lock()

    async def append(self, element: T) -> None:
        async with self._lock:
            self._elements.append(element)

    async def elements(self) -> list[T]:
        """
        A copy of every element in append order
        """
        async with self._lock:
            return list(self._elements)

    async def count(self) -> int:
        async with self._lock:
            return len(self._elements)


class ProcessedBlobs:
    """
    The ids of the blobs that have been processed.

    Workers each fill their own instance which are then combined with :meth:`union`.
    """

    def __init__(self) -> None:
        self._blob_ids: set[int] = set()
        self._lock: asyncio.Lock = asyncio.Lock()

    async def contains(self, blob_id: int) -> bool:
        async with self._lock:
            return blob_id in self._blob_ids

    async def insert(self, blob_id: int) -> None:
        async with self._lock:
            self._blob_ids.add(blob_id)

    async def blobs(self) -> frozenset[int]:
        """
        A snapshot of every processed id
        """
        async with self._lock:
            return frozenset(self._blob_ids)

    async def union(self, other: "ProcessedBlobs") -> None:
        """
        Add every id processed by `other`.

        The snapshot of `other` is taken before this instance is locked.
        """

        other_ids = await other.blobs()

        async with self._lock:
            self._blob_ids |= other_ids


class PixelStatus(Enum):
    """
    What is known about a pixel while blobs are being grown.
    """

    UNKNOWN = "unknown"
    """
    Nothing has been recorded yet
    """

    BACKGROUND = "background"
    """
    The pixel is not part of any blob
    """

    BLOBBED = "blobbed"
    """
    The pixel belongs to a blob
    """


class PixelStatusTracker:
    """
    The :class:`PixelStatus` of each pixel, keyed by a stable pixel identity.
    """

    def __init__(self) -> None:
        self._statuses: dict[Hashable, PixelStatus] = {}
        self._lock: asyncio.Lock = asyncio.Lock()

    async def status(self, pixel_id: Hashable) -> PixelStatus:
        """
        The recorded status of a pixel, :attr:`PixelStatus.UNKNOWN` if none was recorded
        """
        async with self._lock:
            return self._statuses.get(pixel_id, PixelStatus.UNKNOWN)

    async def record(self, status: PixelStatus, pixel_id: Hashable) -> None:
        async with self._lock:
            self._statuses[pixel_id] = status
