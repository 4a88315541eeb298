"""
Growable byte buffer backing the overflow region of a HybridString.

A numpy uint8 array plus a logical length. Capacity grows geometrically
so that repeated appends are amortized O(1); shrinking the length never
releases the allocation.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

logger = logging.getLogger(__name__)

MIN_GROWTH = 16
GROWTH_FACTOR = 2


class OverflowBuffer:
    """
    Growable uint8 buffer.

    Attributes:
        length: Number of logical bytes stored
    """

    def __init__(self, data: Iterable[int] | bytes = b""):
        initial = np.frombuffer(bytes(data), dtype=np.uint8)
        self._data = initial.copy()
        self.length = len(initial)

    def __len__(self) -> int:
        return self.length

    def capacity(self) -> int:
        """Number of bytes allocated."""
        return len(self._data)

    def reserve(self, needed: int) -> None:
        """Ensure room for at least `needed` bytes, growing geometrically."""
        if needed <= len(self._data):
            return
        new_capacity = max(needed, GROWTH_FACTOR * len(self._data), MIN_GROWTH)
        logger.debug(f"Overflow buffer realloc {len(self._data)} -> {new_capacity}")
        grown = np.zeros(new_capacity, dtype=np.uint8)
        grown[: self.length] = self._data[: self.length]
        self._data = grown

    def __getitem__(self, offset: int) -> int:
        return int(self._data[offset])

    def __setitem__(self, offset: int, value: int) -> None:
        self._data[offset] = value

    def push(self, value: int) -> None:
        self.reserve(self.length + 1)
        self._data[self.length] = value
        self.length += 1

    def extend(self, data: bytes) -> None:
        """Append raw bytes in one copy."""
        count = len(data)
        if count == 0:
            return
        self.reserve(self.length + count)
        self._data[self.length : self.length + count] = np.frombuffer(
            data, dtype=np.uint8
        )
        self.length += count

    def fill(self, count: int, value: int) -> None:
        """Replace contents with `count` copies of `value`."""
        self.length = 0
        self.reserve(count)
        self._data[:count] = value
        self.length = count

    def truncate(self, length: int) -> None:
        """Drop bytes past `length`; the allocation is kept."""
        if length < self.length:
            self.length = length

    def clear(self) -> None:
        self.length = 0

    def tobytes(self) -> bytes:
        return self._data[: self.length].tobytes()

    def copy(self) -> OverflowBuffer:
        """Deep copy, preserving the allocated capacity."""
        clone = OverflowBuffer()
        clone._data = self._data.copy()
        clone.length = self.length
        return clone

    def __repr__(self) -> str:
        return f"OverflowBuffer(length={self.length}, capacity={self.capacity()})"
