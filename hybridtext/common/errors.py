"""
Errors raised by HybridString.
"""

from __future__ import annotations


class OutOfRangeError(IndexError):
    """Raised when a logical index falls outside [0, size)."""

    def __init__(self, index: int, size: int):
        super().__init__(f"HybridString index {index} out of range for size {size}")
        self.index = index
        self.size = size
