"""
C-locale byte classification.

Bytes are ints in 0..255. Only ASCII letters and the six ASCII
whitespace bytes are classified; every other byte is "other".
"""

from __future__ import annotations

import numpy as np

SPACE_BYTES = frozenset(b" \t\n\v\f\r")
UPPER_BYTES = frozenset(range(ord("A"), ord("Z") + 1))
LOWER_BYTES = frozenset(range(ord("a"), ord("z") + 1))
ALPHA_BYTES = UPPER_BYTES | LOWER_BYTES

LOWERCASE_LETTERS = bytes(sorted(LOWER_BYTES))

_CASE_OFFSET = ord("a") - ord("A")


def is_space(byte: int) -> bool:
    return byte in SPACE_BYTES


def is_alpha(byte: int) -> bool:
    return byte in ALPHA_BYTES


def to_lower(byte: int) -> int:
    """Fold A-Z to a-z; other bytes pass through."""
    if byte in UPPER_BYTES:
        return byte + _CASE_OFFSET
    return byte


def to_upper(byte: int) -> int:
    """Fold a-z to A-Z; other bytes pass through."""
    if byte in LOWER_BYTES:
        return byte - _CASE_OFFSET
    return byte


def check_byte(value) -> int:
    """
    Validate a single byte value.

    Accepts an int in 0..255 or a length-1 bytes/str.

    Raises:
        TypeError: value is not an int or a single byte/char
        ValueError: value is outside 0..255
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"Expected a single byte, got {len(value)} bytes")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {len(value)}")
        value = ord(value)
    elif isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Byte value must be an int, not {type(value).__name__}")
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"Byte value {value} outside range 0..255")
    return value
