"""
Random-access positions over a HybridString.

A position is (owning string, index). Every dereference goes through
HybridString.at / HybridString.set_at, so positions never know where the
inline region ends and the overflow region begins.

Forward positions dereference `index`. Reverse positions store a base
index and dereference `index - 1`, moving towards the front as they
advance, so rbegin() has base len(s) and rend() has base 0.

Positions are invalidated by any mutation that changes the size of the
owning string or reallocates its overflow region. Using a stale position
is undefined behaviour; nothing checks for it.

Positions also implement the Python iterator protocol: next() returns the
current byte and advances, stopping at the end of the owning string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .hybrid_string import HybridString


class _Position:
    """Shared arithmetic, comparison and read access."""

    _step = 1

    def __init__(self, string: HybridString, index: int):
        self._string = string
        self._index = index

    @property
    def index(self) -> int:
        """Underlying index (the base index for reverse positions)."""
        return self._index

    @property
    def string(self) -> HybridString:
        return self._string

    def _target(self, offset: int = 0) -> int:
        if self._step > 0:
            return self._index + offset
        return self._index - 1 - offset

    def get(self) -> int:
        """Dereference: the byte at this position."""
        return self._string.at(self._target())

    def __getitem__(self, offset: int) -> int:
        return self._string.at(self._target(offset))

    # -- arithmetic --------------------------------------------------------

    def _moved(self, n: int):
        return type(self)(self._string, self._index + self._step * n)

    def __add__(self, n: int):
        if not isinstance(n, int):
            return NotImplemented
        return self._moved(n)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, _Position):
            if other._step != self._step:
                return NotImplemented
            return (self._index - other._index) * self._step
        if isinstance(other, int):
            return self._moved(-other)
        return NotImplemented

    def __iadd__(self, n: int):
        if not isinstance(n, int):
            return NotImplemented
        self._index += self._step * n
        return self

    def __isub__(self, n: int):
        if not isinstance(n, int):
            return NotImplemented
        self._index -= self._step * n
        return self

    # -- comparison --------------------------------------------------------

    def _key(self, other) -> tuple[int, int] | None:
        if not isinstance(other, _Position) or other._step != self._step:
            return None
        return self._index * self._step, other._index * self._step

    def __eq__(self, other) -> bool:
        keys = self._key(other)
        if keys is None:
            return NotImplemented
        return self._string is other._string and keys[0] == keys[1]

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other) -> bool:
        keys = self._key(other)
        if keys is None:
            return NotImplemented
        return keys[0] < keys[1]

    def __le__(self, other) -> bool:
        keys = self._key(other)
        if keys is None:
            return NotImplemented
        return keys[0] <= keys[1]

    def __gt__(self, other) -> bool:
        keys = self._key(other)
        if keys is None:
            return NotImplemented
        return keys[0] > keys[1]

    def __ge__(self, other) -> bool:
        keys = self._key(other)
        if keys is None:
            return NotImplemented
        return keys[0] >= keys[1]

    __hash__ = None

    # -- iterator protocol -------------------------------------------------

    def _exhausted(self) -> bool:
        if self._step > 0:
            return self._index >= len(self._string)
        return self._index <= 0

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self._exhausted():
            raise StopIteration
        value = self.get()
        self._index += self._step
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index})"


class _MutableAccess:
    """Write access through HybridString.set_at."""

    def set(self, value) -> None:
        self._string.set_at(self._target(), value)

    def __setitem__(self, offset: int, value) -> None:
        self._string.set_at(self._target(offset), value)


class ConstIterator(_Position):
    """Read-only forward position."""


class Iterator(_MutableAccess, ConstIterator):
    """Mutable forward position."""


class ConstReverseIterator(_Position):
    """Read-only reverse position."""

    _step = -1

    def base(self) -> ConstIterator:
        """Forward position one past the element this one refers to."""
        return ConstIterator(self._string, self._index)


class ReverseIterator(_MutableAccess, ConstReverseIterator):
    """Mutable reverse position."""

    def base(self) -> Iterator:
        return Iterator(self._string, self._index)
