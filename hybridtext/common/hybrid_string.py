"""
HybridString: byte string with small-buffer optimization.

The first INLINE_CAPACITY bytes live in a fixed numpy array allocated with
the string. Bytes beyond that spill into a growable OverflowBuffer. The
split is an implementation detail: callers only see logical indices.
"""

from __future__ import annotations

import io
import logging
import operator
from typing import Dict, Iterable, Iterator as TypingIterator, List, Optional

import numpy as np

from . import ctype, words
from .errors import OutOfRangeError
from .iterators import ConstIterator, ConstReverseIterator, Iterator, ReverseIterator
from .overflow import OverflowBuffer

logger = logging.getLogger(__name__)

INLINE_CAPACITY = 20

_BYTES_LIKE = (bytes, bytearray, memoryview)


class HybridString:
    """
    Mutable byte string with inline storage for short contents.

    Storage:
        - inline region: numpy uint8 array of INLINE_CAPACITY bytes holding
          logical bytes [0, min(size, INLINE_CAPACITY))
        - overflow region: OverflowBuffer holding [INLINE_CAPACITY, size),
          empty whenever size <= INLINE_CAPACITY

    `size` is the only authority on length; there is no terminator.
    `capacity` is INLINE_CAPACITY plus the overflow allocation and is
    advisory only.

    Bytes are ints in 0..255. Text is mapped one character per byte
    (latin-1), and all classification uses C-locale rules.

    Not synchronized: concurrent mutation needs external locking.
    """

    __slots__ = ("_inline", "_overflow", "_size", "_capacity")

    def __init__(self, data=None):
        """
        Initialize HybridString.

        Args:
            data: None (empty), another HybridString (deep copy), str
                (latin-1), bytes-like, or an iterable of ints in 0..255
        """
        self._inline = np.zeros(INLINE_CAPACITY, dtype=np.uint8)
        self._overflow = OverflowBuffer()
        self._size = 0
        self._capacity = INLINE_CAPACITY
        if data is None:
            return
        if isinstance(data, HybridString):
            self._copy_from(data)
        else:
            self._assign(_raw_bytes(data))

    # -- construction ------------------------------------------------------

    @classmethod
    def empty(cls) -> HybridString:
        return cls()

    @classmethod
    def from_bytes(cls, data) -> HybridString:
        """Create from a bytes-like value or iterable of ints."""
        string = cls()
        string._assign(_raw_bytes(data))
        return string

    @classmethod
    def from_text(cls, text: str) -> HybridString:
        """Create from text, one byte per character."""
        return cls.from_bytes(text.encode("latin-1"))

    @classmethod
    def repeated(cls, length: int, byte) -> HybridString:
        """Create a string of `length` copies of `byte`."""
        if length < 0:
            raise ValueError(f"Length must be non-negative, got {length}")
        value = ctype.check_byte(byte)
        string = cls()
        inline_count = min(length, INLINE_CAPACITY)
        string._inline[:inline_count] = value
        if length > INLINE_CAPACITY:
            string._overflow.fill(length - INLINE_CAPACITY, value)
        string._size = length
        string._update_capacity()
        return string

    @classmethod
    def generate_random_word(
        cls, length: int, rng: Optional[np.random.Generator | int] = None
    ) -> HybridString:
        """Random lowercase word; see words.generate_random_word."""
        return words.generate_random_word(cls, length, rng)

    @classmethod
    def read_lines(cls, stream) -> TypingIterator[HybridString]:
        """Yield one HybridString per line until end of input."""
        while True:
            line = cls()
            if not line.read_line(stream):
                return
            yield line

    def _assign(self, raw: bytes) -> None:
        self._size = len(raw)
        inline_count = min(self._size, INLINE_CAPACITY)
        self._inline[:inline_count] = np.frombuffer(raw[:inline_count], dtype=np.uint8)
        self._overflow.clear()
        if self._size > INLINE_CAPACITY:
            self._overflow.extend(raw[INLINE_CAPACITY:])
        self._update_capacity()

    def _copy_from(self, other: HybridString) -> None:
        self._inline = other._inline.copy()
        self._overflow = other._overflow.copy()
        self._size = other._size
        self._update_capacity()

    def copy(self) -> HybridString:
        """Deep copy of both storage regions."""
        clone = type(self)()
        clone._copy_from(self)
        return clone

    def __copy__(self) -> HybridString:
        return self.copy()

    def __deepcopy__(self, memo) -> HybridString:
        return self.copy()

    def __getstate__(self):
        return self.to_bytes()

    def __setstate__(self, state: bytes) -> None:
        self.__init__(state)

    # -- size bookkeeping --------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """INLINE_CAPACITY plus overflow allocation; advisory."""
        return self._capacity

    @property
    def overflow_size(self) -> int:
        """Logical bytes held in the overflow region."""
        return len(self._overflow)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _update_capacity(self) -> None:
        self._capacity = INLINE_CAPACITY + self._overflow.capacity()

    def _resize(self, new_size: int) -> None:
        """Shrink to `new_size`, keeping the overflow region consistent."""
        self._size = new_size
        if new_size <= INLINE_CAPACITY:
            self._overflow.clear()
        else:
            self._overflow.truncate(new_size - INLINE_CAPACITY)
        self._update_capacity()

    def clear(self) -> None:
        """Drop all bytes; the overflow allocation is kept for reuse."""
        self._resize(0)

    # -- indexed access ----------------------------------------------------

    def _check_index(self, index) -> int:
        # operator.index rejects floats and other non-integral types
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise OutOfRangeError(index, self._size)
        return index

    def at(self, index: int) -> int:
        """
        Byte at logical `index`.

        Raises:
            OutOfRangeError: index outside [0, size)
            TypeError: index is not an integer
        """
        index = self._check_index(index)
        if index < INLINE_CAPACITY:
            return int(self._inline[index])
        return self._overflow[index - INLINE_CAPACITY]

    def set_at(self, index: int, value) -> None:
        """
        Overwrite the byte at logical `index`.

        Raises:
            OutOfRangeError: index outside [0, size)
            TypeError: index is not an integer
            TypeError, ValueError: value is not a byte
        """
        byte = ctype.check_byte(value)
        index = self._check_index(index)
        if index < INLINE_CAPACITY:
            self._inline[index] = byte
        else:
            self._overflow[index - INLINE_CAPACITY] = byte

    def _normalize(self, index: int) -> int:
        # Python-style negative indices, resolved before reaching at()
        index = operator.index(index)
        return index + self._size if index < 0 else index

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self).from_bytes(
                self.at(i) for i in range(*index.indices(self._size))
            )
        return self.at(self._normalize(index))

    def __setitem__(self, index: int, value) -> None:
        self.set_at(self._normalize(index), value)

    # -- append ------------------------------------------------------------

    def _push(self, byte: int) -> None:
        if self._size < INLINE_CAPACITY:
            self._inline[self._size] = byte
        else:
            if self._size == INLINE_CAPACITY:
                logger.debug(f"Spilling into overflow region at size {self._size}")
            self._overflow.push(byte)
        self._size += 1
        self._update_capacity()

    def _extend_raw(self, raw: bytes) -> None:
        room = max(0, INLINE_CAPACITY - self._size)
        head = raw[:room]
        if head:
            self._inline[self._size : self._size + len(head)] = np.frombuffer(
                head, dtype=np.uint8
            )
        tail = raw[room:]
        if tail:
            if self._size + len(head) == INLINE_CAPACITY and not self._overflow:
                logger.debug(f"Spilling {len(tail)} bytes into overflow region")
            self._overflow.extend(tail)
        self._size += len(raw)
        self._update_capacity()

    def append(self, value) -> HybridString:
        """
        Append a byte, a HybridString, a bytes-like value or str.

        Appending a string to itself appends its contents as they were
        before the call.

        Returns:
            self
        """
        if isinstance(value, HybridString):
            self._extend_raw(value.to_bytes())
        elif isinstance(value, _BYTES_LIKE):
            self._extend_raw(bytes(value))
        elif isinstance(value, str) and len(value) != 1:
            self._extend_raw(value.encode("latin-1"))
        else:
            self._push(ctype.check_byte(value))
        return self

    def extend(self, values: Iterable) -> HybridString:
        """Append every byte of an iterable of ints or a bytes-like value."""
        if isinstance(values, HybridString):
            return self.append(values)
        self._extend_raw(_raw_bytes(values))
        return self

    def __iadd__(self, other) -> HybridString:
        return self.append(other)

    def __add__(self, other) -> HybridString:
        if not isinstance(other, (HybridString, str, int) + _BYTES_LIKE):
            return NotImplemented
        return self.copy().append(other)

    def __radd__(self, other) -> HybridString:
        if not isinstance(other, (str,) + _BYTES_LIKE):
            return NotImplemented
        return type(self)(other).append(self)

    # -- iteration ---------------------------------------------------------

    def begin(self) -> Iterator:
        return Iterator(self, 0)

    def end(self) -> Iterator:
        return Iterator(self, self._size)

    def cbegin(self) -> ConstIterator:
        return ConstIterator(self, 0)

    def cend(self) -> ConstIterator:
        return ConstIterator(self, self._size)

    def rbegin(self) -> ReverseIterator:
        return ReverseIterator(self, self._size)

    def rend(self) -> ReverseIterator:
        return ReverseIterator(self, 0)

    def crbegin(self) -> ConstReverseIterator:
        return ConstReverseIterator(self, self._size)

    def crend(self) -> ConstReverseIterator:
        return ConstReverseIterator(self, 0)

    def __iter__(self) -> ConstIterator:
        return self.cbegin()

    def __reversed__(self) -> ConstReverseIterator:
        return self.crbegin()

    # -- ordering ----------------------------------------------------------

    def compare(self, other: HybridString) -> int:
        """
        Byte-wise three-way comparison.

        The first differing byte decides; if one string is a prefix of
        the other, the shorter sorts first.

        Returns:
            Negative, zero or positive
        """
        for i in range(min(self._size, other._size)):
            mine, theirs = self.at(i), other.at(i)
            if mine != theirs:
                return -1 if mine < theirs else 1
        return (self._size > other._size) - (self._size < other._size)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HybridString):
            return NotImplemented
        return self._size == other._size and self.compare(other) == 0

    def __ne__(self, other) -> bool:
        if not isinstance(other, HybridString):
            return NotImplemented
        return not self == other

    def __lt__(self, other) -> bool:
        if not isinstance(other, HybridString):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, HybridString):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, HybridString):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, HybridString):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Keys must not be mutated while stored in a dict or set
        return hash(self.to_bytes())

    # -- text processing ---------------------------------------------------

    def trim(self) -> HybridString:
        """
        Strip leading and trailing C-locale whitespace in place.

        Retained bytes are shifted down to index 0, then the size and the
        overflow region shrink.

        Returns:
            self
        """
        if self._size == 0:
            return self

        begin = 0
        while begin < self._size and ctype.is_space(self.at(begin)):
            begin += 1
        if begin == self._size:
            self.clear()
            return self

        end = self._size
        while end > begin and ctype.is_space(self.at(end - 1)):
            end -= 1

        new_size = end - begin
        if begin > 0:
            for i in range(new_size):
                self.set_at(i, self.at(i + begin))
        self._resize(new_size)
        return self

    def to_lower(self) -> HybridString:
        """Fold A-Z to a-z in place; returns self."""
        it, stop = self.begin(), self.end()
        while it != stop:
            it.set(ctype.to_lower(it.get()))
            it += 1
        return self

    def to_upper(self) -> HybridString:
        """Fold a-z to A-Z in place; returns self."""
        it, stop = self.begin(), self.end()
        while it != stop:
            it.set(ctype.to_upper(it.get()))
            it += 1
        return self

    def words(self) -> TypingIterator[HybridString]:
        return words.iter_words(self)

    def unique_words(self) -> List[HybridString]:
        """Distinct lowercased words, sorted."""
        return words.unique_words(self)

    def word_frequency(self) -> Dict[HybridString, int]:
        """Lowercased word -> occurrence count, keys sorted."""
        return words.word_frequency(self)

    def starts_with(self, prefix) -> bool:
        return words.starts_with(self, _coerce(prefix))

    def ends_with(self, suffix) -> bool:
        return words.ends_with(self, _coerce(suffix))

    def join(self, parts: Iterable) -> HybridString:
        """Concatenate `parts` using this string as the separator."""
        return words.join(self, parts)

    # -- conversion and streams --------------------------------------------

    def to_bytes(self) -> bytes:
        """Logical bytes: inline region, then overflow region."""
        inline_count = min(self._size, INLINE_CAPACITY)
        data = self._inline[:inline_count].tobytes()
        if self._size > INLINE_CAPACITY:
            data += self._overflow.tobytes()
        return data

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def to_string(self) -> str:
        return self.to_bytes().decode("latin-1")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"HybridString({self.to_bytes()!r})"

    def write_to(self, stream) -> None:
        """Write the logical bytes to a text or binary stream, unquoted."""
        if isinstance(stream, io.TextIOBase):
            stream.write(self.to_string())
        else:
            stream.write(self.to_bytes())

    def read_line(self, stream) -> bool:
        """
        Replace contents with the next line of `stream`.

        The line ends at a newline (dropped) or at end of input. Text
        lines are stored one byte per character when every character fits
        in latin-1; otherwise they are encoded with the stream's encoding
        (UTF-8 when it has none).

        Returns:
            False at end of input, leaving the contents unchanged
        """
        line = stream.readline()
        if not line:
            return False
        if isinstance(line, str):
            line = _encode_line(line.removesuffix("\n"), stream)
        elif line.endswith(b"\n"):
            line = line[:-1]
        self._assign(bytes(line))
        return True


def _encode_line(line: str, stream) -> bytes:
    try:
        return line.encode("latin-1")
    except UnicodeEncodeError:
        pass
    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        return line.encode(encoding, errors="surrogateescape")
    except UnicodeEncodeError:
        return line.encode("utf-8", errors="surrogatepass")


def _raw_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    if isinstance(data, HybridString):
        return data.to_bytes()
    if isinstance(data, int):
        raise TypeError("Use HybridString.repeated(length, byte) for sized strings")
    return bytes(data)


def _coerce(value) -> HybridString:
    if isinstance(value, HybridString):
        return value
    return HybridString(value)
