"""
Word-level text processing over HybridString.

Everything here reads through the public indexing and iteration contract
(len, at, iteration, append), never through the storage regions, so the
inline/overflow split point is invisible to it.

A word is a maximal run of C-locale alphabetic bytes. Any other byte,
whitespace and punctuation included, separates words.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional

import numpy as np

from . import ctype
from .random_source import resolve_generator

if TYPE_CHECKING:
    from .hybrid_string import HybridString

_LETTERS = np.frombuffer(ctype.LOWERCASE_LETTERS, dtype=np.uint8)


def iter_words(text: HybridString) -> Iterator[HybridString]:
    """
    Yield the words of a trimmed, lowercased copy of `text`.

    The source string is left untouched. Each yielded word is a fresh
    HybridString, so callers may keep or mutate it freely.
    """
    folded = text.copy().trim().to_lower()
    current = type(text)()
    for byte in folded:
        if ctype.is_alpha(byte):
            current.append(byte)
        elif current:
            yield current
            current = type(text)()
    if current:
        yield current


def unique_words(text: HybridString) -> List[HybridString]:
    """Distinct words of `text`, sorted by byte-wise order."""
    return sorted(set(iter_words(text)))


def word_frequency(text: HybridString) -> Dict[HybridString, int]:
    """Occurrences of each lowercased word, keys in ascending order."""
    counts = Counter(iter_words(text))
    return {word: counts[word] for word in sorted(counts)}


def starts_with(text: HybridString, prefix: HybridString) -> bool:
    if len(prefix) > len(text):
        return False
    return all(text.at(i) == prefix.at(i) for i in range(len(prefix)))


def ends_with(text: HybridString, suffix: HybridString) -> bool:
    offset = len(text) - len(suffix)
    # Longer suffix than subject: nothing to compare against
    if offset < 0:
        return False
    return all(text.at(offset + i) == suffix.at(i) for i in range(len(suffix)))


def join(separator: HybridString, parts: Iterable) -> HybridString:
    """
    Concatenate `parts` with `separator` between consecutive items.

    Args:
        separator: String placed between parts
        parts: HybridStrings, bytes-like values or str

    Returns:
        New HybridString; empty when `parts` is empty
    """
    result = type(separator)()
    for i, part in enumerate(parts):
        if i:
            result.append(separator)
        result.append(part)
    return result


def generate_random_word(
    cls,
    length: int,
    rng: Optional[np.random.Generator | int] = None,
) -> HybridString:
    """
    Build a word of `length` letters drawn uniformly from a-z.

    Args:
        cls: HybridString class to instantiate
        length: Number of letters (0 gives an empty string)
        rng: Generator or seed; None uses the per-thread default

    Returns:
        New HybridString
    """
    if length < 0:
        raise ValueError(f"Word length must be non-negative, got {length}")
    picks = resolve_generator(rng).integers(0, len(_LETTERS), size=length)
    return cls.from_bytes(_LETTERS[picks].tobytes())
