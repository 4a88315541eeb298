"""
Core string type and its supporting pieces.

This package contains:
- HybridString, the small-buffer-optimized byte string
- OverflowBuffer, the growable region behind long strings
- Iterator family over HybridString
- C-locale byte classification
- Word tokenization and corpus statistics
"""

from .errors import OutOfRangeError
from .hybrid_string import INLINE_CAPACITY, HybridString
from .iterators import ConstIterator, ConstReverseIterator, Iterator, ReverseIterator
from .overflow import OverflowBuffer
from .stats_utils import (
    corpus_unique_words,
    corpus_word_frequency,
    frequency_length_histogram,
    frequency_type_token_ratio,
    most_common,
    type_token_ratio,
    word_length_histogram,
)

__all__ = [
    "ConstIterator",
    "ConstReverseIterator",
    "HybridString",
    "INLINE_CAPACITY",
    "Iterator",
    "OutOfRangeError",
    "OverflowBuffer",
    "ReverseIterator",
    "corpus_unique_words",
    "corpus_word_frequency",
    "frequency_length_histogram",
    "frequency_type_token_ratio",
    "most_common",
    "type_token_ratio",
    "word_length_histogram",
]
