"""
hybridtext: byte strings with small-buffer optimization

Short strings live in a fixed inline array; longer ones spill into a
growable overflow buffer. Word-level text processing is built on top.
"""

__version__ = "0.1.0"

from .common import (
    INLINE_CAPACITY,
    ConstIterator,
    ConstReverseIterator,
    HybridString,
    Iterator,
    OutOfRangeError,
    ReverseIterator,
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
    "ReverseIterator",
    "corpus_unique_words",
    "corpus_word_frequency",
    "frequency_length_histogram",
    "frequency_type_token_ratio",
    "most_common",
    "type_token_ratio",
    "word_length_histogram",
]
