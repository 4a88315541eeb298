"""
Word statistics across many strings.

Corpus-level counterparts of HybridString.word_frequency and
HybridString.unique_words, plus a few summary measures.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .hybrid_string import HybridString
from .words import iter_words


def _count_words(strings: Iterable[HybridString]) -> Counter:
    counts: Counter = Counter()
    for string in strings:
        counts.update(iter_words(string))
    return counts


def corpus_word_frequency(strings: Iterable[HybridString]) -> Dict[HybridString, int]:
    """
    Sum word counts over all strings.

    Args:
        strings: Strings to tokenize

    Returns:
        Lowercased word -> total count, keys in ascending order
    """
    counts = _count_words(strings)
    return {word: counts[word] for word in sorted(counts)}


def corpus_unique_words(strings: Iterable[HybridString]) -> List[HybridString]:
    """Sorted distinct words across all strings."""
    return sorted(_count_words(strings))


def word_length_histogram(strings: Iterable[HybridString]) -> np.ndarray:
    """
    Count words by length.

    Returns:
        Integer array where index n holds the number of words of length n;
        a single zero entry when there are no words
    """
    return frequency_length_histogram(_count_words(strings))


def frequency_length_histogram(frequency: Dict[HybridString, int]) -> np.ndarray:
    """Word length histogram from an existing word -> count map."""
    if not frequency:
        return np.zeros(1, dtype=np.int64)
    lengths = np.fromiter((len(w) for w in frequency), dtype=np.int64)
    counts = np.fromiter(frequency.values(), dtype=np.int64)
    return np.bincount(lengths, weights=counts).astype(np.int64)


def type_token_ratio(strings: Iterable[HybridString]) -> float:
    """Distinct words divided by total words (0.0 when there are none)."""
    return frequency_type_token_ratio(_count_words(strings))


def frequency_type_token_ratio(frequency: Dict[HybridString, int]) -> float:
    """Type/token ratio from an existing word -> count map."""
    total = sum(frequency.values())
    if total == 0:
        return 0.0
    return float(len(frequency) / total)


def most_common(
    frequency: Dict[HybridString, int], n: int
) -> List[Tuple[HybridString, int]]:
    """
    Top `n` entries by count; equal counts keep ascending word order.

    Raises:
        ValueError: n is negative
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ranked = sorted(frequency.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:n]
