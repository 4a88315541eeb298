#!/usr/bin/env python3
"""
Word Stats - Count words in a text file using HybridString.

Reads the file line by line into HybridStrings, then reports unique words,
word frequencies, a word length histogram and optional random words.

Usage: python tools/word_stats.py [config.json] [--input FILE] [--json]
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np

from hybridtext import (
    HybridString,
    corpus_word_frequency,
    frequency_length_histogram,
    frequency_type_token_ratio,
    most_common,
)

DEFAULT_CONFIG = "tools/sample_configs/word_stats.json"

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Input/Output Data Structures
# -----------------------------------------------------------------------------


@dataclass
class WordStatsInput:
    """Input for word statistics: file to read and report options."""

    input_path: Path
    top_n: int = 10
    random_words: int = 0
    random_word_length: int = 8
    seed: Optional[int] = None

    @classmethod
    def from_json(cls, path: Path) -> WordStatsInput:
        with open(path) as f:
            d = json.load(f)
        return cls(
            Path(d["input_path"]),
            d.get("top_n", 10),
            d.get("random_words", 0),
            d.get("random_word_length", 8),
            d.get("seed"),
        )


@dataclass
class WordStatsOutput:
    """Statistics over every line of the input file."""

    line_count: int
    total_words: int
    unique_words: list[str]
    top_words: list[tuple[str, int]]
    type_token_ratio: float
    length_histogram: list[int]
    random_words: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "line_count": self.line_count,
            "total_words": self.total_words,
            "unique_words": self.unique_words,
            "top_words": [[w, c] for w, c in self.top_words],
            "type_token_ratio": round(self.type_token_ratio, 4),
            "length_histogram": self.length_histogram,
            "random_words": self.random_words,
        }


# -----------------------------------------------------------------------------
# Core Logic
# -----------------------------------------------------------------------------


def read_lines(path: Path) -> list[HybridString]:
    """Read every line of `path` as a HybridString."""
    with open(path, "rb") as f:
        lines = list(HybridString.read_lines(f))
    logger.info(f"Read {len(lines)} lines from {path}")
    return lines


def word_stats(inp: WordStatsInput) -> WordStatsOutput:
    """Compute word statistics for the configured file."""
    lines = read_lines(inp.input_path)
    frequency = corpus_word_frequency(lines)
    histogram = frequency_length_histogram(frequency)

    rng = np.random.default_rng(inp.seed)
    randoms = [
        HybridString.generate_random_word(inp.random_word_length, rng).to_string()
        for _ in range(inp.random_words)
    ]

    return WordStatsOutput(
        line_count=len(lines),
        total_words=sum(frequency.values()),
        unique_words=[w.to_string() for w in frequency],
        top_words=[(w.to_string(), c) for w, c in most_common(frequency, inp.top_n)],
        type_token_ratio=frequency_type_token_ratio(frequency),
        length_histogram=histogram.tolist(),
        random_words=randoms,
    )


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------


def get_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[1])
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help="Config JSON")
    parser.add_argument("--input", type=Path, default=None, help="Override input file")
    parser.add_argument("--top", type=int, default=None, help="Override top_n")
    parser.add_argument("--seed", type=int, default=None, help="Override seed")
    parser.add_argument("--json", action="store_true", help="Print JSON only")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def input_from_args(args: argparse.Namespace) -> WordStatsInput:
    """Load config, then apply command line overrides."""
    inp = WordStatsInput.from_json(Path(args.config))
    if args.input is not None:
        inp.input_path = args.input
    if args.top is not None:
        inp.top_n = args.top
    if args.seed is not None:
        inp.seed = args.seed
    return inp


def print_output(output: WordStatsOutput) -> None:
    print("=" * 60)
    print("WORD STATS")
    print("=" * 60)
    print(f"\nLines:            {output.line_count}")
    print(f"Words:            {output.total_words}")
    print(f"Unique words:     {len(output.unique_words)}")
    print(f"Type/token ratio: {output.type_token_ratio:.3f}")

    print("\n" + "-" * 60)
    print("TOP WORDS")
    print("-" * 60)
    for word, count in output.top_words:
        print(f"  {count:>5}  {word}")

    print("\n" + "-" * 60)
    print("WORD LENGTHS")
    print("-" * 60)
    for length, count in enumerate(output.length_histogram):
        if count:
            print(f"  {length:>3}: {count}")

    if output.random_words:
        print("\n" + "-" * 60)
        print("RANDOM WORDS")
        print("-" * 60)
        for word in output.random_words:
            print(f"  {word}")


def main(argv: Optional[list[str]] = None) -> int:
    args = get_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config)
    if not config_path.exists():
        logger.error(f"Config {config_path} not found")
        return 1

    inp = input_from_args(args)
    if inp.top_n < 0:
        logger.error(f"top_n must be non-negative, got {inp.top_n}")
        return 1
    if not inp.input_path.exists():
        logger.error(f"Input file {inp.input_path} not found")
        return 1

    output = word_stats(inp)
    if args.json:
        print(json.dumps(output.to_dict(), indent=2))
    else:
        print_output(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
