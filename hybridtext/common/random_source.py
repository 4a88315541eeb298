"""
Per-thread default random generator for word generation.
"""

from __future__ import annotations

import threading
from typing import Optional

import numpy as np

_local = threading.local()


def default_generator() -> np.random.Generator:
    """Generator for the calling thread, seeded from OS entropy on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def resolve_generator(
    rng: Optional[np.random.Generator | int] = None,
) -> np.random.Generator:
    """
    Pick the generator to draw from.

    Args:
        rng: A Generator, an int seed, or None for the thread default

    Returns:
        numpy Generator
    """
    if rng is None:
        return default_generator()
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)
