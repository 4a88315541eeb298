"""
Pytest configuration and shared fixtures for hybridtext tests.

Provides strings on both sides of the inline/overflow boundary, sample
text, and a seeded random generator.
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from hybridtext import INLINE_CAPACITY, HybridString

# =============================================================================
# String Fixtures
# =============================================================================


@pytest.fixture
def empty_string() -> HybridString:
    """Empty string fixture."""
    return HybridString.empty()


@pytest.fixture
def short_string() -> HybridString:
    """String held entirely inline."""
    return HybridString("hello")


@pytest.fixture
def boundary_string() -> HybridString:
    """String filling the inline region exactly."""
    return HybridString("abcdefghijklmnopqrst")


@pytest.fixture
def long_string() -> HybridString:
    """25-byte string: 20 inline bytes, 5 overflow bytes."""
    return HybridString("abcdefghijklmnopqrstUVWXY")


@pytest.fixture
def sentence() -> HybridString:
    """Sample sentence with mixed case and punctuation."""
    return HybridString("The cat sat on the MAT. The cat ran.")


@pytest.fixture
def byte_samples() -> list[bytes]:
    """Byte sequences around the inline boundary, including non-ASCII."""
    return [
        b"",
        b"x",
        b"a" * (INLINE_CAPACITY - 1),
        b"b" * INLINE_CAPACITY,
        b"c" * (INLINE_CAPACITY + 1),
        bytes(range(256)),
        b"\x00embedded\x00nul\x00",
    ]


# =============================================================================
# Random Fixtures
# =============================================================================


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for deterministic word generation."""
    return np.random.default_rng(1234)


# =============================================================================
# Test Configuration
# =============================================================================


@pytest.fixture(scope="session")
def sample_config_dir() -> Path:
    """Directory holding tool sample configs."""
    return PROJECT_ROOT / "tools" / "sample_configs"


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
