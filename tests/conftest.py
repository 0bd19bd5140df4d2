"""Shared pytest fixtures for quilt tests."""

import random

import pytest

from quilt.core.config import QuiltConfig
from quilt.core.grid import QuiltGrid
from quilt.core.palettes import DEFAULT_YARNS
from quilt.core.quilt import Quilt


@pytest.fixture
def yarns():
    """The six default yarns (120 squares)."""
    return list(DEFAULT_YARNS)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def grid_3x3():
    """Empty 3x3 grid."""
    return QuiltGrid(3, 3)


@pytest.fixture
def small_quilt(yarns, rng):
    """4x4 quilt with the default rules and a pass budget as a regression guard."""
    return Quilt(yarns, QuiltConfig(width=4, height=4, max_passes=10_000), rng=rng)
