"""Pytest configuration and fixtures."""

import pytest

from fixmath import FixMath, get_default_math, initialize, load_config
from fixmath.tables import MathTables


@pytest.fixture
def fm() -> FixMath:
    """Return the process-wide FixMath."""
    return get_default_math()


@pytest.fixture
def tables(fm: FixMath) -> MathTables:
    """Return the default lookup tables."""
    return fm.tables


@pytest.fixture
def coarse_fm() -> FixMath:
    """Return a FixMath with one quarter-sine sample per degree."""
    return initialize(load_config(sine_resolution_power=0))
