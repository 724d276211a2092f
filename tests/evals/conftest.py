"""
Pathological fixtures for EVALs - designed to break the analysis.

Each fixture creates response data that targets a specific degenerate case.
"""

import numpy as np
import pytest


# =============================================================================
# MINIMAL DATA FIXTURES (n=1, ni=1, empty)
# =============================================================================


@pytest.fixture
def single_subject():
    """n=1 - every relation has at most one comparison."""
    return np.array([[0, 1, 1]])


@pytest.fixture
def single_item():
    """ni=1 - only the empty relation exists."""
    return np.array([[0], [1], [1], [0]])


@pytest.fixture
def no_subjects():
    """n=0 - no comparisons anywhere."""
    return np.empty((0, 4))


# =============================================================================
# MISSING DATA HAZARDS
# =============================================================================


@pytest.fixture
def disjoint_missing():
    """Items 1 and 2 are never observed together - 1 <-> 2 has no comparisons."""
    return np.array([
        [0, np.nan, 1],
        [1, np.nan, 1],
        [np.nan, 1, 0],
        [np.nan, 0, 1],
    ])


@pytest.fixture
def one_item_unobserved():
    """Item 3 has no observed response at all."""
    return np.array([
        [0, 1, np.nan],
        [1, 1, np.nan],
        [1, 0, np.nan],
    ])


@pytest.fixture
def mostly_missing():
    """90% missing - scattered comparisons only."""
    rng = np.random.default_rng(7)
    values = rng.binomial(1, 0.5, size=(200, 5)).astype(np.float64)
    values[rng.random((200, 5)) < 0.9] = np.nan
    return values


# =============================================================================
# LARGE DATA FOR PERFORMANCE
# =============================================================================


@pytest.fixture
def large_n_5000():
    """n=5000 subjects, ni=10 items."""
    rng = np.random.default_rng(42)
    return rng.binomial(1, 0.5, size=(5000, 10)).astype(np.float64)


@pytest.fixture
def large_ni_30():
    """ni=30 items - 1 + 30*29 + 28 = 899 candidates."""
    rng = np.random.default_rng(42)
    values = rng.binomial(1, 0.5, size=(300, 30)).astype(np.float64)
    values[rng.random((300, 30)) < 0.1] = np.nan
    return values
