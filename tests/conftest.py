"""Pytest fixtures for pyiita tests."""

import numpy as np
import pytest

from pyiita import ResponseMatrix, set_default_selrule


@pytest.fixture
def perfect_hierarchy() -> np.ndarray:
    """
    Four subjects over three items following the chain 1 -> 2 -> 3.

    Every response pattern respects the chain, so the chain and all of its
    single relations have diff 0.
    """
    return np.array([
        [0, 0, 0],  # Failed all
        [1, 0, 0],  # Passed only item 1
        [1, 1, 0],  # Passed items 1 and 2
        [1, 1, 1],  # Passed all
    ])


@pytest.fixture
def one_violation_data() -> np.ndarray:
    """
    Two items, four subjects, one violation of item 1 -> item 2.

    Subject 3 passed item 2 while failing item 1.
    """
    return np.array([
        [0, 0],
        [1, 0],
        [0, 1],  # Violation of 1 -> 2
        [1, 1],
    ])


@pytest.fixture
def unequal_fit_data() -> np.ndarray:
    """
    Two items where 1 -> 2 fits better (diff 0.2) than 2 -> 1 (diff 0.4).
    """
    return np.array([
        [0, 1],  # Violates 1 -> 2
        [1, 0],  # Violates 2 -> 1
        [1, 0],  # Violates 2 -> 1
        [1, 1],
        [0, 0],
    ])


@pytest.fixture
def missing_data() -> np.ndarray:
    """Three items with scattered missing responses."""
    return np.array([
        [0, 0, 0],
        [1, np.nan, 0],
        [1, 1, np.nan],
        [1, 1, 1],
    ])


@pytest.fixture
def random_missing_data() -> ResponseMatrix:
    """
    Random 40 x 6 responses with about 20% missing cells.

    Used to compare computation paths on data without hand-picked structure.
    """
    rng = np.random.default_rng(42)
    values = rng.binomial(1, 0.6, size=(40, 6)).astype(np.float64)
    values[rng.random((40, 6)) < 0.2] = np.nan
    return ResponseMatrix(values)


@pytest.fixture
def reset_selrule():
    """Restore the default selection rule resolution after a test."""
    yield
    set_default_selrule("auto")
