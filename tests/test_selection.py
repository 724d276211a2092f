"""Tests for the minimal and corrected selection rules."""

import math

import numpy as np
import pytest

from pyiita import InvalidArgumentError, SelectionRule, select_quasi_orders


class TestMinimalRule:
    """Tests for selection by exact minimum."""

    def test_ties_at_minimum(self):
        """All candidates sharing the minimum diff are selected."""
        result = select_quasi_orders([0.25, 0.0, 0.0, 0.5], "minimal")

        assert result.indices == (2, 3)
        assert result.min_diff == 0.0
        assert result.threshold == 0.0
        assert result.selrule == "minimal"

    def test_single_winner(self):
        """A unique minimum selects exactly one candidate."""
        result = select_quasi_orders([0.3, 0.1, 0.2])

        assert result.indices == (2,)
        assert result.num_selected == 1

    def test_exact_equality_no_tolerance(self):
        """A diff one ulp above the minimum is not selected."""
        low = 0.1
        result = select_quasi_orders([low, np.nextafter(low, 1.0)], "minimal")

        assert result.indices == (1,)

    def test_default_rule_is_minimal(self):
        """The selrule argument defaults to the minimal rule."""
        assert select_quasi_orders([0.04, 0.2]).indices == (1,)

    def test_single_candidate(self):
        """One diff value selects index 1."""
        assert select_quasi_orders([0.7]).indices == (1,)


class TestCorrectedRule:
    """Tests for selection within min + sqrt(min)."""

    def test_margin_admits_close_candidates(self):
        """0.04 + sqrt(0.04) = 0.24 admits 0.2 but not 0.25 or 0.3."""
        result = select_quasi_orders([0.04, 0.2, 0.25, 0.3], "corrected")

        assert result.indices == (1, 2)
        assert result.threshold == pytest.approx(0.24)
        assert result.selrule == "corrected"

    def test_zero_minimum_equals_minimal(self):
        """With min diff 0 the corrected rule selects the minimal set."""
        diffs = [0.0, 0.0, 0.25, 0.0, 0.5, 0.0, 0.25, 0.0]

        minimal = select_quasi_orders(diffs, "minimal")
        corrected = select_quasi_orders(diffs, "corrected")

        assert corrected.indices == minimal.indices == (1, 2, 4, 6, 8)

    @pytest.mark.parametrize("seed", range(5))
    def test_contains_minimal_selection(self, seed):
        """The corrected selection is a superset of the minimal one."""
        rng = np.random.default_rng(seed)
        diffs = rng.random(30) * 0.5

        minimal = set(select_quasi_orders(diffs, "minimal").indices)
        corrected = set(select_quasi_orders(diffs, "corrected").indices)

        assert minimal <= corrected

    @pytest.mark.parametrize("seed", range(5))
    def test_threshold_formula(self, seed):
        """Every selected diff is within min + sqrt(min), every other above."""
        rng = np.random.default_rng(10 + seed)
        diffs = rng.random(25)

        result = select_quasi_orders(diffs, "corrected")
        threshold = diffs.min() + math.sqrt(diffs.min())
        selected = set(result.indices)

        for index, value in enumerate(diffs, start=1):
            assert (index in selected) == (value <= threshold)


class TestSelectionOutput:
    """Tests for the shape of the selection result."""

    def test_indices_are_one_based_and_increasing(self):
        """Indices count from 1 and come out sorted."""
        result = select_quasi_orders([0.1, 0.5, 0.1, 0.1], "minimal")

        assert result.indices == (1, 3, 4)
        assert list(result.indices) == sorted(result.indices)

    def test_indices_are_python_ints(self):
        """Indices are plain ints, not numpy scalars."""
        result = select_quasi_orders([0.0, 0.0])

        assert all(type(k) is int for k in result.indices)

    def test_accepts_enum(self):
        """SelectionRule members work in place of strings."""
        result = select_quasi_orders([0.04, 0.2], SelectionRule.CORRECTED)

        assert result.indices == (1, 2)

    def test_accepts_numpy_array(self):
        """A numpy diff vector is accepted."""
        assert select_quasi_orders(np.array([0.2, 0.1])).indices == (2,)


class TestInvalidSelection:
    """Tests for rejected selection inputs."""

    @pytest.mark.parametrize("rule", ["invalid", "Minimal", "", None, 1])
    def test_unknown_rule_raises(self, rule):
        """Only the exact names "minimal" and "corrected" are rules."""
        with pytest.raises(InvalidArgumentError, match="minimal"):
            select_quasi_orders([0.1, 0.2], rule)

    def test_empty_diffs_raise(self):
        """An empty diff vector cannot be selected from."""
        with pytest.raises(InvalidArgumentError):
            select_quasi_orders([])

    def test_2d_diffs_raise(self):
        """A matrix of diffs is rejected."""
        with pytest.raises(InvalidArgumentError):
            select_quasi_orders([[0.1, 0.2]])

    @pytest.mark.parametrize("bad", [np.nan, -0.1, 1.5])
    def test_out_of_range_raises(self, bad):
        """NaN and values outside [0, 1] are rejected."""
        with pytest.raises(InvalidArgumentError):
            select_quasi_orders([0.1, bad])
