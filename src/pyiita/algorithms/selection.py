"""Selection rules for choosing the best-fitting quasi-orders."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

import numpy as np

from pyiita.core.exceptions import InvalidArgumentError
from pyiita.core.result import SelectionResult


class SelectionRule(str, Enum):
    """Rule for choosing winners from the diff values."""

    MINIMAL = "minimal"
    CORRECTED = "corrected"


def parse_selrule(selrule: Any) -> SelectionRule:
    """Return ``selrule`` as a SelectionRule.

    Raises:
        InvalidArgumentError: If selrule is not "minimal" or "corrected"
    """
    try:
        return SelectionRule(selrule)
    except ValueError:
        raise InvalidArgumentError(
            f"selrule must be either 'minimal' or 'corrected', got {selrule!r}."
        ) from None


def select_quasi_orders(diffs: Any, selrule: Any = SelectionRule.MINIMAL) -> SelectionResult:
    """
    Select the quasi-orders that fit the data best.

    Rules:
        - "minimal": every candidate whose diff equals the minimum diff
          (exact equality, no tolerance).
        - "corrected": every candidate whose diff is at most
          min_diff + sqrt(min_diff). The square-root margin comes from the
          variance stabilizing transformation for binomial proportions
          (Sargin & Uenlue, 2009) and keeps structures that are statistically
          indistinguishable from the best one. With min_diff = 0 the margin
          vanishes and the rule selects the same set as "minimal".

    The corrected threshold is never below the minimum, so the corrected
    selection always contains the minimal one.

    Args:
        diffs: 1D sequence of diff values in [0, 1], one per candidate
        selrule: "minimal" or "corrected" (or a SelectionRule)

    Returns:
        SelectionResult with increasing 1-based indices

    Raises:
        InvalidArgumentError: If selrule is unknown, diffs is empty, not 1D,
            or holds values outside [0, 1]

    Example:
        >>> select_quasi_orders([0.25, 0.0, 0.0, 0.5]).indices
        (2, 3)
        >>> select_quasi_orders([0.04, 0.2, 0.25], "corrected").indices
        (1, 2)
    """
    rule = parse_selrule(selrule)

    values = np.asarray(diffs, dtype=np.float64)
    if values.ndim != 1:
        raise InvalidArgumentError(
            f"diffs must be a 1D sequence, got shape {values.shape}."
        )
    if values.size == 0:
        raise InvalidArgumentError("diffs must contain at least one value.")
    if np.any(np.isnan(values)) or np.any((values < 0) | (values > 1)):
        raise InvalidArgumentError(
            "diffs must be values in [0, 1]; found NaN or out-of-range entries."
        )

    min_diff = float(values.min())
    if rule is SelectionRule.MINIMAL:
        threshold = min_diff
        selected = np.flatnonzero(values == min_diff)
    else:
        threshold = min_diff + math.sqrt(min_diff)
        selected = np.flatnonzero(values <= threshold)

    return SelectionResult(
        indices=tuple(int(k) + 1 for k in selected),
        selrule=rule.value,
        min_diff=min_diff,
        threshold=threshold,
    )
