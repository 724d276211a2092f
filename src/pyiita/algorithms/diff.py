"""Diff (violation rate) computation with pairwise deletion of missing data."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pyiita._kernels import count_violations_batch_numba, count_violations_numba
from pyiita.core.exceptions import DimensionError, InvalidArgumentError
from pyiita.core.responses import ResponseMatrix, as_response_matrix
from pyiita.core.result import FitScore
from pyiita.core.types import BoolArray


def compute_diff(data: Any, quasi_order: Any) -> FitScore:
    """
    Compute the diff value of one quasi-order against the response data.

    For each prerequisite relation i -> j in the quasi-order, every subject
    whose responses to both i and j are observed contributes one comparison.
    The comparison is a violation when the subject solved j but failed i.
    Missing data is handled by pairwise deletion: a subject missing item i
    or j is dropped for that relation only, not for the whole analysis.

    diff = violations / comparisons, or 0.0 when there are no comparisons
    (the empty relation, or relations whose cells are all missing).

    Args:
        data: ResponseMatrix, or n x m array-like of 0/1 with NaN/None missing
        quasi_order: m x m binary matrix; entry (i,j) = 1 means item i is a
            prerequisite for item j

    Returns:
        FitScore with diff, error_rate (equal to diff) and the raw counts

    Raises:
        DimensionError: If quasi_order is not m x m for m items in data
        InvalidDataValueError: If data holds values other than 0, 1, missing

    Example:
        >>> import numpy as np
        >>> data = np.array([[0, 0], [1, 0], [0, 1], [1, 1]])
        >>> order = np.array([[0, 1], [0, 0]])  # item 1 -> item 2
        >>> compute_diff(data, order).diff  # third subject violates it
        0.25
    """
    responses = as_response_matrix(data)
    order = check_quasi_order(quasi_order, responses.num_items)
    counts = count_violations_numba(responses.codes, order)
    return FitScore.from_counts(int(counts[0]), int(counts[1]))


def compute_diffs(data: Any, v: Sequence[Any]) -> list[FitScore]:
    """
    Compute diff values for every quasi-order in a candidate set.

    Equivalent to ``[compute_diff(data, q) for q in v]`` but scores all
    candidates in one parallel kernel call.

    Args:
        data: ResponseMatrix, or n x m array-like of 0/1 with NaN/None missing
        v: Sequence of m x m quasi-order matrices

    Returns:
        List of FitScore, index-aligned with v

    Raises:
        DimensionError: If any quasi-order is not m x m
        InvalidArgumentError: If v is empty
    """
    responses = as_response_matrix(data)
    if len(v) == 0:
        raise InvalidArgumentError("Candidate set v must contain at least one quasi-order.")
    orders = np.stack([check_quasi_order(q, responses.num_items) for q in v])
    return score_relations(responses, orders)


def check_quasi_order(quasi_order: Any, ni: int) -> BoolArray:
    """Return quasi_order as a contiguous boolean ni x ni matrix.

    Only entries equal to 1 (or True) are relations.

    Raises:
        DimensionError: If the matrix is ragged or not ni x ni
    """
    try:
        order = np.asarray(quasi_order)
    except ValueError as exc:
        raise DimensionError(
            f"quasi-order could not be read as an {ni}x{ni} matrix ({exc}). "
            f"Rows must all have {ni} entries."
        ) from exc
    if order.shape != (ni, ni):
        raise DimensionError(
            f"quasi-order has shape {order.shape} but the data has {ni} items. "
            f"All quasi-order matrices must have dimensions {ni}x{ni}."
        )
    return np.ascontiguousarray(order == 1, dtype=np.bool_)


def score_relations(responses: ResponseMatrix, orders: BoolArray) -> list[FitScore]:
    """Score a q x m x m stack of validated boolean relations."""
    counts = count_violations_batch_numba(responses.codes, orders)
    return [FitScore.from_counts(int(v), int(c)) for v, c in counts]
