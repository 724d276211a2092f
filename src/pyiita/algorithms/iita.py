"""Inductive item tree analysis (IITA) with missing data support."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

import numpy as np

from pyiita._config import get_default_selrule
from pyiita.algorithms.diff import check_quasi_order, score_relations
from pyiita.algorithms.quasi_orders import generate_quasi_orders
from pyiita.algorithms.selection import parse_selrule, select_quasi_orders
from pyiita.core.exceptions import InvalidArgumentError
from pyiita.core.responses import as_response_matrix
from pyiita.core.result import AnalysisResult
from pyiita.core.types import BoolArray, QuasiOrder

logger = logging.getLogger(__name__)


def iita(
    data: Any,
    v: Sequence[Any] | None = None,
    selrule: Any = None,
) -> AnalysisResult:
    """
    Run inductive item tree analysis on binary response data.

    Every competing quasi-order is scored with its diff value (see
    :func:`pyiita.compute_diff`); missing responses are handled by pairwise
    deletion per relation. The selection rule then picks the best-fitting
    quasi-orders.

    The algorithm:
    1. Validate the response matrix (0, 1, or missing only).
    2. Take the competing quasi-orders from v, or generate them from the
       number of items when v is None. Both paths go through the same
       dimension check.
    3. Compute the diff value of every quasi-order, in order.
    4. Select the winners by "minimal" or "corrected" rule.

    Args:
        data: ResponseMatrix, pandas DataFrame, or n x m array-like of 0/1
            with NaN/None for missing responses
        v: Optional sequence of m x m quasi-order matrices to test. Entry
            (i,j) = 1 means item i is a prerequisite for item j. If None,
            candidates come from :func:`generate_quasi_orders`.
        selrule: "minimal" or "corrected". If None, the configured default
            is used (see :func:`get_default_selrule`).

    Returns:
        AnalysisResult with diff values, selected 1-based indices and the
        selected quasi-orders ("implications")

    Raises:
        InvalidDataValueError: If data holds values other than 0, 1, missing
        InvalidArgumentError: If selrule is unknown or v is empty
        DimensionError: If a quasi-order in v is not m x m

    Example:
        >>> import numpy as np
        >>> from pyiita import iita
        >>> data = np.array([
        ...     [0, 0, 0],
        ...     [1, 0, 0],
        ...     [1, 1, 0],
        ...     [1, 1, 1],
        ... ])
        >>> result = iita(data)
        >>> result.min_diff
        0.0
        >>> result.nq
        8
    """
    start_time = time.perf_counter()

    responses = as_response_matrix(data)
    rule = parse_selrule(get_default_selrule() if selrule is None else selrule)
    ni = responses.num_items

    candidates = generate_quasi_orders(ni) if v is None else _as_candidate_list(v)
    orders = _validate_candidates(candidates, ni)

    logger.debug(
        "Running IITA on %d subjects x %d items with %d quasi-orders (selrule=%s)",
        responses.num_subjects,
        ni,
        len(candidates),
        rule.value,
    )

    scores = score_relations(responses, orders)
    diff = np.array([score.diff for score in scores], dtype=np.float64)
    error_rate = np.array([score.error_rate for score in scores], dtype=np.float64)
    diff.setflags(write=False)
    error_rate.setflags(write=False)

    selection = select_quasi_orders(diff, rule)

    relations = _as_relations(orders) if v is not None else candidates
    implications = [relations[k - 1] for k in selection.indices]

    computation_time = (time.perf_counter() - start_time) * 1000

    logger.debug(
        "IITA selected %d of %d quasi-orders (min diff %.6g) in %.2f ms",
        selection.num_selected,
        len(candidates),
        selection.min_diff,
        computation_time,
    )

    return AnalysisResult(
        ni=ni,
        nq=len(candidates),
        num_subjects=responses.num_subjects,
        diff=diff,
        error_rate=error_rate,
        fit_scores=tuple(scores),
        selection=selection,
        implications=implications,
        v=list(relations),
        item_names=tuple(responses.item_names) if responses.item_names else None,
        computation_time_ms=computation_time,
    )


# Alias for the missing-data entry point name.
iita_na = iita


def _as_candidate_list(v: Any) -> list[Any]:
    """Return a caller-supplied candidate set as a list."""
    if isinstance(v, (str, bytes)) or not hasattr(v, "__iter__"):
        raise InvalidArgumentError(
            f"v must be None or a sequence of quasi-order matrices, got {type(v).__name__}."
        )
    candidates = list(v)
    if not candidates:
        raise InvalidArgumentError("v must contain at least one quasi-order matrix.")
    return candidates


def _validate_candidates(candidates: list[Any], ni: int) -> BoolArray:
    """Check every candidate is ni x ni and stack them as boolean relations."""
    return np.stack([check_quasi_order(q, ni) for q in candidates])


def _as_relations(orders: BoolArray) -> list[QuasiOrder]:
    """Read-only int8 copies of validated boolean relations."""
    relations = []
    for order in orders:
        relation = order.astype(np.int8)
        relation.setflags(write=False)
        relations.append(relation)
    return relations
