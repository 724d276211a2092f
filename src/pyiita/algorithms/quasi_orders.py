"""Candidate quasi-order generation for inductive item tree analysis."""

from __future__ import annotations

import logging
import numbers
from functools import lru_cache
from typing import Any

import numpy as np

from pyiita.core.exceptions import InvalidArgumentError
from pyiita.core.types import QuasiOrder
from pyiita.graph.transitive_closure import transitive_closure

logger = logging.getLogger(__name__)


def generate_quasi_orders(ni: Any) -> list[QuasiOrder]:
    """
    Generate the competing prerequisite structures for ni items.

    The candidate family is deliberately restricted rather than the full set
    of quasi-orders (whose number grows super-exponentially). In order:

    1. the empty relation (no prerequisites);
    2. for every item pair i < j, by increasing i then j, the single
       relation i -> j followed by j -> i;
    3. for ni >= 3, for every start item s = 1, ..., ni - 2, the chain
       s -> s+1 -> ... -> ni, transitively closed.

    This yields 1 + ni*(ni-1) + max(ni-2, 0) candidates, e.g. 168 for 13
    items. Selection indices refer to positions in this list, so the order
    is fixed and regeneration is deterministic. Results are cached per ni;
    the returned matrices are read-only.

    Args:
        ni: Number of items, a positive integer (integral floats such as
            3.0 are accepted)

    Returns:
        List of ni x ni int8 relation matrices, entry (i,j) = 1 meaning
        item i is a prerequisite for item j

    Raises:
        InvalidArgumentError: If ni is not a positive integer

    Example:
        >>> orders = generate_quasi_orders(3)
        >>> len(orders)
        8
        >>> orders[1].tolist()  # item 1 -> item 2
        [[0, 1, 0], [0, 0, 0], [0, 0, 0]]
    """
    return list(_catalog(_validate_item_count(ni)))


def num_quasi_orders(ni: Any) -> int:
    """Number of candidates generate_quasi_orders(ni) returns."""
    ni = _validate_item_count(ni)
    return 1 + ni * (ni - 1) + max(ni - 2, 0)


def _validate_item_count(ni: Any) -> int:
    """Return ni as int, raising InvalidArgumentError if not a positive integer."""
    if isinstance(ni, (bool, np.bool_)) or not isinstance(ni, numbers.Real):
        raise InvalidArgumentError(
            f"ni must be a positive integer, got {ni!r} of type {type(ni).__name__}."
        )
    if not np.isfinite(ni) or ni != int(ni) or ni < 1:
        raise InvalidArgumentError(f"ni must be a positive integer, got {ni!r}.")
    return int(ni)


@lru_cache(maxsize=32)
def _catalog(ni: int) -> tuple[QuasiOrder, ...]:
    """Build the immutable candidate tuple for ni items."""
    candidates = [np.zeros((ni, ni), dtype=np.int8)]

    for i in range(ni - 1):
        for j in range(i + 1, ni):
            forward = np.zeros((ni, ni), dtype=np.int8)
            forward[i, j] = 1
            candidates.append(forward)

            backward = np.zeros((ni, ni), dtype=np.int8)
            backward[j, i] = 1
            candidates.append(backward)

    if ni >= 3:
        for start in range(ni - 2):
            chain = np.zeros((ni, ni), dtype=np.int8)
            for k in range(start, ni - 1):
                chain[k, k + 1] = 1
            candidates.append(transitive_closure(chain))

    for candidate in candidates:
        candidate.setflags(write=False)

    logger.debug("Generated %d candidate quasi-orders for %d items", len(candidates), ni)
    return tuple(candidates)
