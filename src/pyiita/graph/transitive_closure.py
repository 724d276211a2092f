"""Floyd-Warshall algorithm for transitive closure of item relations."""

from __future__ import annotations

from typing import Any

import numpy as np

from pyiita._kernels import floyd_warshall_tc_serial
from pyiita.core.exceptions import DimensionError
from pyiita.core.types import BoolArray, QuasiOrder


def _as_square_relation(relation: Any) -> BoolArray:
    """Return ``relation`` as a contiguous boolean square matrix."""
    adjacency = np.asarray(relation)
    if adjacency.ndim != 2 or adjacency.shape[0] != adjacency.shape[1]:
        raise DimensionError(
            f"Relation must be a square 2D matrix, got shape {adjacency.shape}."
        )
    return np.ascontiguousarray(adjacency == 1, dtype=np.bool_)


def transitive_closure(relation: Any) -> QuasiOrder:
    """
    Compute the transitive closure of a prerequisite relation.

    If relation[i,k] = 1 and relation[k,j] = 1 then the closure has
    closure[i,j] = 1. A single Floyd-Warshall pass over every intermediate
    item k reaches the fixed point, and the pass only ever adds edges.
    The diagonal is never written, so an irreflexive relation stays
    irreflexive, and closing twice gives the same matrix as closing once.

    Args:
        relation: m x m binary matrix; only entries equal to 1 (or True) are edges

    Returns:
        m x m int8 matrix with values in {0, 1}

    Raises:
        DimensionError: If relation is not a square 2D matrix

    Example:
        >>> import numpy as np
        >>> # item 1 -> item 2 -> item 3
        >>> chain = np.array([
        ...     [0, 1, 0],
        ...     [0, 0, 1],
        ...     [0, 0, 0],
        ... ])
        >>> closure = transitive_closure(chain)
        >>> int(closure[0, 2])  # item 1 -> item 3 through item 2
        1
    """
    adjacency = _as_square_relation(relation)
    return floyd_warshall_tc_serial(adjacency).astype(np.int8)


def is_transitive(relation: Any) -> bool:
    """Return True if closing ``relation`` adds no off-diagonal edge."""
    adjacency = _as_square_relation(relation)
    return bool(np.array_equal(floyd_warshall_tc_serial(adjacency), adjacency))
