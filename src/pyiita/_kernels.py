"""Numba JIT-compiled kernels for pyiita algorithms.

This module contains the inner loops of item tree analysis compiled with
Numba. All functions use `@njit(cache=True)` to cache compiled code to disk,
avoiding recompilation overhead.

Response codes follow ResponseValue: 0 = fail, 1 = pass, negative = missing.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange


# =============================================================================
# FLOYD-WARSHALL TRANSITIVE CLOSURE
# =============================================================================


@njit(cache=True)
def floyd_warshall_tc_serial(adjacency: np.ndarray) -> np.ndarray:
    """
    Floyd-Warshall transitive closure that leaves the diagonal untouched.

    Item relations are stored without reflexive pairs, so unlike a
    reachability closure the diagonal is copied from the input and never
    written.

    Args:
        adjacency: m x m boolean adjacency matrix (must be np.bool_)

    Returns:
        m x m boolean transitive closure matrix
    """
    m = adjacency.shape[0]
    closure = adjacency.copy()

    for k in range(m):
        for i in range(m):
            if i != k and closure[i, k]:
                for j in range(m):
                    if j != i and closure[k, j]:
                        closure[i, j] = True

    return closure


# =============================================================================
# VIOLATION COUNTING
# =============================================================================


@njit(cache=True)
def count_violations_numba(codes: np.ndarray, order: np.ndarray) -> np.ndarray:
    """
    Count violations and comparisons of one quasi-order against the data.

    For every relation i -> j (i != j) and every subject with both cells
    observed, one comparison is counted; it is a violation when the subject
    passed j but failed i.

    Args:
        codes: n x m int8 response code matrix
        order: m x m boolean relation matrix

    Returns:
        int64 array [violations, comparisons]
    """
    n = codes.shape[0]
    m = codes.shape[1]
    violations = 0
    comparisons = 0

    for i in range(m):
        for j in range(m):
            if i == j or not order[i, j]:
                continue
            for s in range(n):
                a = codes[s, i]
                b = codes[s, j]
                if a < 0 or b < 0:
                    continue
                comparisons += 1
                if b == 1 and a == 0:
                    violations += 1

    out = np.empty(2, dtype=np.int64)
    out[0] = violations
    out[1] = comparisons
    return out


@njit(cache=True, parallel=True)
def count_violations_batch_numba(codes: np.ndarray, orders: np.ndarray) -> np.ndarray:
    """
    Count violations and comparisons for a stack of quasi-orders.

    Candidates are independent, so they are scored in parallel across
    cores. Counts are integers, so the result does not depend on scheduling.

    Args:
        codes: n x m int8 response code matrix
        orders: q x m x m boolean relation matrices

    Returns:
        q x 2 int64 array of [violations, comparisons] per candidate
    """
    q = orders.shape[0]
    n = codes.shape[0]
    m = codes.shape[1]
    counts = np.zeros((q, 2), dtype=np.int64)

    for c in prange(q):
        violations = 0
        comparisons = 0
        for i in range(m):
            for j in range(m):
                if i == j or not orders[c, i, j]:
                    continue
                for s in range(n):
                    a = codes[s, i]
                    b = codes[s, j]
                    if a < 0 or b < 0:
                        continue
                    comparisons += 1
                    if b == 1 and a == 0:
                        violations += 1
        counts[c, 0] = violations
        counts[c, 1] = comparisons

    return counts
