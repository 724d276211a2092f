"""Example response datasets for inductive item tree analysis.

Both datasets simulate 20 students answering 5 items of a knowledge
assessment whose intended prerequisite structure is:

    Item 1 (basic) -> Item 2, Item 3 (intermediate) -> Item 4 (advanced)
    -> Item 5 (most advanced)

A few response patterns deviate from that structure, as real data does.
"""

from __future__ import annotations

import numpy as np

from pyiita.core.responses import ResponseMatrix

_KNOWLEDGE_COMPLETE = [
    [0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0],
    [1, 1, 1, 0, 0],
    [1, 1, 1, 0, 0],
    [1, 1, 1, 1, 0],
    [1, 1, 1, 1, 0],
    [1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1],
    [0, 0, 0, 0, 0],
    [1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0],
    [1, 1, 1, 1, 0],
    [0, 1, 0, 0, 0],
    [1, 1, 0, 1, 0],
    [1, 1, 1, 0, 1],
    [1, 1, 1, 1, 1],
]

# (subject, item) cells removed in the incomplete version: 3 per item, 15%.
_MISSING_CELLS = [
    (1, 3), (2, 4), (3, 1), (4, 0), (5, 2),
    (6, 4), (8, 1), (9, 3), (10, 0), (12, 2),
    (13, 4), (15, 1), (16, 3), (17, 0), (18, 2),
]


def load_knowledge_complete() -> ResponseMatrix:
    """
    Load the complete knowledge assessment dataset.

    Returns:
        ResponseMatrix with 20 subjects x 5 items and no missing responses

    Example:
        >>> data = load_knowledge_complete()
        >>> result = iita(data)
    """
    return ResponseMatrix(np.array(_KNOWLEDGE_COMPLETE, dtype=np.float64))


def load_knowledge_missing() -> ResponseMatrix:
    """
    Load the knowledge assessment dataset with missing responses.

    Same subjects and items as :func:`load_knowledge_complete`, with 15 of
    the 100 responses (three per item) missing.

    Returns:
        ResponseMatrix with 20 subjects x 5 items, 15% missing
    """
    values = np.array(_KNOWLEDGE_COMPLETE, dtype=np.float64)
    for subject, item in _MISSING_CELLS:
        values[subject, item] = np.nan
    return ResponseMatrix(values)
