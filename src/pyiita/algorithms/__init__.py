"""Core algorithms for inductive item tree analysis."""

from pyiita.algorithms.quasi_orders import generate_quasi_orders, num_quasi_orders
from pyiita.algorithms.diff import compute_diff, compute_diffs
from pyiita.algorithms.selection import SelectionRule, select_quasi_orders
from pyiita.algorithms.iita import iita, iita_na

__all__ = [
    "generate_quasi_orders",
    "num_quasi_orders",
    "compute_diff",
    "compute_diffs",
    "SelectionRule",
    "select_quasi_orders",
    "iita",
    "iita_na",
]
