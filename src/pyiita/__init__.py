"""
pyiita: Inductive Item Tree Analysis with Missing Data Support.

Finds the prerequisite structure among test items that best explains binary
response data, handling missing responses by pairwise deletion.
"""

from pyiita.core.responses import ResponseMatrix, ResponseValue
from pyiita.core.result import AnalysisResult, FitScore, SelectionResult
from pyiita.core.exceptions import (
    IITAError,
    InvalidArgumentError,
    DataValidationError,
    InvalidDataValueError,
    DimensionError,
    InsufficientDataError,
    DataQualityWarning,
)
from pyiita.algorithms.quasi_orders import generate_quasi_orders, num_quasi_orders
from pyiita.algorithms.diff import compute_diff, compute_diffs
from pyiita.algorithms.selection import SelectionRule, select_quasi_orders
from pyiita.algorithms.iita import iita, iita_na
from pyiita.graph.transitive_closure import is_transitive, transitive_closure
from pyiita.graph.prerequisite_graph import PrerequisiteGraph
from pyiita.report import format_implications, summarize
from pyiita.datasets import load_knowledge_complete, load_knowledge_missing
from pyiita._config import get_default_selrule, set_default_selrule

__version__ = "0.1.0"

__all__ = [
    # Data structures
    "ResponseMatrix",
    "ResponseValue",
    # Result types
    "AnalysisResult",
    "FitScore",
    "SelectionResult",
    # Analysis
    "iita",
    "iita_na",
    "generate_quasi_orders",
    "num_quasi_orders",
    "compute_diff",
    "compute_diffs",
    "SelectionRule",
    "select_quasi_orders",
    # Relations
    "transitive_closure",
    "is_transitive",
    "PrerequisiteGraph",
    # Reporting
    "summarize",
    "format_implications",
    # Datasets
    "load_knowledge_complete",
    "load_knowledge_missing",
    # Configuration
    "get_default_selrule",
    "set_default_selrule",
    # Exceptions
    "IITAError",
    "InvalidArgumentError",
    "DataValidationError",
    "InvalidDataValueError",
    "DimensionError",
    "InsufficientDataError",
    # Warnings
    "DataQualityWarning",
]
