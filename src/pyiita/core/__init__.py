"""Core data structures for pyiita."""

from pyiita.core.responses import ResponseMatrix, ResponseValue
from pyiita.core.result import (
    AnalysisResult,
    FitScore,
    SelectionResult,
)
from pyiita.core.exceptions import (
    IITAError,
    InvalidArgumentError,
    DataValidationError,
    InvalidDataValueError,
    DimensionError,
    InsufficientDataError,
    DataQualityWarning,
)

__all__ = [
    "ResponseMatrix",
    "ResponseValue",
    "AnalysisResult",
    "FitScore",
    "SelectionResult",
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
