"""Custom exceptions and warnings for pyiita.

This module provides a hierarchy of exceptions for specific error types,
all inheriting from ValueError so that callers catching ValueError keep
working.

Exception Hierarchy:
    IITAError (ValueError)
    ├── InvalidArgumentError
    └── DataValidationError
        ├── InvalidDataValueError
        ├── DimensionError
        └── InsufficientDataError

Warning Classes:
    DataQualityWarning (UserWarning)
"""

from __future__ import annotations


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class IITAError(ValueError):
    """Base exception for all pyiita errors.

    Inherits from ValueError, so code that catches ValueError also
    catches every pyiita error.

    Example:
        >>> try:
        ...     result = iita(data, selrule="strict")
        ... except IITAError as e:
        ...     print(f"IITA error: {e}")
    """

    pass


# =============================================================================
# ARGUMENT EXCEPTIONS
# =============================================================================


class InvalidArgumentError(IITAError):
    """Raised when a scalar argument or option is not acceptable.

    Common causes:
        - Item count that is not a positive integer
        - Selection rule other than "minimal" or "corrected"
        - Empty diff vector passed to selection
        - Candidate set that is empty or not a sequence

    Example:
        >>> generate_quasi_orders(0)
        InvalidArgumentError: ni must be a positive integer, got 0...
    """

    pass


# =============================================================================
# DATA VALIDATION EXCEPTIONS
# =============================================================================


class DataValidationError(IITAError):
    """Raised when input data fails validation checks.

    This is the base class for all data-related validation errors.
    Use more specific subclasses when possible.
    """

    pass


class InvalidDataValueError(DataValidationError):
    """Raised when the response matrix holds a value other than 0, 1 or missing.

    Missing responses are given as NaN, None or pandas NA.

    Example:
        >>> ResponseMatrix(np.array([[0, 1], [2, 1]]))
        InvalidDataValueError: Found 1 values other than 0, 1 or missing...
    """

    pass


class DimensionError(DataValidationError):
    """Raised when array dimensions are incompatible.

    Common causes:
        - Response matrix is not 2D (subjects x items)
        - A quasi-order is not square
        - A quasi-order side length differs from the item count

    Example:
        >>> compute_diff(np.zeros((4, 3)), np.zeros((2, 2)))
        DimensionError: quasi-order has shape (2, 2) but the data has 3 items...
    """

    pass


class InsufficientDataError(DataValidationError):
    """Raised when the response matrix has no items to analyze.

    Example:
        >>> ResponseMatrix(np.empty((5, 0)))
        InsufficientDataError: Must have at least one item...
    """

    pass


# =============================================================================
# WARNINGS
# =============================================================================


class DataQualityWarning(UserWarning):
    """Warning for data quality issues that don't prevent computation.

    Emitted when:
        - An item has no observed responses at all
        - The whole response matrix is missing

    Relations touching such items contribute no comparisons, so their diff
    values are 0 by definition.

    Example:
        >>> import warnings
        >>> warnings.filterwarnings('ignore', category=DataQualityWarning)
    """

    pass
