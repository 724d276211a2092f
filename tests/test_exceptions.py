"""Tests for custom exceptions and error handling in pyiita."""

import numpy as np
import pytest

from pyiita import (
    # Data containers
    ResponseMatrix,
    # Exceptions
    IITAError,
    InvalidArgumentError,
    DataValidationError,
    InvalidDataValueError,
    DimensionError,
    InsufficientDataError,
    # Warnings
    DataQualityWarning,
    # Functions
    compute_diff,
    generate_quasi_orders,
    iita,
    select_quasi_orders,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correct."""

    def test_iita_error_is_value_error(self):
        """IITAError should inherit from ValueError."""
        assert issubclass(IITAError, ValueError)

    def test_argument_error_hierarchy(self):
        """InvalidArgumentError should inherit from IITAError."""
        assert issubclass(InvalidArgumentError, IITAError)
        assert not issubclass(InvalidArgumentError, DataValidationError)

    def test_data_validation_error_hierarchy(self):
        """DataValidationError and subclasses should inherit from IITAError."""
        assert issubclass(DataValidationError, IITAError)
        assert issubclass(InvalidDataValueError, DataValidationError)
        assert issubclass(DimensionError, DataValidationError)
        assert issubclass(InsufficientDataError, DataValidationError)

    def test_warnings_hierarchy(self):
        """Warning classes should inherit from UserWarning."""
        assert issubclass(DataQualityWarning, UserWarning)

    def test_catch_all_iita_errors(self):
        """All library errors should be catchable with IITAError."""
        with pytest.raises(IITAError):
            generate_quasi_orders(0)
        with pytest.raises(IITAError):
            ResponseMatrix(np.array([[0, 7]]))
        with pytest.raises(IITAError):
            select_quasi_orders([0.1], "strict")


class TestErrorMessages:
    """Test that error messages are actionable."""

    def test_item_count_message(self):
        """Message names the offending value."""
        with pytest.raises(InvalidArgumentError, match="got 0"):
            generate_quasi_orders(0)

    def test_dimension_message_names_item_count(self):
        """Message states the expected quasi-order size."""
        data = np.zeros((4, 3))
        with pytest.raises(DimensionError, match="3 items"):
            compute_diff(data, np.zeros((2, 2)))

    def test_invalid_value_message_has_hint(self):
        """Message says which values are allowed."""
        with pytest.raises(InvalidDataValueError, match="0, 1, or missing"):
            ResponseMatrix(np.array([[0, 1], [1, -1]]))

    def test_selrule_message_lists_options(self):
        """Message lists both selection rules."""
        with pytest.raises(InvalidArgumentError, match="'minimal' or 'corrected'"):
            iita(np.array([[0, 1]]), selrule="best")

    def test_errors_chain_original_cause(self):
        """Unreadable data keeps the underlying numpy error as cause."""
        with pytest.raises(InvalidDataValueError) as exc_info:
            ResponseMatrix([["a", "b"]])

        assert isinstance(exc_info.value.__cause__, ValueError)
