"""Response matrix container for item tree analysis.

A response matrix records, for each subject (row) and item (column), whether
the subject solved the item, failed it, or has no recorded response. It is
validated once when constructed; the analysis core only ever sees the
validated integer codes.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyiita.core.exceptions import (
    DataQualityWarning,
    DimensionError,
    InsufficientDataError,
    InvalidDataValueError,
)
from pyiita.core.types import BoolArray, CodeArray


class ResponseValue(IntEnum):
    """Cell value of a response matrix."""

    FAIL = 0
    PASS = 1
    MISSING = -1


@dataclass(eq=False)
class ResponseMatrix:
    """
    Binary subject-by-item response data with optional missing entries.

    Each row is one subject, each column one item. Entries are 1 (item
    solved), 0 (item failed), or missing. Missing entries may be given as
    NaN, None, or pandas NA; internally they are stored as
    ``ResponseValue.MISSING`` in a read-only int8 code matrix, so no float
    sentinel travels through the analysis.

    Attributes:
        responses: The raw input (2D array-like or pandas DataFrame).
        item_names: Optional item labels, one per column. Taken from the
            DataFrame columns when a DataFrame is passed and no names are given.
        codes: n x m int8 matrix of ResponseValue codes (read-only).

    Example:
        >>> import numpy as np
        >>> data = ResponseMatrix(np.array([
        ...     [0, 0, 0],
        ...     [1, 0, np.nan],
        ...     [1, 1, 0],
        ... ]))
        >>> data.num_items
        3
        >>> data.num_missing
        1
    """

    responses: Any = field(repr=False)
    item_names: Sequence[str] | None = None
    codes: CodeArray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Encode the raw responses and validate them."""
        if self.item_names is None and hasattr(self.responses, "columns"):
            self.item_names = [str(c) for c in self.responses.columns]

        self.codes = self._encode(self.responses)

        if self.item_names is not None:
            self.item_names = tuple(str(name) for name in self.item_names)
            if len(self.item_names) != self.num_items:
                raise DimensionError(
                    f"Got {len(self.item_names)} item names for {self.num_items} items. "
                    f"Hint: Provide exactly one name per column."
                )

        self._check_observed_items()

    @staticmethod
    def _encode(raw: Any) -> CodeArray:
        """Convert raw input to a read-only int8 code matrix.

        Raises:
            InvalidDataValueError: If a cell is not 0, 1 or missing
            DimensionError: If the input is not 2D
            InsufficientDataError: If there are no items
        """
        try:
            if hasattr(raw, "to_numpy"):
                raw = raw.to_numpy(dtype=np.float64, na_value=np.nan)
            values = np.asarray(raw, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidDataValueError(
                f"Response data could not be read as a 2D numeric array ({exc}). "
                f"Entries must be 0, 1, or missing (NaN/None)."
            ) from exc

        if values.ndim != 2:
            raise DimensionError(
                f"Response data must be a 2D array (subjects x items), got {values.ndim}D "
                f"with shape {values.shape}. "
                f"Hint: Use .reshape(-1, ni) to convert 1D arrays."
            )
        if values.shape[1] < 1:
            raise InsufficientDataError(
                "Must have at least one item. "
                "Hint: Check that your data has at least one column."
            )

        missing = np.isnan(values)
        invalid = ~missing & (values != 0) & (values != 1)
        if np.any(invalid):
            invalid_positions = np.argwhere(invalid)
            pos_preview = invalid_positions[:5].tolist()
            pos_msg = str(pos_preview) + ("..." if len(invalid_positions) > 5 else "")
            raise InvalidDataValueError(
                f"Found {len(invalid_positions)} values other than 0, 1 or missing "
                f"at positions: {pos_msg}. "
                f"Response data must contain only 0, 1, or missing values (NaN/None)."
            )

        codes = np.where(missing, ResponseValue.MISSING, values).astype(np.int8)
        codes.setflags(write=False)
        return codes

    def _check_observed_items(self) -> None:
        """Warn about items without any observed response."""
        if self.num_subjects == 0:
            return
        if self.num_missing == self.codes.size:
            warnings.warn(
                "Every response is missing; all diff values will be 0.",
                DataQualityWarning,
                stacklevel=4,
            )
            return
        empty_items = np.flatnonzero(~np.any(self.observed, axis=0))
        if len(empty_items) > 0:
            labels = [self.labels[k] for k in empty_items[:5]]
            label_msg = str(labels) + ("..." if len(empty_items) > 5 else "")
            warnings.warn(
                f"{len(empty_items)} items have no observed responses: {label_msg}. "
                f"Relations involving them contribute no comparisons.",
                DataQualityWarning,
                stacklevel=4,
            )

    @property
    def observed(self) -> BoolArray:
        """n x m boolean mask, True where a response was recorded."""
        return self.codes != ResponseValue.MISSING

    @property
    def num_subjects(self) -> int:
        """Number of subjects (rows) n."""
        return self.codes.shape[0]

    @property
    def num_items(self) -> int:
        """Number of items (columns), the ``ni`` of the analysis."""
        return self.codes.shape[1]

    @property
    def num_missing(self) -> int:
        """Number of missing cells."""
        return int(np.count_nonzero(self.codes == ResponseValue.MISSING))

    @property
    def missing_fraction(self) -> float:
        """Fraction of cells that are missing (0.0 for an empty matrix)."""
        if self.codes.size == 0:
            return 0.0
        return self.num_missing / self.codes.size

    @property
    def is_complete(self) -> bool:
        """True if no cell is missing."""
        return self.num_missing == 0

    @property
    def labels(self) -> tuple[str, ...]:
        """Item labels, falling back to "Item 1", "Item 2", ..."""
        if self.item_names is not None:
            return tuple(self.item_names)
        return tuple(f"Item {k + 1}" for k in range(self.num_items))

    def to_array(self) -> NDArray[np.float64]:
        """Return responses as a float array with NaN for missing cells."""
        values = self.codes.astype(np.float64)
        values[self.codes == ResponseValue.MISSING] = np.nan
        return values

    @classmethod
    def from_dataframe(
        cls,
        df: Any,  # pandas.DataFrame
        item_cols: list[str] | None = None,
    ) -> ResponseMatrix:
        """
        Create ResponseMatrix from a pandas DataFrame.

        Args:
            df: DataFrame with one row per subject and one column per item
            item_cols: Columns to use as items (default: all columns)

        Returns:
            ResponseMatrix whose item names are the column names

        Example:
            >>> import pandas as pd
            >>> df = pd.DataFrame({'add': [1, 1, 0], 'mul': [1, None, 0]})
            >>> data = ResponseMatrix.from_dataframe(df)
            >>> data.item_names
            ('add', 'mul')
        """
        if item_cols is not None:
            df = df[item_cols]
        return cls(responses=df)


def as_response_matrix(data: Any) -> ResponseMatrix:
    """Return ``data`` as a ResponseMatrix, validating it if necessary."""
    if isinstance(data, ResponseMatrix):
        return data
    return ResponseMatrix(responses=data)
