"""Result dataclasses for inductive item tree analysis.

Results are plain frozen containers. Presentation lives in
:mod:`pyiita.report`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pyiita.core.types import FloatArray, QuasiOrder


@dataclass(frozen=True)
class FitScore:
    """
    Fit of one quasi-order to the response data.

    Attributes:
        diff: Fraction of qualifying comparisons that violate a relation,
            in [0, 1]; 0.0 when there are no comparisons
        error_rate: Error rate of the quasi-order (equal to diff for IITA)
        violations: Number of (subject, relation) pairs where the dependent
            item was solved but its prerequisite failed
        comparisons: Number of (subject, relation) pairs with both responses
            observed
    """

    diff: float
    error_rate: float
    violations: int
    comparisons: int

    @classmethod
    def from_counts(cls, violations: int, comparisons: int) -> FitScore:
        """Build a FitScore from raw violation and comparison counts."""
        diff = violations / comparisons if comparisons > 0 else 0.0
        return cls(
            diff=diff,
            error_rate=diff,
            violations=violations,
            comparisons=comparisons,
        )


@dataclass(frozen=True)
class SelectionResult:
    """
    Candidates chosen by a selection rule.

    Attributes:
        indices: 1-based positions of the selected candidates, increasing
        selrule: Selection rule used ("minimal" or "corrected")
        min_diff: Smallest diff value among all candidates
        threshold: Largest diff value that was still selected by the rule
            (min_diff for "minimal", min_diff + sqrt(min_diff) for "corrected")
    """

    indices: tuple[int, ...]
    selrule: str
    min_diff: float
    threshold: float

    @property
    def num_selected(self) -> int:
        """Number of selected candidates."""
        return len(self.indices)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Result of an inductive item tree analysis.

    Several selected quasi-orders is a normal outcome: it means those
    structures fit the data equally well (often the empty structure together
    with structures whose relations all happen to hold).

    Attributes:
        ni: Number of items
        nq: Number of competing quasi-orders tested
        num_subjects: Number of subjects (rows) in the response data
        diff: Read-only float64 vector of diff values, aligned with v
        error_rate: Read-only float64 vector of error rates, aligned with v
        fit_scores: Per-candidate FitScore with raw counts, aligned with v
        selection: Selected candidates and the rule that chose them
        implications: Selected quasi-orders, in selection order
        v: The competing quasi-orders, in the order they were scored
        item_names: Item labels, if the data carried them
        computation_time_ms: Time taken to compute result in milliseconds
    """

    ni: int
    nq: int
    num_subjects: int
    diff: FloatArray
    error_rate: FloatArray
    fit_scores: tuple[FitScore, ...]
    selection: SelectionResult
    implications: list[QuasiOrder]
    v: list[QuasiOrder]
    item_names: tuple[str, ...] | None
    computation_time_ms: float

    @property
    def selection_set_index(self) -> tuple[int, ...]:
        """1-based indices of the selected quasi-orders."""
        return self.selection.indices

    @property
    def selrule(self) -> str:
        """Selection rule used."""
        return self.selection.selrule

    @property
    def min_diff(self) -> float:
        """Smallest diff value over all candidates."""
        return self.selection.min_diff

    @property
    def num_selected(self) -> int:
        """Number of selected quasi-orders."""
        return self.selection.num_selected

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "ni": self.ni,
            "nq": self.nq,
            "num_subjects": self.num_subjects,
            "diff": self.diff.tolist(),
            "error_rate": self.error_rate.tolist(),
            "selection_set_index": list(self.selection_set_index),
            "selrule": self.selrule,
            "min_diff": self.min_diff,
            "threshold": self.selection.threshold,
            "implications": [np.asarray(q).tolist() for q in self.implications],
            "item_names": list(self.item_names) if self.item_names else None,
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        return (
            f"AnalysisResult(ni={self.ni}, nq={self.nq}, selrule={self.selrule!r}, "
            f"selected={list(self.selection_set_index)}, min_diff={self.min_diff:.4f})"
        )
