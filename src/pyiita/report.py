"""Plain-text reports for item tree analysis results.

Results carry no presentation behavior; this module turns a finished
AnalysisResult into a human-readable summary.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pyiita.core.result import AnalysisResult


REPORT_WIDTH = 64
LABEL_WIDTH = 26


def _format_header(title: str) -> str:
    """Title line followed by a full-width rule."""
    return f"{title}\n{'=' * REPORT_WIDTH}"


def _format_metric(label: str, value: Any) -> str:
    """Label padded to a fixed column, then the value; diffs get 4 decimals."""
    if isinstance(value, float):
        value = f"{value:.4f}"
    return f"  {label + ':':<{LABEL_WIDTH}} {value}"


def _format_section(title: str) -> str:
    """Blank line, then the section title."""
    return f"\n{title}:"


def _format_footer(computation_time_ms: float) -> str:
    """Computation time above a closing rule."""
    return f"\nComputation Time: {computation_time_ms:.2f} ms\n{'-' * REPORT_WIDTH}"


def _format_indices(indices: Sequence[int], max_items: int = 20) -> str:
    """Format selected indices, truncating long selections."""
    shown = " ".join(str(k) for k in indices[:max_items])
    if len(indices) > max_items:
        shown += f" ... ({len(indices) - max_items} more)"
    return shown


def format_implications(order: Any, item_names: Sequence[str] | None = None) -> list[str]:
    """
    List the prerequisite relations of a quasi-order, one line each.

    Args:
        order: m x m binary relation matrix
        item_names: Optional labels; defaults to "Item 1", "Item 2", ...

    Returns:
        Lines of the form "Item i -> Item j", or a single
        "(no prerequisite relations)" line for the empty relation

    Example:
        >>> format_implications([[0, 1], [0, 0]])
        ['Item 1 -> Item 2']
    """
    relation = np.asarray(order)
    m = relation.shape[0]
    labels = list(item_names) if item_names is not None else [f"Item {k + 1}" for k in range(m)]

    lines = [
        f"{labels[i]} -> {labels[j]}"
        for i in range(m)
        for j in range(m)
        if i != j and relation[i, j] == 1
    ]
    return lines or ["(no prerequisite relations)"]


def summarize(result: AnalysisResult) -> str:
    """
    Return a human-readable summary of an analysis result.

    With a single selected quasi-order its implications are listed. With
    several, the most complex selected quasi-order (most relations, first
    on ties) is shown as a starting point for interpretation.

    Args:
        result: Result returned by :func:`pyiita.iita`

    Returns:
        Multi-line report string

    Example:
        >>> print(summarize(iita(data)))
    """
    lines = [_format_header("INDUCTIVE ITEM TREE ANALYSIS")]

    lines.append(_format_section("Metrics"))
    lines.append(_format_metric("Number of items", result.ni))
    lines.append(_format_metric("Number of subjects", result.num_subjects))
    lines.append(_format_metric("Quasi-orders tested", result.nq))
    lines.append(_format_metric("Selection rule", result.selrule))
    lines.append(_format_metric("Minimum diff value", result.min_diff))
    lines.append(_format_metric("Selection threshold", result.selection.threshold))
    lines.append(_format_metric("Quasi-orders selected", result.num_selected))

    lines.append(_format_section("Selected Quasi-Orders"))
    lines.append(f"  Indices: {_format_indices(result.selection_set_index)}")

    if result.num_selected == 1:
        lines.append(_format_section("Implications"))
        for line in format_implications(result.implications[0], result.item_names):
            lines.append(f"  {line}")
    else:
        lines.append("  Multiple quasi-orders fit equally well; see result.implications.")
        complexities = [int(np.count_nonzero(np.asarray(q) == 1)) for q in result.implications]
        most_complex = int(np.argmax(complexities))
        if complexities[most_complex] > 0:
            index = result.selection_set_index[most_complex]
            lines.append(
                _format_section(
                    f"Most Complex Selected Quasi-Order (index {index}, "
                    f"{complexities[most_complex]} relations)"
                )
            )
            for line in format_implications(result.implications[most_complex], result.item_names):
                lines.append(f"  {line}")

    lines.append(_format_footer(result.computation_time_ms))
    return "\n".join(lines)
