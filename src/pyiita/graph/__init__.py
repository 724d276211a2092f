"""Graph utilities for prerequisite relations."""

from pyiita.graph.transitive_closure import is_transitive, transitive_closure
from pyiita.graph.prerequisite_graph import PrerequisiteGraph

__all__ = [
    "transitive_closure",
    "is_transitive",
    "PrerequisiteGraph",
]
