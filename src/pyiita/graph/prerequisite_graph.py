"""PrerequisiteGraph: NetworkX view of a quasi-order over items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyiita.core.exceptions import DimensionError, InvalidArgumentError

if TYPE_CHECKING:
    import networkx as nx
    from pyiita.core.result import AnalysisResult


class PrerequisiteGraph:
    """
    NetworkX-based graph of the prerequisite relations in a quasi-order.

    Nodes are items (0-based, with a "label" attribute). An edge i -> j
    means item i is a prerequisite for item j.

    Example:
        >>> from pyiita import iita
        >>> from pyiita.graph import PrerequisiteGraph
        >>> result = iita(data)
        >>> graph = PrerequisiteGraph.from_result(result)
        >>> graph.edges()
        [(0, 1), (0, 2), (1, 2)]
        >>> graph.hasse_diagram().edges()
        [(0, 1), (1, 2)]
    """

    def __init__(
        self, order: Any, item_names: Sequence[str] | None = None
    ) -> None:
        """
        Initialize PrerequisiteGraph from a relation matrix.

        Args:
            order: m x m binary relation matrix
            item_names: Optional labels, one per item
        """
        relation = np.asarray(order)
        if relation.ndim != 2 or relation.shape[0] != relation.shape[1]:
            raise DimensionError(
                f"Relation must be a square 2D matrix, got shape {relation.shape}."
            )
        m = relation.shape[0]
        if item_names is not None and len(item_names) != m:
            raise DimensionError(f"Got {len(item_names)} item names for {m} items.")

        self.relation = relation == 1
        np.fill_diagonal(self.relation, False)
        self.item_names = (
            tuple(item_names) if item_names is not None
            else tuple(f"Item {k + 1}" for k in range(m))
        )
        self._graph: nx.DiGraph | None = None

    @classmethod
    def from_result(cls, result: AnalysisResult, rank: int = 0) -> PrerequisiteGraph:
        """
        Build the graph of one selected quasi-order.

        Args:
            result: Result returned by :func:`pyiita.iita`
            rank: Position within the selection (0 = first selected)

        Returns:
            PrerequisiteGraph of result.implications[rank]
        """
        if not 0 <= rank < result.num_selected:
            raise InvalidArgumentError(
                f"rank must be in [0, {result.num_selected}), got {rank}."
            )
        return cls(result.implications[rank], result.item_names)

    @property
    def num_items(self) -> int:
        """Number of items (nodes)."""
        return self.relation.shape[0]

    @property
    def graph(self) -> nx.DiGraph:
        """Lazily build and return the NetworkX graph."""
        if self._graph is None:
            self._graph = self._build_graph()
        return self._graph

    def _build_graph(self) -> nx.DiGraph:
        """Build NetworkX directed graph from the relation matrix."""
        import networkx as nx

        G = nx.DiGraph()
        for k in range(self.num_items):
            G.add_node(k, label=self.item_names[k])

        for i, j in np.argwhere(self.relation):
            G.add_edge(int(i), int(j))

        return G

    @property
    def is_acyclic(self) -> bool:
        """True if no two distinct items are prerequisites of each other."""
        import networkx as nx

        return nx.is_directed_acyclic_graph(self.graph)

    def edges(self) -> list[tuple[int, int]]:
        """
        Get the prerequisite relations as sorted (prerequisite, dependent) pairs.

        Returns:
            List of 0-based (i, j) tuples
        """
        return sorted((int(u), int(v)) for u, v in self.graph.edges())

    def labeled_edges(self) -> list[tuple[str, str]]:
        """Prerequisite relations as (prerequisite label, dependent label) pairs."""
        return [(self.item_names[i], self.item_names[j]) for i, j in self.edges()]

    def hasse_diagram(self) -> PrerequisiteGraph:
        """
        Return the transitive reduction (covering relations only).

        Raises:
            InvalidArgumentError: If the relation has cycles, which have no
                unique transitive reduction
        """
        import networkx as nx

        if not self.is_acyclic:
            raise InvalidArgumentError(
                "Hasse diagram requires an acyclic relation; this quasi-order "
                "has items that are prerequisites of each other."
            )
        reduced = nx.transitive_reduction(self.graph)
        matrix = np.zeros((self.num_items, self.num_items), dtype=np.int8)
        for u, v in reduced.edges():
            matrix[u, v] = 1
        return PrerequisiteGraph(matrix, self.item_names)

    def to_adjacency_matrix(self) -> NDArray[np.int8]:
        """
        Return adjacency matrix of the prerequisite graph.

        Returns:
            m x m int8 matrix where result[i,j] = 1 if edge i->j exists
        """
        import networkx as nx

        return nx.to_numpy_array(
            self.graph, nodelist=list(range(self.num_items)), dtype=np.int8
        )
