"""
Main facade class for simple graphs.

This module provides the pysimplegraph class that exposes the public graph API
while delegating to specialized modules.
"""

import logging
from typing import Any, Iterable, List, Tuple

from ..classes.vertex import _UNSET
from ..classes.index_view import IndexView
from .graph import VertexStore
from ..analysis.traversal import GraphTraversal
from ..analysis.detection import StructureAnalyzer
from ..analysis.approximation import SetApproximator
from ..operations.completion import GraphCompleter

logger = logging.getLogger(__name__)


class pysimplegraph:
    """
    Undirected, unweighted graph without loops or multiple edges.

    Vertices are identified by unique non-negative integer indices and may
    each carry one payload value of any type. Queries never hand out
    references into the graph: collections of indices come back as read-only
    IndexView snapshots.
    """

    def __init__(self):
        """Create an empty graph."""
        self._graph = VertexStore()

        self._traversal = GraphTraversal(self._graph)
        self._analyzer = StructureAnalyzer(self._graph, self._traversal)
        self._approximator = SetApproximator(self._graph, self._analyzer)
        self._completer = GraphCompleter(self._graph, self._analyzer)

    # ========================================================================
    # VERTEX STORE
    # ========================================================================

    def add_vertex(self, index: int, data: Any = _UNSET) -> bool:
        """
        Add a vertex, optionally storing data in it.

        The data is only stored when the vertex is actually created.

        Returns:
            True if the vertex was created, False if the index already exists

        Raises:
            NegativeIndexError: If the index is negative
        """
        return self._graph.add_vertex(index, data)

    def add_vertices(self, indices: Iterable[int]) -> bool:
        """Add several vertices; True only if all of them were new. Not atomic."""
        return self._graph.add_vertices(indices)

    def remove_vertex(self, index: int) -> bool:
        """Remove a vertex together with its edges."""
        return self._graph.remove_vertex(index)

    def remove_vertices(self, indices: Iterable[int]) -> bool:
        """Remove several vertices in order. Not atomic."""
        return self._graph.remove_vertices(indices)

    def connect(self, index_v: int, index_u: int) -> bool:
        """Add the edge v-u; False for loops and existing edges."""
        return self._graph.connect(index_v, index_u)

    def disconnect(self, index_v: int, index_u: int) -> bool:
        """Remove the edge v-u; False if there is no such edge."""
        return self._graph.disconnect(index_v, index_u)

    def vertices(self) -> IndexView:
        """Sorted read-only view of all vertex indices."""
        return IndexView(self._graph.id_to_vertex.keys())

    def neighbourhood(self, index: int) -> IndexView:
        """Sorted read-only view of the indices adjacent to a vertex."""
        pVertex = self._graph.get_vertex(index)
        return IndexView(pNeighbour.lVertexID for pNeighbour in pVertex.aNeighbour)

    def degree(self, index: int) -> int:
        return self._graph.get_vertex(index).degree

    def edges(self) -> Tuple[Tuple[int, int], ...]:
        """All edges as (v, u) pairs with v < u, in ascending order."""
        return tuple(self._graph.get_edges())

    def is_vertex(self, index: int) -> bool:
        return self._graph.is_vertex(index)

    def are_vertices(self, indices: Iterable[int]) -> bool:
        return self._graph.are_vertices(indices)

    def get_data(self, index: int, default: Any = None) -> Any:
        """Data stored in a vertex, or default when nothing was stored."""
        return self._graph.get_data(index, default)

    def set_data(self, index: int, data: Any) -> None:
        self._graph.set_data(index, data)

    def has_data(self, index: int) -> bool:
        """True if data (possibly None) was stored in the vertex."""
        return self._graph.has_data(index)

    def clear_data(self, index: int) -> None:
        self._graph.clear_data(index)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def breadth_first_visit(self, indices: Iterable[int]) -> int:
        """Number of subset vertices a breadth-first walk reaches from the first one."""
        return self._traversal.breadth_first_visit(self._graph.resolve(indices))

    def depth_first_visit(self, indices: Iterable[int]) -> int:
        """Number of subset vertices a depth-first walk reaches from the first one."""
        return self._traversal.depth_first_visit(self._graph.resolve(indices))

    def connected_components(self) -> List[IndexView]:
        """Vertex sets of the connected components, ordered by smallest index."""
        aComponent = self._traversal.find_components(self._graph.get_vertices())
        return [self._to_view(component) for component in aComponent]

    # ========================================================================
    # STRUCTURAL QUERIES
    # ========================================================================

    def is_connected(self) -> bool:
        return self._analyzer.is_connected()

    def does_induce_connected_subgraph(self, indices: Iterable[int]) -> bool:
        return self._analyzer.is_connected_subgraph(self._graph.resolve(indices))

    def is_complete(self) -> bool:
        return self._analyzer.is_complete()

    def is_bipartite(self) -> bool:
        return self._analyzer.is_bipartite()

    def does_induce_bipartite_subgraph(self, indices: Iterable[int]) -> bool:
        """Bipartiteness of the induced subgraph; an empty subset is not bipartite."""
        return self._analyzer.is_bipartite_subgraph(self._graph.resolve(indices))

    def are_all_components_bipartite(self) -> bool:
        """Bipartiteness of every connected component, not only the one holding the lowest index."""
        return self._analyzer.are_components_bipartite(self._graph.get_vertices())

    def is_dominating_set(self, indices: Iterable[int]) -> bool:
        return self._analyzer.is_dominating_set(self._graph.resolve(indices))

    def is_connected_dominating_set(self, indices: Iterable[int]) -> bool:
        return self._analyzer.is_connected_dominating_set(self._graph.resolve(indices))

    def is_independent_set(self, indices: Iterable[int]) -> bool:
        return self._analyzer.is_independent_set(self._graph.resolve(indices))

    # ========================================================================
    # SET CONSTRUCTION
    # ========================================================================

    def compute_minimum_dominating_set(self) -> IndexView:
        """Greedy approximation of a minimum dominating set."""
        return self._to_view(self._approximator.compute_minimum_dominating_set())

    def compute_minimum_connected_dominating_set(self) -> IndexView:
        """Greedy approximation of a minimum connected dominating set."""
        return self._to_view(self._approximator.compute_minimum_connected_dominating_set())

    def compute_maximal_independent_set(self) -> IndexView:
        """Greedy approximation of a maximum independent set."""
        return self._to_view(self._approximator.compute_maximal_independent_set())

    # ========================================================================
    # COMPLETE GRAPHS
    # ========================================================================

    def complete(self, start_index: int, size: int) -> "pysimplegraph":
        """
        Turn an empty graph into the complete graph on size consecutive indices.

        Returns:
            This graph, to allow chaining
        """
        self._completer.complete(start_index, size)
        return self

    def map_to_complete(self) -> None:
        """Connect every pair of existing vertices."""
        self._completer.map_to_complete()

    # ========================================================================
    # PYTHON PROTOCOLS
    # ========================================================================

    @staticmethod
    def _to_view(aVertex) -> IndexView:
        return IndexView(pVertex.lVertexID for pVertex in aVertex)

    def __len__(self) -> int:
        return self._graph.get_vertex_count()

    def __contains__(self, index) -> bool:
        return isinstance(index, int) and index >= 0 and index in self._graph.id_to_vertex

    def __iter__(self):
        return iter(self.vertices())

    def __str__(self):
        from ..formats.export_graph import format_graph
        return format_graph(self)

    def __repr__(self):
        return f"pysimplegraph(vertices={len(self)}, edges={self._graph.get_edge_count()})"
