"""
Structural queries for simple graphs.

This module answers yes/no questions about the whole graph or about the
subgraph induced by a vertex subset.
"""

import logging
from typing import Dict, Sequence
from collections import deque

from ..classes.vertex import pyvertex
from ..core.graph import VertexStore
from .traversal import GraphTraversal

logger = logging.getLogger(__name__)


class StructureAnalyzer:
    """
    Detects structural properties of graphs and induced subgraphs.

    This class provides methods for:
    - Connectivity of the graph or of an induced subgraph
    - Completeness
    - Bipartiteness of the graph or of an induced subgraph
    - Dominating, connected dominating and independent set membership
    """

    def __init__(self, graph: VertexStore, traversal: GraphTraversal):
        """
        Initialize the structure analyzer.

        Args:
            graph: VertexStore instance to analyze
            traversal: GraphTraversal used for reachability
        """
        self.graph = graph
        self.traversal = traversal

    def is_connected(self) -> bool:
        """Check connectivity of the whole graph. The empty graph is connected."""
        return self.is_connected_subgraph(self.graph.get_vertices())

    def is_connected_subgraph(self, subset: Sequence[pyvertex]) -> bool:
        """
        Check whether the subset induces a connected subgraph.

        Args:
            subset: Duplicate-free vertices of the subgraph

        Returns:
            True if a depth-first walk inside the subset reaches all of it
        """
        return self.traversal.depth_first_visit(subset) == len(subset)

    def is_complete(self) -> bool:
        """Check that every vertex is adjacent to every other vertex."""
        aVertex = self.graph.get_vertices()
        nVertex = len(aVertex)
        for pVertex in aVertex:
            if pVertex.degree != nVertex - 1:
                return False
        return True

    def is_bipartite(self) -> bool:
        return self.is_bipartite_subgraph(self.graph.get_vertices())

    def is_bipartite_subgraph(self, subset: Sequence[pyvertex]) -> bool:
        """
        Two-colour the subgraph induced by the subset.

        Colouring runs breadth-first from the first vertex of the subset,
        which gets colour 1. Only the piece reachable from that vertex is
        coloured. An empty subset is not bipartite.

        Args:
            subset: Duplicate-free vertices of the subgraph

        Returns:
            True if no edge met by the colouring joins two vertices of the same colour
        """
        if not subset:
            return False

        members = set(subset)
        start = subset[0]
        colour: Dict[pyvertex, int] = {start: 1}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbour in sorted(current.aNeighbour):
                if neighbour not in members:
                    continue
                if neighbour not in colour:
                    colour[neighbour] = 1 - colour[current]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[current]:
                    logger.debug(f"Edge {current}-{neighbour} joins two vertices of colour {colour[current]}")
                    return False

        return True

    def are_components_bipartite(self, subset: Sequence[pyvertex]) -> bool:
        """
        Two-colour every connected piece of the subgraph induced by the subset.

        Each piece is checked with is_bipartite_subgraph from its own first
        vertex. An empty subset is not bipartite.
        """
        if not subset:
            return False
        for component in self.traversal.find_components(subset):
            if not self.is_bipartite_subgraph(component):
                return False
        return True

    def is_dominating_set(self, subset: Sequence[pyvertex]) -> bool:
        """Check that every vertex outside the subset has a neighbour inside it."""
        members = set(subset)
        for pVertex in self.graph.get_vertices():
            if pVertex in members:
                continue
            if pVertex.aNeighbour.isdisjoint(members):
                return False
        return True

    def is_connected_dominating_set(self, subset: Sequence[pyvertex]) -> bool:
        """
        Check that the subset is dominating and induces a connected subgraph.

        Args:
            subset: Duplicate-free candidate vertices

        Returns:
            True if both conditions hold
        """
        if not self.is_connected_subgraph(subset):
            return False
        return self.is_dominating_set(subset)

    def is_independent_set(self, subset: Sequence[pyvertex]) -> bool:
        """
        Check that no two vertices of the subset are adjacent.

        Args:
            subset: Duplicate-free candidate vertices

        Returns:
            True if the subset is non-empty and spans no edge
        """
        if not subset:
            return False
        members = set(subset)
        return all(pVertex.aNeighbour.isdisjoint(members) for pVertex in subset)
