"""
Core graph data structure for simple undirected graphs.

This module provides the vertex store: the fundamental graph structure
without queries or algorithms. Every mutation of the graph goes through it.
"""

import logging
from typing import Any, Dict, Iterable, List, Tuple

from ..classes.vertex import pyvertex, _UNSET
from .exceptions import NegativeIndexError, NoSuchVertexError

logger = logging.getLogger(__name__)


class VertexStore:
    """
    Vertex store of an undirected, unweighted graph without loops or multiple edges.

    This class manages the fundamental graph representation. It provides:
    - Index validation and vertex lookup
    - Vertex creation and removal (with edge cascade)
    - Symmetric edge insertion and deletion
    - Per-vertex payload access
    """

    def __init__(self):
        """Initialize an empty vertex store."""
        self.id_to_vertex: Dict[int, pyvertex] = {}

    @staticmethod
    def check_index(index: int) -> int:
        """
        Validate a vertex index.

        Raises:
            NegativeIndexError: If the index is negative
        """
        if index < 0:
            raise NegativeIndexError(index)
        return index

    def get_vertex(self, index: int) -> pyvertex:
        """
        Get the vertex with the given index.

        Args:
            index: Vertex index

        Returns:
            The vertex object

        Raises:
            NegativeIndexError: If the index is negative
            NoSuchVertexError: If no vertex has this index
        """
        self.check_index(index)
        pVertex = self.id_to_vertex.get(index)
        if pVertex is None:
            raise NoSuchVertexError(index)
        return pVertex

    def resolve(self, indices: Iterable[int]) -> List[pyvertex]:
        """
        Map indices to vertices, keeping the caller's order and dropping repeats.

        Raises:
            NegativeIndexError: If an index is negative
            NoSuchVertexError: If an index does not name a vertex
        """
        aVertex = []
        seen = set()
        for index in indices:
            pVertex = self.get_vertex(index)
            if pVertex not in seen:
                seen.add(pVertex)
                aVertex.append(pVertex)
        return aVertex

    def get_vertices(self) -> List[pyvertex]:
        """Get all vertices ordered by index."""
        return sorted(self.id_to_vertex.values())

    def get_vertex_count(self) -> int:
        return len(self.id_to_vertex)

    def get_edge_count(self) -> int:
        return sum(pVertex.degree for pVertex in self.id_to_vertex.values()) // 2

    def get_edges(self) -> List[Tuple[int, int]]:
        """Get every edge once, as (smaller index, larger index) pairs in order."""
        aEdge = []
        for pVertex in self.get_vertices():
            for pNeighbour in sorted(pVertex.aNeighbour):
                if pVertex.lVertexID < pNeighbour.lVertexID:
                    aEdge.append((pVertex.lVertexID, pNeighbour.lVertexID))
        return aEdge

    def is_vertex(self, index: int) -> bool:
        """
        Check whether a vertex with the given index exists.

        Raises:
            NegativeIndexError: If the index is negative
        """
        return self.check_index(index) in self.id_to_vertex

    def are_vertices(self, indices: Iterable[int]) -> bool:
        """
        Check whether every index names a vertex. An empty collection is rejected.

        Raises:
            NegativeIndexError: If an index is negative
        """
        aIndex = list(indices)
        if not aIndex:
            return False
        return all(self.is_vertex(index) for index in aIndex)

    def add_vertex(self, index: int, data: Any = _UNSET) -> bool:
        """
        Add a vertex without neighbours.

        Args:
            index: Index of the new vertex
            data: Optional payload, only stored when the vertex is created

        Returns:
            True if the vertex was created, False if the index was already taken

        Raises:
            NegativeIndexError: If the index is negative
        """
        if self.is_vertex(index):
            return False
        self.id_to_vertex[index] = pyvertex(index, data)
        logger.debug(f"Added vertex {index}")
        return True

    def add_vertices(self, indices: Iterable[int]) -> bool:
        """
        Add vertices one by one in the given order.

        The batch is not atomic: vertices added before a failing index stay in
        the graph.

        Returns:
            True only if every index produced a new vertex

        Raises:
            NegativeIndexError: If an index is negative
        """
        iFlag_all_added = True
        for index in indices:
            if not self.add_vertex(index):
                iFlag_all_added = False
        return iFlag_all_added

    def remove_vertex(self, index: int) -> bool:
        """
        Remove a vertex after disconnecting it from all its neighbours.

        Raises:
            NegativeIndexError: If the index is negative
            NoSuchVertexError: If no vertex has this index
        """
        pVertex = self.get_vertex(index)
        nEdge = pVertex.isolate()
        del self.id_to_vertex[index]
        logger.debug(f"Removed vertex {index} and {nEdge} incident edges")
        return True

    def remove_vertices(self, indices: Iterable[int]) -> bool:
        """
        Remove vertices one by one in the given order.

        The batch is not atomic: vertices removed before a failing index stay
        removed.

        Raises:
            NegativeIndexError: If an index is negative
            NoSuchVertexError: If an index does not name a vertex
        """
        for index in indices:
            self.remove_vertex(index)
        return True

    def connect(self, index_v: int, index_u: int) -> bool:
        """
        Connect two vertices. Both endpoints are resolved before anything changes.

        Returns:
            False for a self-loop or an existing edge, True otherwise
        """
        pVertex_v = self.get_vertex(index_v)
        pVertex_u = self.get_vertex(index_u)
        iFlag_connected = pVertex_v.connect_with(pVertex_u)
        if iFlag_connected:
            logger.debug(f"Connected vertices {index_v} and {index_u}")
        return iFlag_connected

    def disconnect(self, index_v: int, index_u: int) -> bool:
        """
        Disconnect two vertices. Both endpoints are resolved before anything changes.

        Returns:
            False if the vertices are equal or not adjacent, True otherwise
        """
        pVertex_v = self.get_vertex(index_v)
        pVertex_u = self.get_vertex(index_u)
        iFlag_disconnected = pVertex_v.disconnect_from(pVertex_u)
        if iFlag_disconnected:
            logger.debug(f"Disconnected vertices {index_v} and {index_u}")
        return iFlag_disconnected

    def get_data(self, index: int, default: Any = None) -> Any:
        return self.get_vertex(index).get_data(default)

    def set_data(self, index: int, data: Any) -> None:
        self.get_vertex(index).set_data(data)

    def has_data(self, index: int) -> bool:
        return self.get_vertex(index).has_data()

    def clear_data(self, index: int) -> None:
        self.get_vertex(index).clear_data()
