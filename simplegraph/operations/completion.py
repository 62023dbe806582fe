"""
Complete graph operations.

This module provides operations that turn a graph into a complete graph,
either by generating one from scratch or by adding the missing edges.
"""

import logging
from itertools import combinations

from ..core.constants import MAX_VERTEX_INDEX
from ..core.graph import VertexStore
from ..analysis.detection import StructureAnalyzer

logger = logging.getLogger(__name__)


class GraphCompleter:
    """
    Handles complete graph generation.

    This class provides methods for:
    - Generating a complete graph inside an empty graph
    - Adding every missing edge to an existing graph
    """

    def __init__(self, graph: VertexStore, analyzer: StructureAnalyzer):
        """
        Initialize the graph completer.

        Args:
            graph: VertexStore instance to modify
            analyzer: StructureAnalyzer for the completeness check
        """
        self.graph = graph
        self.analyzer = analyzer

    def complete(self, start_index: int, size: int) -> bool:
        """
        Fill an empty graph with a complete graph on consecutive indices.

        Nothing happens when the graph already has vertices or when size is
        not positive. If start_index + size would exceed MAX_VERTEX_INDEX the
        indices start from 0 instead.

        Args:
            start_index: Index of the first generated vertex
            size: Number of vertices to generate

        Returns:
            True if vertices were generated

        Raises:
            NegativeIndexError: If start_index is negative
        """
        self.graph.check_index(start_index)
        if self.graph.get_vertex_count() > 0 or size <= 0:
            return False

        if MAX_VERTEX_INDEX - start_index < size:
            logger.warning(f"Complete graph of size {size} does not fit after index {start_index}, starting from 0")
            start_index = 0

        aIndex = range(start_index, start_index + size)
        self.graph.add_vertices(aIndex)
        for index_v, index_u in combinations(aIndex, 2):
            self.graph.connect(index_v, index_u)

        logger.info(f"Generated complete graph on {size} vertices starting at {start_index}")
        return True

    def map_to_complete(self) -> int:
        """
        Connect every pair of vertices that is not adjacent yet.

        Returns:
            Number of edges added
        """
        if self.graph.get_vertex_count() <= 1 or self.analyzer.is_complete():
            return 0

        nEdge_added = 0
        aIndex = [pVertex.lVertexID for pVertex in self.graph.get_vertices()]
        for index_v, index_u in combinations(aIndex, 2):
            if self.graph.connect(index_v, index_u):
                nEdge_added += 1

        logger.info(f"Added {nEdge_added} edges to complete the graph")
        return nEdge_added
