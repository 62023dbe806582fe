"""
Render and export graphs.

Only the read-only query surface of the graph is used here.
"""

import logging
from typing import Any, Dict, Tuple

import numpy as np

from ..core.constants import FIELD_DELIMITER

logger = logging.getLogger(__name__)


def format_graph(pGraph) -> str:
    """
    Render a graph as text, one vertex per line in index order.

    Each line reads `index -> [neighbours], content: data`.
    """
    aLine = []
    for index in pGraph.vertices():
        aNeighbour = pGraph.neighbourhood(index).to_list()
        aLine.append(f"{index} -> {aNeighbour}, content: {pGraph.get_data(index)}")
    return "\n".join(aLine)


def export_graph_to_file(pGraph, sFilename: str, delimiter: str = FIELD_DELIMITER) -> None:
    """
    Write a graph in the line format understood by read_graph_from_file.

    Every edge is written once as `v;u` with v < u; vertices without
    neighbours are written as a single index. Payloads are not exported.

    Args:
        pGraph: Graph to export
        sFilename: Output path
        delimiter: Separator between the two indices of an edge line
    """
    aEdge = pGraph.edges()
    aIsolated = [index for index in pGraph.vertices() if pGraph.degree(index) == 0]

    with open(sFilename, "w", encoding="utf-8") as pFile:
        for index in aIsolated:
            pFile.write(f"{index}\n")
        for index_v, index_u in aEdge:
            pFile.write(f"{index_v}{delimiter}{index_u}\n")

    logger.info(f"Exported {len(aEdge)} edges and {len(aIsolated)} isolated vertices to {sFilename}")


def export_adjacency_matrix(pGraph) -> Tuple[Tuple[int, ...], np.ndarray]:
    """
    Build the adjacency matrix of a graph.

    Returns:
        Tuple of (vertex indices in ascending order, symmetric int8 matrix whose
        rows and columns follow those indices)
    """
    aIndex = tuple(pGraph.vertices())
    position = {index: i for i, index in enumerate(aIndex)}
    aMatrix = np.zeros((len(aIndex), len(aIndex)), dtype=np.int8)

    for index_v, index_u in pGraph.edges():
        i, j = position[index_v], position[index_u]
        aMatrix[i, j] = 1
        aMatrix[j, i] = 1

    return aIndex, aMatrix


def summarize_graph(pGraph) -> Dict[str, Any]:
    """
    Collect the structural facts about a graph in one dictionary.

    Returns:
        Dictionary with vertex and edge counts, whole-graph properties and the
        three greedy vertex sets as sorted lists
    """
    return {
        "vertex_count": len(pGraph),
        "edge_count": len(pGraph.edges()),
        "is_connected": pGraph.is_connected(),
        "is_complete": pGraph.is_complete(),
        "is_bipartite": pGraph.is_bipartite(),
        "minimum_dominating_set": pGraph.compute_minimum_dominating_set().to_list(),
        "minimum_connected_dominating_set": pGraph.compute_minimum_connected_dominating_set().to_list(),
        "maximal_independent_set": pGraph.compute_maximal_independent_set().to_list(),
    }
