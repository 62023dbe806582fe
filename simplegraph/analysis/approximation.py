"""
Greedy set-construction algorithms for simple graphs.

Minimum dominating set, minimum connected dominating set and maximum
independent set are NP-hard; the methods here build good (not optimal)
answers by repeatedly making the locally best choice. Candidates are always
scanned in ascending index order and the first best one is kept, so ties go
to the lowest index and results are reproducible.
"""

import logging
from bisect import insort
from typing import Dict, List, Set

from ..classes.vertex import pyvertex
from ..core.graph import VertexStore
from .detection import StructureAnalyzer

logger = logging.getLogger(__name__)


class SetApproximator:
    """
    Greedy approximations of vertex set problems.

    This class provides methods for:
    - Minimum dominating set (greedy set cover)
    - Minimum connected dominating set (pruning with a fixed backbone)
    - Maximal independent set (minimum degree first)
    """

    def __init__(self, graph: VertexStore, analyzer: StructureAnalyzer):
        """
        Initialize the set approximator.

        Args:
            graph: VertexStore instance to analyze
            analyzer: StructureAnalyzer used for connectivity checks
        """
        self.graph = graph
        self.analyzer = analyzer

    def compute_minimum_dominating_set(self) -> List[pyvertex]:
        """
        Build a small dominating set greedily.

        While some vertex is undominated, take the undominated vertex that
        covers the most undominated neighbours, then mark it and its
        neighbours as dominated.

        Returns:
            Vertices of the dominating set in selection order
        """
        aVertex_pool = self.graph.get_vertices()
        pool: Set[pyvertex] = set(aVertex_pool)
        aDominating = []

        while pool:
            best = None
            best_gain = -1
            for pVertex in aVertex_pool:
                if pVertex not in pool:
                    continue
                gain = len(pVertex.aNeighbour & pool)
                if gain > best_gain:
                    best, best_gain = pVertex, gain

            aDominating.append(best)
            pool.discard(best)
            pool -= best.aNeighbour

        logger.debug(f"Greedy dominating set has {len(aDominating)} of {len(aVertex_pool)} vertices")
        return aDominating

    def compute_minimum_connected_dominating_set(self) -> List[pyvertex]:
        """
        Build a small connected dominating set by pruning the vertex set.

        Starting from all vertices, repeatedly try to drop the unclassified
        vertex of lowest priority (initially its degree). A vertex whose removal
        would disconnect the remaining set, or empty it, is fixed instead. After
        a successful removal the priorities of its neighbours drop by one, and
        if none of its neighbours is fixed yet, its remaining neighbour of
        highest priority is fixed so that the removed vertex stays dominated.

        Returns:
            Vertices of the connected dominating set ordered by index
        """
        aCurrent = self.graph.get_vertices()
        current: Set[pyvertex] = set(aCurrent)
        priority: Dict[pyvertex, int] = {pVertex: pVertex.degree for pVertex in aCurrent}
        fixed: Set[pyvertex] = set()

        while priority:
            u = min(priority, key=priority.get)
            del priority[u]
            aCurrent.remove(u)
            current.discard(u)

            if not aCurrent or not self.analyzer.is_connected_subgraph(aCurrent):
                insort(aCurrent, u)
                current.add(u)
                fixed.add(u)
                continue

            iFlag_touches_fixed = False
            for neighbour in u.aNeighbour:
                if neighbour in priority:
                    priority[neighbour] -= 1
                if neighbour in fixed:
                    iFlag_touches_fixed = True

            if not iFlag_touches_fixed:
                aCandidate = [n for n in sorted(u.aNeighbour) if n in current and n in priority]
                if aCandidate:
                    w = max(aCandidate, key=priority.get)
                    fixed.add(w)
                    del priority[w]

        logger.debug(f"Greedy connected dominating set has {len(aCurrent)} vertices, {len(fixed)} fixed")
        return aCurrent

    def compute_maximal_independent_set(self) -> List[pyvertex]:
        """
        Build a large independent set greedily.

        While vertices remain, take the remaining vertex of minimum degree and
        discard it together with its neighbours.

        Returns:
            Vertices of the independent set in selection order
        """
        aVertex_pool = self.graph.get_vertices()
        pool: Set[pyvertex] = set(aVertex_pool)
        aIndependent = []

        while pool:
            best = None
            for pVertex in aVertex_pool:
                if pVertex in pool and (best is None or pVertex.degree < best.degree):
                    best = pVertex

            aIndependent.append(best)
            pool.discard(best)
            pool -= best.aNeighbour

        logger.debug(f"Greedy independent set has {len(aIndependent)} of {len(aVertex_pool)} vertices")
        return aIndependent
