"""
Restricted traversals for simple graphs.

Both traversals are scoped to a vertex subset: they start from the first
vertex of the subset and never step onto a vertex outside of it, even when
that vertex is adjacent in the full graph.
"""

import logging
from typing import List, Sequence, Set
from collections import deque

from ..classes.vertex import pyvertex
from ..core.graph import VertexStore

logger = logging.getLogger(__name__)


class GraphTraversal:
    """
    Breadth-first and depth-first visits over vertex subsets.

    This class provides methods for:
    - Counting vertices reachable inside a subset (BFS and DFS)
    - Listing the visit order inside a subset
    - Splitting a subset into its connected pieces
    """

    def __init__(self, graph: VertexStore):
        """
        Initialize the traversal engine.

        Args:
            graph: VertexStore instance to traverse
        """
        self.graph = graph

    def breadth_first_visit(self, subset: Sequence[pyvertex]) -> int:
        """
        Count the vertices reached by a breadth-first walk inside the subset.

        Args:
            subset: Vertices the walk may use; the first one is the start

        Returns:
            Number of distinct vertices visited, 0 for an empty subset
        """
        return len(self.breadth_first_order(subset))

    def depth_first_visit(self, subset: Sequence[pyvertex]) -> int:
        """
        Count the vertices reached by a depth-first walk inside the subset.

        Args:
            subset: Vertices the walk may use; the first one is the start

        Returns:
            Number of distinct vertices visited, 0 for an empty subset
        """
        return len(self.depth_first_order(subset))

    def breadth_first_order(self, subset: Sequence[pyvertex]) -> List[pyvertex]:
        """Vertices of the subset in the order a breadth-first walk reaches them."""
        if not subset:
            return []
        return self._breadth_first_from(subset[0], set(subset))

    def depth_first_order(self, subset: Sequence[pyvertex]) -> List[pyvertex]:
        """Vertices of the subset in the order a depth-first walk reaches them."""
        if not subset:
            return []

        members = set(subset)
        start = subset[0]
        order = []
        visited = {start}
        stack = [start]

        while stack:
            current = stack.pop()
            order.append(current)

            # Reversed so that lower indices are popped first
            for neighbour in sorted(current.aNeighbour, reverse=True):
                if neighbour in members and neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)

        return order

    def find_components(self, subset: Sequence[pyvertex]) -> List[List[pyvertex]]:
        """
        Split a subset into the connected pieces of the subgraph it induces.

        Args:
            subset: Vertices to split

        Returns:
            List of components, each in breadth-first order from its first vertex
        """
        members = set(subset)
        assigned: Set[pyvertex] = set()
        components = []

        for pVertex in subset:
            if pVertex in assigned:
                continue
            component = self._breadth_first_from(pVertex, members)
            assigned.update(component)
            components.append(component)

        logger.debug(f"Found {len(components)} components in a subset of {len(members)} vertices")
        return components

    def _breadth_first_from(self, start: pyvertex, members: Set[pyvertex]) -> List[pyvertex]:
        order = []
        visited = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            order.append(current)

            for neighbour in sorted(current.aNeighbour):
                if neighbour in members and neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)

        return order
