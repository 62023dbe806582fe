"""
Vertex representation for simple undirected graphs.
"""

from typing import Any, Set

from ..core.exceptions import NegativeIndexError

# Marks an empty payload slot; distinct from an explicitly stored None
_UNSET = object()


class pyvertex:
    """
    A vertex of a simple graph.

    A vertex is identified by its non-negative index and keeps its open
    neighbourhood (adjacent vertices, never itself) and an optional payload.
    Two vertices are equal when their indices are equal.
    """

    __slots__ = ("_lVertexID", "aNeighbour", "_pData")

    def __init__(self, lVertexID: int, pData: Any = _UNSET):
        """
        Create a vertex without neighbours.

        Args:
            lVertexID: Non-negative vertex index
            pData: Optional payload stored in the vertex

        Raises:
            NegativeIndexError: If the index is negative
        """
        if lVertexID < 0:
            raise NegativeIndexError(lVertexID)
        self._lVertexID = lVertexID
        self.aNeighbour: Set["pyvertex"] = set()
        self._pData = pData

    @property
    def lVertexID(self) -> int:
        return self._lVertexID

    @property
    def degree(self) -> int:
        return len(self.aNeighbour)

    def is_adjacent(self, other: "pyvertex") -> bool:
        return other in self.aNeighbour

    def connect_with(self, other: "pyvertex") -> bool:
        """
        Add the symmetric edge between this vertex and another one.

        Returns:
            False for a self-loop or an already existing edge, True otherwise
        """
        if other == self or self.is_adjacent(other):
            return False
        self.aNeighbour.add(other)
        other.aNeighbour.add(self)
        return True

    def disconnect_from(self, other: "pyvertex") -> bool:
        """
        Remove the symmetric edge between this vertex and another one.

        Returns:
            False if there is no such edge, True otherwise
        """
        if other == self or not self.is_adjacent(other):
            return False
        self.aNeighbour.discard(other)
        other.aNeighbour.discard(self)
        return True

    def isolate(self) -> int:
        """Remove every edge of this vertex and return how many were removed."""
        aNeighbour = list(self.aNeighbour)
        for pNeighbour in aNeighbour:
            self.disconnect_from(pNeighbour)
        return len(aNeighbour)

    def has_data(self) -> bool:
        return self._pData is not _UNSET

    def get_data(self, default: Any = None) -> Any:
        return default if self._pData is _UNSET else self._pData

    def set_data(self, pData: Any) -> None:
        self._pData = pData

    def clear_data(self) -> None:
        self._pData = _UNSET

    def __eq__(self, other):
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._lVertexID == other._lVertexID

    def __hash__(self):
        return hash(self._lVertexID)

    def __lt__(self, other: "pyvertex") -> bool:
        return self._lVertexID < other._lVertexID

    def __repr__(self):
        return f"pyvertex({self._lVertexID})"

    def __str__(self):
        return str(self._lVertexID)
