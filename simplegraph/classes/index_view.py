"""
Read-only sorted views over vertex indices.

Every query that hands a collection of indices back to the caller returns an
IndexView. A view is a snapshot: it never refers back to the graph storage,
and any attempt to change it raises UnsupportedMutationError.
"""

from collections.abc import Set
from typing import FrozenSet, Iterable, Iterator, Tuple

from ..core.exceptions import UnsupportedMutationError


class IndexView(Set):
    """Immutable, sorted, duplicate-free collection of vertex indices."""

    __slots__ = ("_aIndex", "_members")

    def __init__(self, aIndex: Iterable[int] = ()):
        self._members: FrozenSet[int] = frozenset(aIndex)
        self._aIndex: Tuple[int, ...] = tuple(sorted(self._members))

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    def __contains__(self, index) -> bool:
        return index in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._aIndex)

    def __len__(self) -> int:
        return len(self._aIndex)

    def __getitem__(self, position):
        return self._aIndex[position]

    def __hash__(self):
        return self._hash()

    def __repr__(self):
        return f"IndexView({list(self._aIndex)})"

    def __str__(self):
        return str(list(self._aIndex))

    def to_list(self):
        return list(self._aIndex)

    def _refuse(self, *args, **kwargs):
        raise UnsupportedMutationError(f"{type(self).__name__} is read-only")

    add = discard = remove = pop = clear = update = _refuse
    difference_update = intersection_update = symmetric_difference_update = _refuse
    __ior__ = __iand__ = __isub__ = __ixor__ = _refuse
    __setitem__ = __delitem__ = _refuse
