from __future__ import annotations
import typing
import logging
from ..types import *
from ..errors import ensure_argument
from ..iterators import DistinctIterator, ConcatIterator, WhereIterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

# containers that already guarantee uniqueness and can serve as a membership test as-is
_MEMBERSHIP_TYPES = (UniqueSet, set, frozenset)


def _membership(items: Iterable[T]) -> Union[UniqueSet[T], Set[T], typing.FrozenSet[T]]:
    """reuse a uniqueness-enforcing container directly, otherwise build one"""
    if isinstance(items, _MEMBERSHIP_TYPES):
        return items
    unique = UniqueSet(items)
    logger.debug(f"built membership set of {len(unique)} element(s)")
    return unique


class SetAccessor(Generic[T]):
    """
    set-theoretic combination of sequences, backed by a uniqueness-enforcing
    container. all operators here are lazy: the work is redone on each iteration.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        # each iteration gets its own DistinctIterator and therefore its own seen-set
        return Enumerable(lambda: DistinctIterator(self._enumerable))

    def union(self, second: Iterable[T]) -> 'Enumerable[T]':
        """every distinct element of either sequence, in first-insertion order."""
        from ..enumerable import Enumerable
        ensure_argument(second, "second")
        return Enumerable(lambda: DistinctIterator(ConcatIterator(self._enumerable, second)))

    def intersect(self, second: Iterable[T]) -> 'Enumerable[T]':
        """distinct elements of this sequence that also occur in the second."""
        from ..enumerable import Enumerable
        ensure_argument(second, "second")

        def intersect_data():
            members = _membership(second)
            # this preserves the order from the first (self) sequence
            return DistinctIterator(WhereIterator(self._enumerable, lambda item: item in members))
        return Enumerable(intersect_data)

    def except_(self, second: Iterable[T]) -> 'Enumerable[T]':
        """
        elements of this sequence that do not occur in the second. unlike union and
        intersect, duplicates that survive the exclusion stay duplicated.
        """
        from ..enumerable import Enumerable
        ensure_argument(second, "second")

        def except_data():
            excluded = _membership(second)
            return WhereIterator(self._enumerable, lambda item: item not in excluded)
        return Enumerable(except_data)

    def concat(self, second: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        ensure_argument(second, "second")
        return Enumerable(lambda: ConcatIterator(self._enumerable, second))
