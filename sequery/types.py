from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[T, T], T]
IteratorFactory = Callable[[], Iterable[T]]


class UniqueSet(Generic[T]):
    """
    uniqueness-enforcing container that remembers first-insertion order.
    backed by a dict, so elements must be hashable.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: Dict[T, None] = {}
        if items is not None:
            for item in items:
                self._items[item] = None

    def add(self, item: T) -> bool:
        """insert if absent. returns true when the item was not already present."""
        if item in self._items:
            return False
        self._items[item] = None
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"UniqueSet({list(self._items)})"
