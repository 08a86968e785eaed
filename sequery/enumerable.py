from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .errors import ensure_argument

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    """a source of elements that hands out a fresh, independent iterator on every request"""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, iterator_factory: IteratorFactory[T]):
        """init with a function that produces the elements when called, once per iteration"""
        self._iterator_factory = iterator_factory

    def _get_data(self) -> List[T]:
        """enumerate once into a new list owned by the caller"""
        return [item for item in self]

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterator_factory())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a linq-style, deferred-execution query over any re-iterable python source."""
    def __init__(self, iterator_factory: IteratorFactory[T]):
        super().__init__(iterator_factory)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._iterator_factory!r})"

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    represents a sorted sequence, allowing for subsequent orderings.
    the sort runs on first iteration and the sorted buffer is reused afterwards.
    """

    def __init__(self, source: Iterable[T], sort_keys: List[Tuple[KeySelector[T, Any], bool]]):
        super().__init__(self._sorted_data)
        self._source = source
        self._sort_keys = sort_keys
        self._cached_result: Optional[List[T]] = None

    def _sorted_data(self) -> List[T]:
        """applies all sort levels at once using python's stable sort."""
        if self._cached_result is None:
            data = [item for item in self._source]
            # python's sort is stable, so we sort from the last key to the first
            for key_selector, is_descending in reversed(self._sort_keys):
                data.sort(key=key_selector, reverse=is_descending)
            logger.debug(f"sorted {len(data)} elements on {len(self._sort_keys)} key(s)")
            self._cached_result = data
        return self._cached_result

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        ensure_argument(key_selector, "key_selector")
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        ensure_argument(key_selector, "key_selector")
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, True)])
