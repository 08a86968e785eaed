"""
iterator objects behind the lazy pipeline stages.

each stage iterator is created fresh by its enumerable on every iter() call
and owns all of its state, so two iterations of one declared query never
share a buffer or a seen-set.

two disciplines are used:
  streaming - the source is pulled one element per next() call (where, distinct,
              concat, default_if_empty, cast)
  buffered  - the stage output is computed when the iterator is created and
              then drained (select, select_many, skip, take, skip_while,
              take_while, reverse). the source is read once per iterator and
              callback errors surface from iter(), not from the first next().
"""
from __future__ import annotations

from abc import abstractmethod
from collections import deque
from itertools import islice
from .types import *
from .errors import InvalidCastError


class PipelineIterator(Iterator[T]):
    """base for stage iterators. an iterator is consumed once and then discarded."""

    def __iter__(self) -> 'PipelineIterator[T]':
        return self

    @abstractmethod
    def __next__(self) -> T:
        pass


class _BufferedIterator(PipelineIterator[T]):
    """drains a queue filled once, at construction time"""

    def __init__(self, items: Iterable[T]):
        self._queue = deque(items)

    def __next__(self) -> T:
        if not self._queue:
            raise StopIteration
        return self._queue.popleft()


# --- streaming stages ---

class WhereIterator(PipelineIterator[T]):
    """yields source elements for which the predicate holds"""

    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        self._source = iter(source)
        self._predicate = predicate

    def __next__(self) -> T:
        for item in self._source:
            if self._predicate(item):
                return item
        raise StopIteration


class DistinctIterator(PipelineIterator[T]):
    """yields each element once, in order of first occurrence"""

    def __init__(self, source: Iterable[T]):
        self._source = iter(source)
        self._seen: UniqueSet[T] = UniqueSet()

    def __next__(self) -> T:
        for item in self._source:
            if self._seen.add(item):
                return item
        raise StopIteration


class ConcatIterator(PipelineIterator[T]):
    """all of the first sequence, then all of the second"""

    def __init__(self, first: Iterable[T], second: Iterable[T]):
        self._current = iter(first)
        self._pending: Optional[Iterable[T]] = second

    def __next__(self) -> T:
        while True:
            for item in self._current:
                return item
            if self._pending is None:
                raise StopIteration
            # the second sequence is opened only once the first is exhausted
            self._current, self._pending = iter(self._pending), None


class DefaultIfEmptyIterator(PipelineIterator[T]):
    """the source, or a single default value when the source yields nothing"""

    def __init__(self, source: Iterable[T], default_value: T):
        self._source = iter(source)
        self._default = default_value
        self._started = False

    def __next__(self) -> T:
        if self._started:
            return next(self._source)
        self._started = True
        for item in self._source:
            return item
        # swap in an exhausted source so the default is produced exactly once
        self._source = iter(())
        return self._default


class CastIterator(PipelineIterator[U]):
    """yields each element viewed as `target`, converting or failing on mismatches"""

    def __init__(self, source: Iterable[T], target: Type[U], converter: Optional[Selector[T, U]]):
        self._source = iter(source)
        self._target = target
        self._converter = converter

    def __next__(self) -> U:
        item = next(self._source)
        if isinstance(item, self._target):
            return item
        if self._converter is not None:
            return self._converter(item)
        raise InvalidCastError(
            f"cannot cast element of type {type(item).__name__} to {self._target.__name__}")


# --- buffered stages ---

class SelectIterator(_BufferedIterator[U]):
    """projects every source element through the selector"""

    def __init__(self, source: Iterable[T], selector: Selector[T, U]):
        super().__init__(selector(item) for item in source)


class SelectManyIterator(_BufferedIterator[U]):
    """concatenates the sub-sequences produced by the selector, in source order"""

    def __init__(self, source: Iterable[T], selector: Selector[T, Iterable[U]]):
        super().__init__(sub_item for item in source for sub_item in selector(item))


class SkipIterator(_BufferedIterator[T]):
    """everything after the first `count` elements"""

    def __init__(self, source: Iterable[T], count: int):
        iterator = iter(source)
        # advance past the skipped prefix without keeping it
        for _ in islice(iterator, max(count, 0)):
            pass
        super().__init__(iterator)


class TakeIterator(_BufferedIterator[T]):
    """the first `count` elements; never reads further than that"""

    def __init__(self, source: Iterable[T], count: int):
        super().__init__(islice(source, max(count, 0)))


class SkipWhileIterator(_BufferedIterator[T]):
    """
    drops elements while the predicate holds. the first failing element starts the
    remainder, and the predicate is not consulted again after that.
    """

    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        iterator = iter(source)
        remainder: List[T] = []
        for item in iterator:
            if not predicate(item):
                remainder.append(item)
                remainder.extend(iterator)
                break
        super().__init__(remainder)


class TakeWhileIterator(_BufferedIterator[T]):
    """yields elements up to, but excluding, the first one that fails the predicate"""

    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        taken: List[T] = []
        for item in source:
            if not predicate(item):
                break
            taken.append(item)
        super().__init__(taken)


class ReverseIterator(PipelineIterator[T]):
    """pops a stack filled from the source"""

    def __init__(self, source: Iterable[T]):
        self._stack = [item for item in source]

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        return self._stack.pop()
