from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from itertools import islice, zip_longest
from ..types import *
from ..config import get_config
from ..errors import (
    ensure_argument, IllegalOperationError, OutOfRangeError,
    NO_ELEMENTS, NO_MATCH, MORE_THAN_ONE
)
from ..iterators import WhereIterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# used to tell "no element" apart from an element that is None
_missing = object()


class TerminalAccessor(Generic[T]):
    """
    eager operators. every call enumerates the source on the spot and returns a
    scalar or a freshly built container owned by the caller.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _matches(self, predicate: Predicate[T]) -> Iterator[T]:
        """iterate the source, filtered when a predicate is given. an explicit None is rejected"""
        if predicate is _missing:
            return iter(self._enumerable)
        ensure_argument(predicate, "predicate")
        return WhereIterator(self._enumerable, predicate)

    # --- materialisation ---

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        ensure_argument(key_selector, "key_selector")
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert records (dicts, tuples, dataclasses) to a pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- counting and containment ---

    def count(self, predicate: Predicate[T] = _missing) -> int:
        """count elements; always walks the whole sequence"""
        return sum(1 for _ in self._matches(predicate))

    def long_count(self, predicate: Predicate[T] = _missing) -> int:
        """count elements. python ints do not overflow, so this matches count()"""
        return self.count(predicate)

    def any(self, predicate: Predicate[T] = _missing) -> bool:
        """check if any element satisfies condition; stops at the first one"""
        for _ in self._matches(predicate):
            return True
        return False

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence"""
        ensure_argument(predicate, "predicate")
        return not self.any(lambda item: not predicate(item))

    # --- element access ---

    def first(self, predicate: Predicate[T] = _missing) -> T:
        """get first element"""
        for item in self._matches(predicate):
            return item
        raise IllegalOperationError(NO_ELEMENTS if predicate is _missing else NO_MATCH)

    def first_or_default(self, predicate: Predicate[T] = _missing,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        for item in self._matches(predicate):
            return item
        return default

    def last(self, predicate: Predicate[T] = _missing) -> T:
        """get last element; scans the whole sequence"""
        result = self.last_or_default(predicate, default=_missing)
        if result is _missing:
            raise IllegalOperationError(NO_ELEMENTS if predicate is _missing else NO_MATCH)
        return result

    def last_or_default(self, predicate: Predicate[T] = _missing,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        result = default
        for item in self._matches(predicate):
            result = item
        return result

    def single(self, predicate: Predicate[T] = _missing) -> T:
        """get single element, erroring if not exactly one"""
        found = list(islice(self._matches(predicate), 2))
        if not found:
            raise IllegalOperationError(NO_ELEMENTS if predicate is _missing else NO_MATCH)
        if len(found) > 1:
            raise IllegalOperationError(MORE_THAN_ONE)
        return found[0]

    def single_or_default(self, predicate: Predicate[T] = _missing,
                          default: Optional[T] = None) -> Optional[T]:
        """
        get single element or default when nothing matches. what happens on more than
        one match is decided by the `ambiguous_single` config: 'raise' (the default)
        errors for both the plain and the predicate form, 'default' returns `default`.
        """
        found = list(islice(self._matches(predicate), 2))
        if not found:
            return default
        if len(found) > 1:
            if get_config().ambiguous_single == 'raise':
                raise IllegalOperationError(MORE_THAN_ONE)
            return default
        return found[0]

    def element_at(self, index: int) -> T:
        """zero-based element access"""
        result = self.element_at_or_default(index, default=_missing)
        if result is _missing:
            raise OutOfRangeError(f"index {index} is less than 0 or not less than the number of elements")
        return result

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """zero-based element access, default when the index is out of range"""
        if index < 0:
            return default
        for item in islice(self._enumerable, index, index + 1):
            return item
        return default

    # --- folding and comparison ---

    def aggregate(self, accumulator: Accumulator[T]) -> T:
        """applies accumulator function left to right, seeded with the first element"""
        ensure_argument(accumulator, "accumulator")
        iterator = iter(self._enumerable)
        seed = next(iterator, _missing)
        if seed is _missing:
            raise IllegalOperationError(NO_ELEMENTS)
        return reduce(accumulator, iterator, seed)

    def sequence_equal(self, second: Iterable[T]) -> bool:
        """same length and pairwise equal elements, in iteration order"""
        ensure_argument(second, "second")
        for left, right in zip_longest(self._enumerable, second, fillvalue=_missing):
            if left is _missing or right is _missing:
                return False
            if not left == right:
                return False
        return True
