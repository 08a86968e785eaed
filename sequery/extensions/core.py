from __future__ import annotations
import typing
from ..types import *
from ..errors import ensure_argument
from ..iterators import (
    WhereIterator, SelectIterator, SelectManyIterator, SkipIterator, TakeIterator,
    SkipWhileIterator, TakeWhileIterator, ReverseIterator, DefaultIfEmptyIterator, CastIterator
)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    """
    lazy operators. each returns a new enumerable whose factory builds a fresh
    stage iterator per iteration; nothing here reads the source at call time.
    """

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        ensure_argument(predicate, "predicate")
        return Enumerable(lambda: WhereIterator(self, predicate))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        ensure_argument(selector, "selector")
        return Enumerable(lambda: SelectIterator(self, selector))

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project each element to a sequence and flatten the results"""
        from ..enumerable import Enumerable
        ensure_argument(selector, "selector")
        return Enumerable(lambda: SelectManyIterator(self, selector))

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """stable sort by a key"""
        from ..enumerable import OrderedEnumerable
        ensure_argument(key_selector, "key_selector")
        return OrderedEnumerable(self, [(key_selector, False)])

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """stable sort by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        ensure_argument(key_selector, "key_selector")
        return OrderedEnumerable(self, [(key_selector, True)])

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: TakeIterator(self, count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: SkipIterator(self, count))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true; stops for good at the first failure"""
        from ..enumerable import Enumerable
        ensure_argument(predicate, "predicate")
        return Enumerable(lambda: TakeWhileIterator(self, predicate))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true, then yield the rest unconditionally"""
        from ..enumerable import Enumerable
        ensure_argument(predicate, "predicate")
        return Enumerable(lambda: SkipWhileIterator(self, predicate))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ReverseIterator(self))

    def default_if_empty(self: 'Enumerable[T]', default_value: Optional[T] = None) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: DefaultIfEmptyIterator(self, default_value))

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        # syntactic sugar over where(); the type is checked with isinstance, so subclasses pass
        ensure_argument(type_filter, "type_filter")
        return self.where(lambda item: isinstance(item, type_filter))

    def cast(self: 'Enumerable[T]', to_type: Type[U],
             converter: Optional[Selector[T, U]] = None) -> 'Enumerable[U]':
        """
        views every element as `to_type`. elements that are not instances go through
        `converter` when one is given; otherwise iteration raises InvalidCastError.
        """
        from ..enumerable import Enumerable
        ensure_argument(to_type, "to_type")
        return Enumerable(lambda: CastIterator(self, to_type, converter))
