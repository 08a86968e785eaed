from __future__ import annotations
import typing
import numbers
import numpy as np
from decimal import Decimal
from ..types import *
from ..errors import ensure_argument, IllegalOperationError, NO_ELEMENTS

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class Numeric(Generic[V]):
    """
    the numeric capability the sum/average family is parameterised over:
    a name, a zero, a per-value coercion, a summation and a mean.
    """

    def __init__(self, name: str, zero: V, coerce: Callable[[Any], V],
                 total: Callable[[List[V]], V], mean: Callable[[V, int], Any]):
        self.name = name
        self.zero = zero
        self.coerce = coerce
        self.total = total
        self.mean = mean

    def __repr__(self) -> str:
        return f"Numeric({self.name})"


def _integral(value: Any) -> int:
    # bool is an Integral too, which is fine: True counts as 1
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"expected an integral value, got {type(value).__name__}")
    return int(value)


def _decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through str so 0.1 stays 0.1 instead of its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def _float_total(values: List[float]) -> float:
    if not values:
        return 0.0
    return np.sum(np.asarray(values, dtype=np.float64)).item()


# python ints are unbounded, so integral sums never wrap around
DECIMAL = Numeric('decimal', Decimal(0), _decimal, lambda values: sum(values, Decimal(0)),
                  lambda total, count: total / Decimal(count))
DOUBLE = Numeric('double', 0.0, float, _float_total, lambda total, count: total / count)
INT = Numeric('int', 0, _integral, sum, lambda total, count: total / count)
LONG = Numeric('long', 0, _integral, sum, lambda total, count: total / count)


class StatsAccessor(Generic[T]):
    """numeric aggregates and key-based extrema"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Selector[T, Any], numeric: Numeric) -> List[Any]:
        """helper to extract coerced numeric values, one selector call per element."""
        return [numeric.coerce(selector(item)) for item in self._enumerable]

    # --- the shared algorithms ---

    def sum(self, selector: Selector[T, Any], numeric: Numeric = DOUBLE) -> Any:
        """sum selector(element) in the given representation; zero for an empty sequence"""
        ensure_argument(selector, "selector")
        ensure_argument(numeric, "numeric")
        values = self._get_values(selector, numeric)
        if not values:
            return numeric.zero
        return numeric.total(values)

    def average(self, selector: Selector[T, Any], numeric: Numeric = DOUBLE) -> Any:
        """mean of selector(element) in the given representation"""
        ensure_argument(selector, "selector")
        ensure_argument(numeric, "numeric")
        values = self._get_values(selector, numeric)
        if not values:
            raise IllegalOperationError(NO_ELEMENTS)
        return numeric.mean(numeric.total(values), len(values))

    # --- named representations ---

    def sum_as_decimal(self, selector: Selector[T, Any]) -> Decimal:
        return self.sum(selector, DECIMAL)

    def sum_as_double(self, selector: Selector[T, Any]) -> float:
        return self.sum(selector, DOUBLE)

    def sum_as_int(self, selector: Selector[T, int]) -> int:
        return self.sum(selector, INT)

    def sum_as_long(self, selector: Selector[T, int]) -> int:
        return self.sum(selector, LONG)

    def average_as_decimal(self, selector: Selector[T, Any]) -> Decimal:
        return self.average(selector, DECIMAL)

    def average_as_double(self, selector: Selector[T, Any]) -> float:
        return self.average(selector, DOUBLE)

    def average_as_int(self, selector: Selector[T, int]) -> float:
        return self.average(selector, INT)

    def average_as_long(self, selector: Selector[T, int]) -> float:
        return self.average(selector, LONG)

    # --- extrema ---

    def _extreme(self, selector: Selector[T, K], better: Callable[[K, K], bool]) -> T:
        ensure_argument(selector, "selector")
        iterator = iter(self._enumerable)
        best = best_key = None
        found = False
        for item in iterator:
            key = selector(item)
            # strict comparison keeps the first element among equal keys
            if not found or better(key, best_key):
                best, best_key, found = item, key, True
        if not found:
            raise IllegalOperationError(NO_ELEMENTS)
        return best

    def min(self, selector: Selector[T, K]) -> T:
        """element with the smallest key; the first one on ties"""
        return self._extreme(selector, lambda key, best: key < best)

    def max(self, selector: Selector[T, K]) -> T:
        """element with the largest key; the first one on ties"""
        return self._extreme(selector, lambda key, best: key > best)
