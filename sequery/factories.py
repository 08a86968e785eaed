import typing
from itertools import repeat as itertools_repeat
from .types import *
from .errors import ensure_argument, OutOfRangeError

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

# the integer representation generated ranges must fit in (32-bit signed)
MIN_INT = -2 ** 31
MAX_INT = 2 ** 31 - 1


def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """wrap a re-iterable source. the source is read afresh on every iteration"""
    from .enumerable import Enumerable
    ensure_argument(data, "data")
    return Enumerable(lambda: iter(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """`count` consecutive integers beginning at `start`"""
    from .enumerable import Enumerable
    if count < 0:
        raise OutOfRangeError("count is less than 0")
    if start < MIN_INT:
        raise OutOfRangeError(f"start is less than {MIN_INT}")
    if start + count - 1 > MAX_INT:
        raise OutOfRangeError(f"start + count - 1 is larger than {MAX_INT}")
    values = list(range(start, start + count))
    return Enumerable(lambda: iter(values))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    if count < 0:
        raise OutOfRangeError("count is less than 0")
    return Enumerable(lambda: itertools_repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: iter(()))

# --- aliases ---
P = from_iterable
seq = from_iterable
