from typing import Any


class SequeryError(Exception):
    """base class for every error raised by the query layer itself."""
    pass


class InvalidArgumentError(SequeryError, TypeError):
    """a required argument (predicate, selector, key selector, second sequence, type) was not supplied."""
    pass


class OutOfRangeError(SequeryError, IndexError):
    """a count or index is negative, past the end of the sequence, or overflows the integer range."""
    pass


class IllegalOperationError(SequeryError, ValueError):
    """the operator needs a qualifying element and found none, or found more than one where exactly one is required."""
    pass


class InvalidCastError(SequeryError, TypeError):
    """an element could not be viewed as the requested type."""
    pass


# messages shared by the terminal and stats operators
NO_ELEMENTS = "sequence contains no elements"
NO_MATCH = "no element satisfies the condition"
MORE_THAN_ONE = "sequence contains more than one matching element"


def ensure_argument(value: Any, name: str) -> Any:
    """reject a missing argument before any element of the source is touched."""
    if value is None:
        raise InvalidArgumentError(f"{name} is None")
    return value
