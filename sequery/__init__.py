r"""
   ___  ___  __ _ _   _  ___ _ __ _   _
  / __|/ _ \/ _` | | | |/ _ \ '__| | | |
  \__ \  __/ (_| | |_| |  __/ |  | |_| |
  |___/\___|\__, |\__,_|\___|_|   \__, |
               |_|                |___/
"""
import logging

# expose the main classes
from .enumerable import IEnumerable, Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    P,
    seq,
)

# expose supporting types and errors
from .types import UniqueSet
from .extensions.stats import Numeric, DECIMAL, DOUBLE, INT, LONG
from .errors import (
    SequeryError,
    InvalidArgumentError,
    OutOfRangeError,
    IllegalOperationError,
    InvalidCastError,
)
from .config import QueryConfig, get_config, configure, configured

# library logging stays silent unless the application configures a handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IEnumerable",
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "P",
    "seq",
    "UniqueSet",
    "Numeric",
    "DECIMAL",
    "DOUBLE",
    "INT",
    "LONG",
    "SequeryError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "IllegalOperationError",
    "InvalidCastError",
    "QueryConfig",
    "get_config",
    "configure",
    "configured",
]
