from __future__ import annotations
import typing
import logging
from collections import defaultdict
from ..types import *
from ..config import get_config
from ..errors import ensure_argument

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, 'Enumerable[T]']:
        """
        group elements by a key. returns a dict from key to an enumerable over that
        group's members, in source order. keys appear in order of first occurrence.
        """
        ensure_argument(key_selector, "key_selector")
        if get_config().group_by_strategy == 'rescan':
            groups = self._group_by_rescan(key_selector)
        else:
            groups = self._group_by_bucket(key_selector)
        logger.debug(f"grouped into {len(groups)} key(s)")
        return {key: _frozen(members) for key, members in groups.items()}

    def _group_by_bucket(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """one pass, appending each element to its key's bucket"""
        groups = defaultdict(list)
        for item in self._enumerable:
            groups[key_selector(item)].append(item)
        return dict(groups)

    def _group_by_rescan(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """one pass to collect the distinct keys, then one pass per key to collect its members"""
        keys = UniqueSet(key_selector(item) for item in self._enumerable)
        return {key: [item for item in self._enumerable if key_selector(item) == key] for key in keys}


def _frozen(members: List[T]) -> 'Enumerable[T]':
    from ..enumerable import Enumerable
    return Enumerable(lambda: iter(members))
