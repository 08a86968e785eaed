import logging
from contextlib import contextmanager
from dataclasses import dataclass, asdict, replace
from typing import Iterator

logger = logging.getLogger(__name__)

AMBIGUOUS_SINGLE_POLICIES = ('raise', 'default')
GROUP_BY_STRATEGIES = ('bucket', 'rescan')


@dataclass(frozen=True)
class QueryConfig:
    """library-wide knobs for behaviour that has more than one reasonable answer"""
    # what single_or_default does when more than one element matches
    ambiguous_single: str = 'raise'  # raise, default
    # bucket: one pass over the source. rescan: one pass for the keys, then one per key
    group_by_strategy: str = 'bucket'  # bucket, rescan

    def __post_init__(self):
        if self.ambiguous_single not in AMBIGUOUS_SINGLE_POLICIES:
            raise ValueError(f"ambiguous_single must be one of {AMBIGUOUS_SINGLE_POLICIES}, "
                             f"got '{self.ambiguous_single}'")
        if self.group_by_strategy not in GROUP_BY_STRATEGIES:
            raise ValueError(f"group_by_strategy must be one of {GROUP_BY_STRATEGIES}, "
                             f"got '{self.group_by_strategy}'")


_config = QueryConfig()


def get_config() -> QueryConfig:
    """return the active configuration"""
    return _config


def configure(**changes) -> QueryConfig:
    """replace fields of the active configuration. unknown fields raise TypeError."""
    global _config
    _config = replace(_config, **changes)
    logger.info(f"query config: {asdict(_config)}")
    return _config


@contextmanager
def configured(**changes) -> Iterator[QueryConfig]:
    """temporarily apply configuration changes, restoring the previous config on exit"""
    global _config
    previous = _config
    try:
        yield configure(**changes)
    finally:
        _config = previous
