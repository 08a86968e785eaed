"""
seeded fake records for the sequery test suites.

a schema maps field names to field specs:
  'word'                               faker provider, no arguments
  ('pyint', {'min_value': 1})          faker provider with keyword arguments
  choice(['a', 'b'])                   a seeded pick from the options
  literal(value)                       the value itself
  {...}                                a nested record
"""
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np
from faker import Faker

from sequery import Enumerable, from_iterable

FieldFactory = Callable[['RecordFactory'], Any]


def choice(options: Sequence[Any]) -> FieldFactory:
    """pick one of `options` with the factory's random generator"""
    def pick(factory: 'RecordFactory') -> Any:
        index = int(factory.rng.integers(len(options)))
        return options[index]
    return pick


def literal(value: Any) -> FieldFactory:
    return lambda factory: value


class RecordFactory:
    """builds records from a schema; the same seed always gives the same records"""

    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self.schema = schema
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)
        self.rng = np.random.default_rng(seed)

    def _field(self, spec: Any) -> Any:
        if callable(spec):
            return spec(self)
        if isinstance(spec, dict):
            return {name: self._field(inner) for name, inner in spec.items()}
        if isinstance(spec, tuple):
            provider, kwargs = spec
            return self._provider(provider)(**kwargs)
        if isinstance(spec, str):
            return self._provider(spec)()
        return spec

    def _provider(self, name: str) -> Callable[..., Any]:
        provider = getattr(self.fake, name, None)
        if provider is None:
            raise ValueError(f"faker has no provider '{name}'")
        return provider

    def record(self) -> Dict[str, Any]:
        return self._field(self.schema)

    def take(self, count: int) -> Enumerable:
        # generated once, so every iteration of the result sees the same records
        return from_iterable([self.record() for _ in range(count)])


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> RecordFactory:
    return RecordFactory(schema, seed)
