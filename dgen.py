'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from lazyseq import LazySequence, from_iterable
from typing import Any, Dict, Iterator, Optional


class RecordGenerator:
    """builds one record per call from a flat field schema.

    a field is described by
      - 'word'                                  a faker provider name
      - ('pyint', {'min_value': 1})             a faker provider with arguments
      - {'_qen_provider': 'choice', 'from': [...]}
      - {'_qen_provider': 'literal', 'value': x}
      - {'_qen_provider': 'counter', 'start': 0}  increasing integers per record
    anything else is copied into the record as-is.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _field(self, name: str, spec: Any) -> Any:
        if isinstance(spec, dict) and "_qen_provider" in spec:
            provider = spec["_qen_provider"]
            if provider == "choice":
                picked = self._rng.choice(spec["from"])
                # numpy scalars back to plain python values
                return picked.item() if hasattr(picked, 'item') else picked
            if provider == "literal":
                return spec["value"]
            if provider == "counter":
                value = self._counters.get(name, spec.get("start", 0))
                self._counters[name] = value + 1
                return value
            raise ValueError(f"unknown _qen_provider: '{provider}'")
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._call_faker(spec)
        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._call_faker(spec[0], spec[1])
        return spec

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        return {name: self._field(name, spec) for name, spec in schema.items()}


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def _records(self) -> Iterator[Dict[str, Any]]:
        generator = RecordGenerator(self._seed)
        while True:
            yield generator.create(self._schema)

    def take(self, count: int) -> LazySequence:
        """a materialized sequence of count records"""
        generator = RecordGenerator(self._seed)
        return from_iterable([generator.create(self._schema) for _ in range(count)])

    def stream(self) -> LazySequence:
        """
        an unbounded, cursor-backed sequence of records. every restart reseeds,
        so re-walking a chain replays the same records when a seed is given.
        """
        return LazySequence(self._records)


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
