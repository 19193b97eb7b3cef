from __future__ import annotations

import logging

import numpy as np
from .types import *
from collections.abc import Mapping

# --- combinator mixins ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.stats import _StatsOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.convert import ConvertAccessor

logger = logging.getLogger(__name__)


# --- source resolution ---

def _resolve_source(source: Any) -> Union[List[Any], Callable[[], Iterable[Any]]]:
    """reduce any accepted input to a list or a zero-argument cursor factory"""
    if source is None:
        raise InvalidSourceError("a sequence cannot be built from a None source")
    # hoist nested sequences and container views instead of wrapping them
    while True:
        if isinstance(source, _SequenceBase):
            return source._source
        if hasattr(source, 'as_sequence') and not callable(source):
            source = source.as_sequence()
            continue
        break
    if isinstance(source, (list, tuple)):
        return list(source)
    if isinstance(source, Mapping):
        mapping = source
        return lambda: (Pair(key, value) for key, value in mapping.items())
    if callable(source):
        return source
    if iter(source) is source:
        # one-shot iterator: every restart sees the same, possibly spent, cursor
        return lambda: source
    return lambda: iter(source)


# --- base sequence implementation ---

class _SequenceBase(Generic[T]):
    def __init__(self, source: Any):
        """init from a list, a cursor factory, an iterable or another sequence"""
        self._source = _resolve_source(source)
        self._advance_count = 0
        self._position = 0
        self._cursor: Optional[Iterator[T]] = None
        self._current: Any = NIL
        self._started = False

    @classmethod
    def _direct(cls, data: List[T]) -> 'LazySequence[T]':
        """wrap an already built list without copying it"""
        instance = cls([])
        instance._source = data
        return instance

    @staticmethod
    def _coerce(other: Any) -> 'LazySequence[Any]':
        if isinstance(other, LazySequence):
            return other
        return LazySequence(other)

    # --- pull protocol ---

    @property
    def is_materialized(self) -> bool:
        return isinstance(self._source, list)

    @property
    def advance_count(self) -> int:
        """completed advances since the last restart"""
        return self._advance_count

    def restart(self) -> None:
        """reset to the first element; cursor sources call their factory again"""
        self._advance_count = 0
        self._started = True
        if self.is_materialized:
            self._position = 0
            return
        self._cursor = iter(self._produce())
        self._current = next(self._cursor, NIL)

    def _produce(self) -> Iterable[T]:
        """call the cursor factory once"""
        produced = self._source()
        if produced is None:
            raise InvalidSourceError("the sequence factory produced None")
        return produced

    def has_current(self) -> bool:
        if not self._started:
            self.restart()
        if self.is_materialized:
            return self._position < len(self._source)
        return self._current is not NIL

    def current(self) -> T:
        if not self.has_current():
            raise OutOfRangeError("the sequence has no current element")
        if self.is_materialized:
            return self._source[self._position]
        return self._current

    def advance(self) -> None:
        if not self.has_current():
            return
        self._advance_count += 1
        if self.is_materialized:
            self._position += 1
        else:
            self._current = next(self._cursor, NIL)

    def __iter__(self) -> Iterator[T]:
        """a fresh walk; it leaves the restart/advance cursor alone, so walks can overlap"""
        if self.is_materialized:
            return iter(self._source)
        return iter(self._produce())

    # --- materialization ---

    def materialize(self) -> 'LazySequence[T]':
        """drain a cursor-backed sequence into a list and keep it"""
        if self.is_materialized:
            return self
        data = list(self)
        logger.debug(f"materialized {len(data)} elements from a cursor-backed sequence")
        self._source = data
        self._cursor = None
        self._current = NIL
        self._position = 0
        self._advance_count = 0
        self._started = False
        return self

    def _get_data(self) -> List[T]:
        """the elements as a list; the backing list itself when materialized"""
        if self.is_materialized:
            return self._source
        return list(self)

    def _try_numpy_optimization(self, data: List[Any], operation: str) -> Optional[Any]:
        """numeric fast path for statistics; none means use the python path."""
        try:
            if data and all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in data):
                arr = np.asarray(data)
                if operation == 'mean':
                    return np.mean(arr).item()
                elif operation == 'median':
                    return np.sort(arr, kind='stable')[len(data) // 2].item()
            return None
        except (TypeError, ValueError, AttributeError, OverflowError):
            return None

    def __repr__(self) -> str:
        mode = "materialized" if self.is_materialized else "deferred"
        return f"{type(self).__name__}({mode})"


# --- main sequence class ---

class LazySequence(
    _SequenceBase[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _StatsOperations[T],
    _TerminalOperations[T]
):
    """a lazy, chainable sequence over a list, mapping, iterable or generator factory."""
    def __init__(self, source: Any):
        super().__init__(source)
        self.to = ConvertAccessor(self)
