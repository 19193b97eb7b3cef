from __future__ import annotations
import typing
from collections import Counter
from functools import cmp_to_key
from ..types import *
from ..selectors import default_compare

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

AVERAGE_MODES = ('mean', 'median', 'mode')


class _StatsOperations(Generic[T]):
    def average(self: 'LazySequence[T]', by: str = 'mean') -> Optional[Any]:
        """
        mean, median or mode of the sequence. every mode returns None for an
        empty sequence. the median is the element at n // 2 after an ascending
        sort, so even-length input yields the upper middle element.
        """
        if by not in AVERAGE_MODES:
            raise ValueError(f"unknown average mode '{by}', expected one of {AVERAGE_MODES}")
        if by == 'mode':
            histogram = Counter(self)
            if not histogram:
                return None
            # most_common keeps first-seen order among equal counts
            return histogram.most_common(1)[0][0]
        data = self.materialize()._get_data()
        if not data:
            return None
        optimized = self._try_numpy_optimization(data, by)
        if optimized is not None:
            return optimized
        if by == 'median':
            return sorted(data, key=cmp_to_key(default_compare))[len(data) // 2]
        return self.sum() / self.count()

    def min(self: 'LazySequence[T]', comparator: Optional[Comparer[T]] = None) -> Optional[T]:
        """smallest element by comparator, None when empty"""
        compare = comparator or default_compare
        result = NIL
        for item in self:
            if result is NIL or compare(item, result) < 0:
                result = item
        return None if result is NIL else result

    def max(self: 'LazySequence[T]', comparator: Optional[Comparer[T]] = None) -> Optional[T]:
        """largest element by comparator, None when empty"""
        compare = comparator or default_compare
        result = NIL
        for item in self:
            if result is NIL or compare(item, result) > 0:
                result = item
        return None if result is NIL else result

    def count(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> int:
        if predicate is not None:
            return self.filter(predicate).count()
        if self.is_materialized:
            return len(self._source)
        return sum(1 for _ in self)

    def sum(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> Any:
        if predicate is not None:
            return self.filter(predicate).sum()
        total = 0
        for item in self:
            total += item
        return total
