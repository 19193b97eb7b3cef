from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..types import *
from ..selectors import default_compare, resolve_predicate, resolve_selector, with_index

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    def append(self: 'LazySequence[T]', other: Iterable[T]) -> 'LazySequence[T]':
        """yield this sequence, then other"""
        from ..sequence import LazySequence
        def append_data():
            yield from self
            yield from LazySequence._coerce(other)
        return LazySequence(append_data)

    def prepend(self: 'LazySequence[T]', other: Iterable[T]) -> 'LazySequence[T]':
        """yield other, then this sequence"""
        from ..sequence import LazySequence
        def prepend_data():
            yield from LazySequence._coerce(other)
            yield from self
        return LazySequence(prepend_data)

    def filter(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> 'LazySequence[T]':
        """keep elements where predicate(element, index) holds; truthiness by default"""
        from ..sequence import LazySequence
        test = resolve_predicate(predicate)
        def filter_data():
            for index, item in enumerate(self):
                if test(item, index):
                    yield item
        return LazySequence(filter_data)

    def map(self: 'LazySequence[T]', projection: Selector[T, U]) -> 'LazySequence[U]':
        """project each element with (element, index); a field name reads that field"""
        from ..sequence import LazySequence
        project = resolve_selector(projection)
        def map_data():
            for index, item in enumerate(self):
                yield project(item, index)
        return LazySequence(map_data)

    def flat(self: 'LazySequence[Iterable[U]]') -> 'LazySequence[U]':
        """flatten exactly one level of nesting"""
        from ..sequence import LazySequence
        def flat_data():
            for inner in self:
                yield from inner
        return LazySequence(flat_data)

    def flat_map(self: 'LazySequence[T]', projection: Selector[T, Iterable[U]]) -> 'LazySequence[U]':
        """project each element to an iterable and flatten the results"""
        return self.map(projection).flat()

    def zip(self: 'LazySequence[T]', other: Iterable[U],
            projection: Optional[Callable[[T, U], V]] = None) -> 'LazySequence[V]':
        """pair elements in lock-step, stopping at the shorter side"""
        from ..sequence import LazySequence
        project = projection or (lambda a, b: (a, b))
        def zip_data():
            for left, right in zip(self, LazySequence._coerce(other)):
                yield project(left, right)
        return LazySequence(zip_data)

    def skip_while(self: 'LazySequence[T]', predicate: Predicate[T]) -> 'LazySequence[T]':
        """
        drop the prefix for which predicate holds. once it fails the failing
        element and everything after it are yielded without re-testing.
        """
        from ..sequence import LazySequence
        test = with_index(predicate)
        def skip_while_data():
            skipping = True
            for index, item in enumerate(self):
                if skipping:
                    skipping = bool(test(item, index))
                if not skipping:
                    yield item
        return LazySequence(skip_while_data)

    def skip(self: 'LazySequence[T]', count: int) -> 'LazySequence[T]':
        """skip the first 'count' elements"""
        if count < 0:
            raise ValueError("skip count must not be negative")
        return self.skip_while(lambda item, index: index < count)

    def take_while(self: 'LazySequence[T]', predicate: Predicate[T]) -> 'LazySequence[T]':
        """yield elements until predicate first fails"""
        from ..sequence import LazySequence
        test = with_index(predicate)
        def take_while_data():
            for index, item in enumerate(self):
                if not test(item, index):
                    return
                yield item
        return LazySequence(take_while_data)

    def take(self: 'LazySequence[T]', count: int) -> 'LazySequence[T]':
        """take the first 'count' elements"""
        if count < 0:
            raise ValueError("take count must not be negative")
        return self.take_while(lambda item, index: index < count)

    def page(self: 'LazySequence[T]', skip: int, take: int) -> 'LazySequence[T]':
        return self.skip(skip).take(take)

    def reverse(self: 'LazySequence[T]') -> 'LazySequence[T]':
        """inverts the order of the elements; materializes when iterated"""
        from ..sequence import LazySequence
        return LazySequence(lambda: self._get_data()[::-1])

    def order_by_asc(self: 'LazySequence[T]', comparator: Optional[Comparer[T]] = None) -> 'LazySequence[T]':
        """stable sort ascending by a three-way comparator"""
        from ..sequence import LazySequence
        compare = comparator or default_compare
        def sorted_data():
            data = self._get_data()
            logger.debug(f"sorting {len(data)} elements")
            return sorted(data, key=cmp_to_key(compare))
        return LazySequence(sorted_data)

    def order_by_desc(self: 'LazySequence[T]', comparator: Optional[Comparer[T]] = None) -> 'LazySequence[T]':
        """stable sort descending; ties keep their original order"""
        compare = comparator or default_compare
        return self.order_by_asc(lambda a, b: -compare(a, b))
