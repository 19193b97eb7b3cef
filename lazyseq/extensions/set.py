from __future__ import annotations
import typing
import logging
from ..types import *
from ..selectors import default_compare

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)


class _SetOperations(Generic[T]):
    """
    set-like operations. unique and union work by sorting, so their output
    comes back in comparator order rather than input order. intersect and diff
    hash the other side, so they keep the left side's order and duplicates but
    require hashable elements.
    """

    def unique(self: 'LazySequence[T]', comparator: Optional[Comparer[T]] = None) -> 'LazySequence[T]':
        """sorted distinct elements; the first of each comparator-equal run wins."""
        from ..sequence import LazySequence
        compare = comparator or default_compare
        def unique_data():
            last = NIL
            for item in self.order_by_asc(compare):
                if last is NIL or compare(item, last) != 0:
                    yield item
                    last = item
        return LazySequence(unique_data)

    def union(self: 'LazySequence[T]', other: Iterable[T],
              comparator: Optional[Comparer[T]] = None) -> 'LazySequence[T]':
        """sorted distinct elements of both sequences"""
        return self.append(other).unique(comparator)

    def intersect(self: 'LazySequence[T]', other: Iterable[T]) -> 'LazySequence[T]':
        """elements of this sequence that also occur in other"""
        from ..sequence import LazySequence
        def intersect_data():
            members = set(LazySequence._coerce(other))
            logger.debug(f"intersect built a lookup of {len(members)} elements")
            for item in self:
                if item in members:
                    yield item
        return LazySequence(intersect_data)

    def diff(self: 'LazySequence[T]', other: Iterable[T]) -> 'LazySequence[T]':
        """elements of this sequence that do not occur in other"""
        from ..sequence import LazySequence
        def diff_data():
            members = set(LazySequence._coerce(other))
            logger.debug(f"diff built a lookup of {len(members)} elements")
            for item in self:
                if item not in members:
                    yield item
        return LazySequence(diff_data)
