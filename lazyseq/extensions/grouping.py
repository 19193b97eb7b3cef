from __future__ import annotations
import typing
from ..types import *
from ..selectors import resolve_selector

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class _GroupingOperations(Generic[T]):
    def group_by(self: 'LazySequence[T]', key_selector: KeySelector[T, K],
                 value_selector: Optional[Union[Selector[T, V], str]] = None) -> 'LazySequence[Grouping]':
        """
        partition the sequence by key. selectors are callables taking
        (element, index) or field names. one grouping per distinct key, in the
        order keys were first seen; all values are buffered when iterated.
        """
        from ..sequence import LazySequence
        key_of = resolve_selector(key_selector)
        value_of = resolve_selector(value_selector)
        def group_data():
            groups: Dict[Any, List[Any]] = {}
            for index, item in enumerate(self):
                groups.setdefault(key_of(item, index), []).append(value_of(item, index))
            for key, values in groups.items():
                yield Grouping(key, LazySequence._direct(values))
        return LazySequence(group_data)
