from __future__ import annotations
import typing
from functools import reduce
from itertools import zip_longest
from ..types import *
from ..selectors import default_compare, resolve_predicate, resolve_selector

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence
    from ..containers import IndexedCollection, KeyedCollection


def _default_key(item: Any, index: int) -> Any:
    return item.key if isinstance(item, Pair) else index


def _default_value(item: Any, index: int) -> Any:
    return item.value if isinstance(item, Pair) else item


class _TerminalOperations(Generic[T]):
    """eager operations: each one walks the sequence when called."""

    def reduce(self: 'LazySequence[T]', combiner: Accumulator[U, T], initial: Any = NIL) -> U:
        """left fold; without an initial value the first element seeds the fold"""
        items = iter(self)
        if initial is NIL:
            initial = next(items, NIL)
            if initial is NIL:
                raise ValueError("cannot reduce an empty sequence without an initial value")
        return reduce(combiner, items, initial)

    def every(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        test = resolve_predicate(predicate)
        for index, item in enumerate(self):
            if not test(item, index):
                return False
        return True

    def some(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        test = resolve_predicate(predicate)
        for index, item in enumerate(self):
            if test(item, index):
                return True
        return False

    def none(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        return not self.some(predicate)

    def includes(self: 'LazySequence[T]', value: T,
                 equality: Optional[Callable[[T, T], bool]] = None) -> bool:
        """true when some element equals value"""
        equals = equality or (lambda a, b: a == b)
        return self.some(lambda item: equals(item, value))

    def sequence_equals(self: 'LazySequence[T]', other: Iterable[T],
                        comparator: Optional[Comparer[T]] = None) -> bool:
        """pairwise comparison in lock-step; lengths must match too"""
        compare = comparator or default_compare
        for left, right in zip_longest(self, self._coerce(other), fillvalue=NIL):
            if left is NIL or right is NIL:
                return False
            if compare(left, right) != 0:
                return False
        return True

    def element_at(self: 'LazySequence[T]', index: int) -> T:
        """element at a zero-based position"""
        if self.is_materialized:
            data = self._source
            if not data:
                raise OutOfRangeError("the sequence contains no elements")
            if 0 <= index < len(data):
                return data[index]
            raise OutOfRangeError(f"the index {index} is not valid for this sequence")
        seen = 0
        for position, item in enumerate(self):
            seen += 1
            if position == index:
                return item
        if seen == 0:
            raise OutOfRangeError("the sequence contains no elements")
        raise OutOfRangeError(f"the index {index} is not valid for this sequence")

    def first(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is not None:
            return self.filter(predicate).first()
        if self.is_materialized:
            if not self._source: raise OutOfRangeError("the sequence contains no elements")
            return self._source[0]
        for item in self:
            return item
        raise OutOfRangeError("the sequence contains no elements")

    def first_or_default(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except OutOfRangeError: return default

    def last(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get last element; a cursor-backed sequence is walked to the end"""
        if predicate is not None:
            return self.filter(predicate).last()
        if self.is_materialized:
            if not self._source: raise OutOfRangeError("the sequence contains no elements")
            return self._source[-1]
        result = NIL
        for item in self:
            result = item
        if result is NIL:
            raise OutOfRangeError("the sequence contains no elements")
        return result

    def last_or_default(self: 'LazySequence[T]', predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        try: return self.last(predicate)
        except OutOfRangeError: return default

    # --- container conversion ---

    def to_array(self: 'LazySequence[T]') -> 'IndexedCollection':
        """materialize into an index-addressable collection"""
        from ..containers import IndexedCollection
        return IndexedCollection._direct(list(self._get_data()))

    def to_dictionary(self: 'LazySequence[T]', key_selector: Optional[KeySelector[T, K]] = None,
                      value_selector: Optional[Union[Selector[T, V], str]] = None) -> 'KeyedCollection':
        """
        build a key-addressable collection; later duplicate keys overwrite
        earlier ones. pairs default to their own key and value, anything else
        is keyed by position.
        """
        from ..containers import KeyedCollection
        key_of = resolve_selector(key_selector, default=_default_key)
        value_of = resolve_selector(value_selector, default=_default_value)
        result = {}
        for index, item in enumerate(self):
            result[key_of(item, index)] = value_of(item, index)
        return KeyedCollection._direct(result)
