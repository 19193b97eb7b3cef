from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .sequence import LazySequence


# --- delegation adapter ---

class SequenceView(ABC):
    """
    forwards every combinator to a fresh LazySequence over the container's
    storage. containers only implement as_sequence(); results are sequences,
    not containers, so chains stay lazy until a terminal call.
    """

    @abstractmethod
    def as_sequence(self) -> LazySequence:
        """a fresh sequence over a snapshot of the storage"""
        pass

    @property
    def to(self):
        return self.as_sequence().to

    def append(self, other: Iterable[Any]) -> LazySequence:
        return self.as_sequence().append(other)

    def prepend(self, other: Iterable[Any]) -> LazySequence:
        return self.as_sequence().prepend(other)

    def filter(self, predicate: Optional[Predicate] = None) -> LazySequence:
        return self.as_sequence().filter(predicate)

    def map(self, projection: Selector) -> LazySequence:
        return self.as_sequence().map(projection)

    def flat(self) -> LazySequence:
        return self.as_sequence().flat()

    def flat_map(self, projection: Selector) -> LazySequence:
        return self.as_sequence().flat_map(projection)

    def reduce(self, combiner: Accumulator, initial: Any = NIL) -> Any:
        return self.as_sequence().reduce(combiner, initial)

    def every(self, predicate: Optional[Predicate] = None) -> bool:
        return self.as_sequence().every(predicate)

    def some(self, predicate: Optional[Predicate] = None) -> bool:
        return self.as_sequence().some(predicate)

    def none(self, predicate: Optional[Predicate] = None) -> bool:
        return self.as_sequence().none(predicate)

    def includes(self, value: Any, equality: Optional[Callable[[Any, Any], bool]] = None) -> bool:
        return self.as_sequence().includes(value, equality)

    def group_by(self, key_selector: KeySelector, value_selector: Any = None) -> LazySequence:
        return self.as_sequence().group_by(key_selector, value_selector)

    def sequence_equals(self, other: Iterable[Any], comparator: Optional[Comparer] = None) -> bool:
        return self.as_sequence().sequence_equals(other, comparator)

    def zip(self, other: Iterable[Any], projection: Optional[Callable[[Any, Any], Any]] = None) -> LazySequence:
        return self.as_sequence().zip(other, projection)

    def skip_while(self, predicate: Predicate) -> LazySequence:
        return self.as_sequence().skip_while(predicate)

    def skip(self, count: int) -> LazySequence:
        return self.as_sequence().skip(count)

    def take_while(self, predicate: Predicate) -> LazySequence:
        return self.as_sequence().take_while(predicate)

    def take(self, count: int) -> LazySequence:
        return self.as_sequence().take(count)

    def page(self, skip: int, take: int) -> LazySequence:
        return self.as_sequence().page(skip, take)

    def reverse(self) -> LazySequence:
        return self.as_sequence().reverse()

    def unique(self, comparator: Optional[Comparer] = None) -> LazySequence:
        return self.as_sequence().unique(comparator)

    def union(self, other: Iterable[Any], comparator: Optional[Comparer] = None) -> LazySequence:
        return self.as_sequence().union(other, comparator)

    def order_by_asc(self, comparator: Optional[Comparer] = None) -> LazySequence:
        return self.as_sequence().order_by_asc(comparator)

    def order_by_desc(self, comparator: Optional[Comparer] = None) -> LazySequence:
        return self.as_sequence().order_by_desc(comparator)

    def intersect(self, other: Iterable[Any]) -> LazySequence:
        return self.as_sequence().intersect(other)

    def diff(self, other: Iterable[Any]) -> LazySequence:
        return self.as_sequence().diff(other)

    def average(self, by: str = 'mean') -> Optional[Any]:
        return self.as_sequence().average(by)

    def element_at(self, index: int) -> Any:
        return self.as_sequence().element_at(index)

    def min(self, comparator: Optional[Comparer] = None) -> Optional[Any]:
        return self.as_sequence().min(comparator)

    def max(self, comparator: Optional[Comparer] = None) -> Optional[Any]:
        return self.as_sequence().max(comparator)

    def sum(self, predicate: Optional[Predicate] = None) -> Any:
        return self.as_sequence().sum(predicate)

    def count(self, predicate: Optional[Predicate] = None) -> int:
        return self.as_sequence().count(predicate)

    def first(self, predicate: Optional[Predicate] = None) -> Any:
        return self.as_sequence().first(predicate)

    def first_or_default(self, predicate: Optional[Predicate] = None, default: Any = None) -> Any:
        return self.as_sequence().first_or_default(predicate, default)

    def last(self, predicate: Optional[Predicate] = None) -> Any:
        return self.as_sequence().last(predicate)

    def last_or_default(self, predicate: Optional[Predicate] = None, default: Any = None) -> Any:
        return self.as_sequence().last_or_default(predicate, default)

    def to_array(self) -> 'IndexedCollection':
        return self.as_sequence().to_array()

    def to_dictionary(self, key_selector: Optional[KeySelector] = None,
                      value_selector: Any = None) -> 'KeyedCollection':
        return self.as_sequence().to_dictionary(key_selector, value_selector)


def _copy_contents(inner: Any) -> Any:
    """unwrap factories and sequences down to something iterable"""
    while callable(inner) and not isinstance(inner, SequenceView):
        inner = inner()
    return inner


# --- index-addressable container ---

class IndexedCollection(SequenceView, Generic[T]):
    """an eager, mutable, list-backed collection"""

    def __init__(self, inner: Any = None):
        self._inner: List[T] = list(_copy_contents(inner)) if inner is not None else []

    @classmethod
    def _direct(cls, inner: List[T]) -> 'IndexedCollection[T]':
        result = cls()
        result._inner = inner
        return result

    def as_sequence(self) -> LazySequence[T]:
        return LazySequence(self._inner)

    def as_list(self) -> List[T]:
        """the backing storage as a plain list (copy)"""
        return list(self._inner)

    # --- list protocol ---

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._inner))

    def __contains__(self, item: Any) -> bool:
        return item in self._inner

    def __getitem__(self, index: int) -> T:
        return self._inner[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._inner[index] = value

    def __delitem__(self, index: int) -> None:
        del self._inner[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, IndexedCollection):
            return self._inner == other._inner
        if isinstance(other, list):
            return self._inner == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"IndexedCollection({self._inner!r})"

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """element at index, or default when the index is out of range"""
        if -len(self._inner) <= index < len(self._inner):
            return self._inner[index]
        return default

    # --- array-style mutation ---

    def slice(self, offset: int, length: Optional[int] = None) -> 'IndexedCollection[T]':
        """copy of length elements starting at offset (to the end when length is none)"""
        end = None if length is None else offset + length
        return IndexedCollection._direct(self._inner[offset:end])

    def splice(self, offset: int, length: Optional[int] = None,
               replacement: Iterable[T] = ()) -> 'IndexedCollection[T]':
        """remove length elements at offset, insert replacement there, return the removed ones"""
        end = len(self._inner) if length is None else offset + length
        removed = self._inner[offset:end]
        self._inner[offset:end] = list(replacement)
        return IndexedCollection._direct(removed)

    def push(self, *items: T) -> 'IndexedCollection[T]':
        self._inner.extend(items)
        return self

    def pop(self) -> Optional[T]:
        """remove and return the last element, None when empty"""
        return self._inner.pop() if self._inner else None

    def unshift(self, *items: T) -> 'IndexedCollection[T]':
        self._inner[0:0] = items
        return self

    def shift(self) -> Optional[T]:
        """remove and return the first element, None when empty"""
        return self._inner.pop(0) if self._inner else None

    # --- overrides with direct storage access ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        if predicate is not None:
            return self.as_sequence().count(predicate)
        return len(self._inner)

    def to_array(self) -> 'IndexedCollection[T]':
        return IndexedCollection(self._inner)


# --- key-addressable container ---

class KeyedCollection(SequenceView, Generic[K, V]):
    """an eager, mutable, dict-backed collection; iterates as pairs"""

    def __init__(self, inner: Any = None):
        self._inner: Dict[K, V] = {}
        if inner is None:
            return
        inner = _copy_contents(inner)
        if isinstance(inner, KeyedCollection):
            self._inner = dict(inner._inner)
        elif hasattr(inner, 'items'):
            self._inner = dict(inner.items())
        else:
            for key, value in inner:
                self._inner[key] = value

    @classmethod
    def _direct(cls, inner: Dict[K, V]) -> 'KeyedCollection[K, V]':
        result = cls()
        result._inner = inner
        return result

    def as_sequence(self) -> LazySequence[Pair]:
        return LazySequence([Pair(key, value) for key, value in self._inner.items()])

    def as_dict(self) -> Dict[K, V]:
        """the backing storage as a plain dict (copy)"""
        return dict(self._inner)

    # --- mapping protocol ---

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.as_sequence())

    def __contains__(self, key: Any) -> bool:
        return key in self._inner

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._inner[key] = value

    def __delitem__(self, key: K) -> None:
        del self._inner[key]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, KeyedCollection):
            return self._inner == other._inner
        if isinstance(other, dict):
            return self._inner == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"KeyedCollection({self._inner!r})"

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._inner.get(key, default)

    def has(self, key: K) -> bool:
        return key in self._inner

    def keys(self) -> IndexedCollection[K]:
        return IndexedCollection._direct(list(self._inner.keys()))

    def values(self) -> IndexedCollection[V]:
        return IndexedCollection._direct(list(self._inner.values()))

    def flip(self) -> 'KeyedCollection[V, K]':
        """swap keys and values; values must be hashable, later duplicates win"""
        return KeyedCollection._direct({value: key for key, value in self._inner.items()})

    # --- overrides with direct storage access ---

    def count(self, predicate: Optional[Predicate[Pair]] = None) -> int:
        if predicate is not None:
            return self.as_sequence().count(predicate)
        return len(self._inner)

    def to_array(self) -> IndexedCollection[V]:
        """the values, in insertion order"""
        return self.values()
