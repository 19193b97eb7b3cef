from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Mapping, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callables that see an element may also take its local zero-based index
Predicate = Union[Callable[[T], bool], Callable[[T, int], bool]]
Selector = Union[Callable[[T], U], Callable[[T, int], U]]
KeySelector = Union[Callable[[T], K], Callable[[T, int], K], str]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]


class InvalidSourceError(ValueError):
    """raised when a sequence is built from a missing source"""
    pass


class OutOfRangeError(IndexError):
    """raised when an element is requested that the sequence does not have"""
    pass


class _Nil:
    """marker for 'no element yet', distinct from every payload including none"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NIL"


NIL = _Nil()


class Pair(NamedTuple):
    """one entry of a key/value source"""
    key: Any
    value: Any


class Grouping(NamedTuple):
    """a distinct key and the sequence of values collected for it"""
    key: Any
    values: Any

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, values={self.values.to.list()!r})"
