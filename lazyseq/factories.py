import typing
from itertools import count as _count, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import LazySequence

def from_iterable(data: Iterable[T]) -> 'LazySequence[T]':
    """create a sequence from a list, mapping, iterable, factory or sequence"""
    from .sequence import LazySequence
    return LazySequence(data)

def from_dict(data: Mapping[K, V]) -> 'LazySequence[Pair]':
    """create a sequence yielding one Pair(key, value) per entry"""
    from .sequence import LazySequence
    return LazySequence(lambda: (Pair(key, value) for key, value in data.items()))

def from_range(base: int, count: int) -> 'LazySequence[int]':
    """count ascending integers starting at base, generated on demand"""
    from .sequence import LazySequence
    return LazySequence(lambda: range(base, base + max(count, 0)))

def repeat(item: T, count: int) -> 'LazySequence[T]':
    """create sequence with repeated item"""
    from .sequence import LazySequence
    return LazySequence(lambda: _repeat(item, count))

def empty() -> 'LazySequence[Any]':
    """create empty sequence"""
    from .sequence import LazySequence
    return LazySequence([])

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'LazySequence[T]':
    """call generator_func per element; unbounded when count is none"""
    from .sequence import LazySequence
    def generate_data():
        counter = _count() if count is None else range(count)
        for _ in counter:
            yield generator_func()
    return LazySequence(generate_data)

# --- aliases ---
lazyseq = from_iterable
S = from_iterable
