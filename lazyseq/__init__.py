r"""
'   _
'  | |    __ _ ____ _   _ ___  ___  __ _
'  | |   / _` |_  /| | | / __|/ _ \/ _` |
'  | |__| (_| |/ / | |_| \__ \  __/ (_| |
'  |_____\__,_/___| \__, |___/\___|\__, |
'                   |___/             |_|
"""

# expose the main classes
from .sequence import LazySequence
from .containers import SequenceView, IndexedCollection, KeyedCollection

# expose the factory functions
from .factories import (
    from_iterable,
    from_dict,
    from_range,
    repeat,
    empty,
    generate,
    lazyseq,
    S
)

# expose supporting data classes and errors
from .types import (
    NIL,
    Pair,
    Grouping,
    InvalidSourceError,
    OutOfRangeError
)
from .selectors import ByField, ByFunction

# define what `import *` does
__all__ = [
    "LazySequence",
    "SequenceView",
    "IndexedCollection",
    "KeyedCollection",
    "from_iterable",
    "from_dict",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazyseq",
    "S",
    "NIL",
    "Pair",
    "Grouping",
    "InvalidSourceError",
    "OutOfRangeError",
    "ByField",
    "ByFunction"
]
