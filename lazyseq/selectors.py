"""
selector and comparator plumbing shared by the combinators.

a selector given by the caller is either a callable or a field name. it is
resolved once, when the combinator is built, into a ByField or ByFunction that
is always invoked as selector(element, index).
"""
import inspect
from dataclasses import dataclass
from .types import *
from collections.abc import Mapping


def default_compare(a: Any, b: Any) -> int:
    """three-way comparison with the sign of a - b"""
    return (a > b) - (a < b)


def truthy(item: Any, index: int = 0) -> bool:
    return bool(item)


def identity(item: Any, index: int = 0) -> Any:
    return item


def accepts_index(func: Callable) -> bool:
    """true when func needs a second positional argument; optional ones never get the index"""
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # builtins without a signature are treated as single-argument
        return False
    required = 0
    for param in params:
        if param.kind == param.VAR_POSITIONAL:
            return True
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD) and param.default is param.empty:
            required += 1
    return required >= 2


def with_index(func: Callable) -> Callable[[Any, int], Any]:
    """adapt func so it can always be called as func(element, index)"""
    if isinstance(func, (ByField, ByFunction)) or accepts_index(func):
        return func
    return lambda item, index: func(item)


@dataclass(frozen=True)
class ByField:
    """reads a named field, key or position from each element"""
    name: Any

    def __call__(self, item: Any, index: int = 0) -> Any:
        if isinstance(item, Mapping):
            return item[self.name]
        if isinstance(self.name, str):
            return getattr(item, self.name)
        return item[self.name]


@dataclass(frozen=True)
class ByFunction:
    """calls a user function with (element, index)"""
    func: Callable[[Any, int], Any]

    def __call__(self, item: Any, index: int = 0) -> Any:
        return self.func(item, index)


def resolve_selector(selector: Any, default: Callable[[Any, int], Any] = identity) -> Callable[[Any, int], Any]:
    """turn a callable, a field name or none into an (element, index) selector"""
    if selector is None:
        return default
    if isinstance(selector, (ByField, ByFunction)):
        return selector
    if callable(selector):
        return ByFunction(with_index(selector))
    return ByField(selector)


def resolve_predicate(predicate: Optional[Predicate]) -> Callable[[Any, int], bool]:
    if predicate is None:
        return truthy
    return with_index(predicate)
