from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..selectors import resolve_selector

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class ConvertAccessor(Generic[T]):
    """conversions from a sequence to plain python, numpy and pandas objects"""
    def __init__(self, sequence_instance: 'LazySequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence._get_data())

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._sequence._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Union[Selector[T, V], str]] = None) -> Dict[K, V]:
        """convert to dictionary; later duplicate keys win"""
        key_of = resolve_selector(key_selector)
        value_of = resolve_selector(value_selector)
        return {key_of(item, i): value_of(item, i) for i, item in enumerate(self._sequence._get_data())}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe; pairs and other namedtuples become columns"""
        return pd.DataFrame(self._sequence._get_data())
