"""
UOI Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Iterable, Iterator
from typing import Generic, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value

# Classes --------------------------------------------------------------------------------------------------------------

K = TypeVar("K")
V = TypeVar("V")


class BiDirectionalMap(Mapping[K, V], Generic[K, V]):
    """
    Read-only one-to-one map, looked up by key like any Mapping and by value through get_key().

    Unit prefixes are kept this way: the exponent gives the prefix for labels ("Mebi" for 2),
    the prefix gives the exponent back when a label is parsed. Keys and values must both be unique
    and hashable, contents are fixed at construction.
    """

    def __init__(self, pairs: Mapping[K, V] | Iterable[tuple[K, V]]) -> None:
        self._by_key: dict[K, V] = {}
        self._by_value: dict[V, K] = {}
        for key, value in pairs.items() if isinstance(pairs, Mapping) else pairs:
            if key in self._by_key:
                raise ValueError(f"Key {fmt_value(key)} already exists (maps to {self._by_key[key]!r})")
            if value in self._by_value:
                raise ValueError(f"Value {fmt_value(value)} already exists (mapped from {self._by_value[value]!r})")
            self._by_key[key] = value
            self._by_value[value] = key

    def __getitem__(self, key: K) -> V:
        return self._by_key[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._by_key)

    def __len__(self) -> int:
        return len(self._by_key)

    def get_key(self, value: V) -> K:
        """Key mapped to value, KeyError if there is none."""
        return self._by_value[value]

    def has_value(self, value: V) -> bool:
        return value in self._by_value
