from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .keyed_map import KeyedMap
from .strategies import EqualityStrategy, NativeStrategy

K = TypeVar("K")
V = TypeVar("V")

# Distinguishes "missing" from a stored None.
_MISSING: Any = object()


class KeyedDict(Generic[K, V]):
    """A ``dict``-flavoured facade over :class:`KeyedMap`.

    Missing keys raise :class:`KeyError` on subscript access, and both keys
    and values default to Python's native ``hash()``/``==`` semantics.
    """

    __slots__ = ("_map",)

    def __init__(
        self,
        it: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        key_strategy: EqualityStrategy[K] = NativeStrategy.INSTANCE,
        value_strategy: EqualityStrategy[V] = NativeStrategy.INSTANCE,
        **kwargs: V,
    ) -> None:
        self._map: KeyedMap[K, V] = KeyedMap(
            key_strategy=key_strategy, value_strategy=value_strategy
        )
        if it is not None:
            self._map.put_all(it)
        for k, v in kwargs.items():
            self[k] = v  # type: ignore[index]

    @property
    def map(self) -> KeyedMap[K, V]:
        """The underlying map."""
        return self._map

    def __setitem__(self, key: K, value: V) -> None:
        self._map.set(key, value)

    def __getitem__(self, key: K) -> V:
        val = self._map.get(key, _MISSING)
        if val is _MISSING:
            raise KeyError(key)
        return val  # type: ignore[return-value]

    def __delitem__(self, key: K) -> None:
        if not self._map.delete(key):
            raise KeyError(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._map.get(key, default)

    def __contains__(self, key: K) -> bool:
        return self._map.has(key)

    def keys(self) -> List[K]:
        # Materialized so callers may mutate the dict while holding the result
        return list(self._map.keys())

    def values(self) -> List[V]:
        return list(self._map.values())

    def items(self) -> List[Tuple[K, V]]:
        return list(self._map.entries())

    def __len__(self) -> int:
        return len(self._map)

    def to_py(self) -> dict[K, V]:
        """Copy into a native dict. Keys must be natively hashable."""
        return dict(self._map.entries())

    def __iter__(self) -> Iterator[K]:
        # Iterate over keys to match dict-like iteration
        return self._map.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._map.entries())
        return f"KeyedDict({{{pairs}}})"
