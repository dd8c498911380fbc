from __future__ import annotations
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Entry(Generic[K, V]):
    """One key/value pair stored in a bucket.

    The key is fixed once the entry exists; only the value slot is mutable.
    """

    __slots__ = ("_key", "value")

    def __init__(self, key: K, value: V) -> None:
        self._key = key
        self.value = value

    @property
    def key(self) -> K:
        return self._key

    def clone(self) -> "Entry[K, V]":
        """Return a shallow copy referencing the same key and value."""
        return Entry(self._key, self.value)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self._key!r}, {self.value!r})"
