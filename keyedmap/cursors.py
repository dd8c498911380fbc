"""Lazy cursors over a :class:`KeyedMap`'s bucket table.

A cursor walks the live table: buckets in table order, then each bucket in
storage order. It is single-use; ask the map for a fresh one to start over.
Structurally mutating the map while a cursor is open leaves the cursor's
remaining output unspecified.
"""

from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from .bucket import Bucket
from .entry import Entry

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class _BucketCursor(Generic[K, V, T]):
    __slots__ = ("_buckets", "_bucket", "_position")

    def __init__(self, buckets: Iterable[Bucket[Entry[K, V]]]) -> None:
        self._buckets: Optional[Iterator[Bucket[Entry[K, V]]]] = iter(buckets)
        self._bucket: Optional[Bucket[Entry[K, V]]] = None
        self._position = 0

    def _project(self, entry: Entry[K, V]) -> T:
        raise NotImplementedError

    def __iter__(self) -> "_BucketCursor[K, V, T]":
        return self

    def __next__(self) -> T:
        while self._buckets is not None:
            bucket = self._bucket
            if bucket is not None and self._position < len(bucket):
                entry = bucket[self._position]
                self._position += 1
                return self._project(entry)
            self._bucket = next(self._buckets, None)
            self._position = 0
            if self._bucket is None:
                # Exhausted for good; drop the table reference.
                self._buckets = None
        raise StopIteration


class EntryCursor(_BucketCursor[K, V, Tuple[K, V]]):
    """Yields ``(key, value)`` tuples."""

    __slots__ = ()

    def _project(self, entry: Entry[K, V]) -> Tuple[K, V]:
        return (entry.key, entry.value)


class KeyCursor(_BucketCursor[K, V, K]):
    __slots__ = ()

    def _project(self, entry: Entry[K, V]) -> K:
        return entry.key


class ValueCursor(_BucketCursor[K, V, V]):
    __slots__ = ()

    def _project(self, entry: Entry[K, V]) -> V:
        return entry.value
