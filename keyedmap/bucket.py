from __future__ import annotations
import ctypes
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Bucket(Generic[T]):
    """Ordered storage for the entries that share one hash code.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity grows geometrically (x2) when full; shrinks when quarter-full.
    • `excise()` shifts trailing items left, so survivors keep their order.
    • Positions are plain non-negative indices; no negative indexing.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Initial allocated capacity; most buckets only ever hold one entry.
    _INITIAL_CAPACITY = 4

    def __init__(self, capacity: int = _INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._buf = self._make_array(capacity)
        self._size = 0

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a buffer of `new_capacity` (must be ≥ size)."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        self._buf = new_buf
        self._capacity = new_capacity

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= self._size:
            raise IndexError("bucket position out of range")

    # --------------------------------- API -----------------------------------

    def append(self, item: T) -> None:
        """Append `item` to the end. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = item
        self._size += 1

    def excise(self, position: int) -> T:
        """Remove and return the item at `position`.

        Complexity: O(size - position) due to left-shift of trailing items.

        Raises:
            IndexError: if position is out of range.
        """
        self._check_position(position)
        item = self._buf[position]

        for j in range(position, self._size - 1):
            self._buf[j] = self._buf[j + 1]

        # Drop the reference held by the vacated tail slot.
        self._buf[self._size - 1] = None
        self._size -= 1

        if self._capacity > self._INITIAL_CAPACITY and self._size <= self._capacity // 4:
            self._resize(max(self._INITIAL_CAPACITY, self._capacity // 2))

        return item  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove all items. Keeps capacity."""
        for i in range(self._size):
            self._buf[i] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items in storage order."""
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, position: int) -> T:
        self._check_position(position)
        return self._buf[position]  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Bucket({list(self)!r})"
