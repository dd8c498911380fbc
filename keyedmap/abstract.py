"""Capabilities a value must offer to be stored in a :class:`KeyedMap`."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ValueType(Protocol):
    """A value whose equality is based on content rather than identity."""

    def equals(self, other: Any) -> bool: ...


@runtime_checkable
class HashedValueType(ValueType, Protocol):
    """A value type eligible for use as a key.

    ``hash_code()`` may return ``None``; such a value is ineligible as a key
    and the map refuses it.
    """

    def hash_code(self) -> Optional[int]: ...
