"""Exceptions raised by :mod:`keyedmap`.

Every error here signals a broken usage contract rather than a transient
fault, so none of them is worth retrying.
"""

from __future__ import annotations


class KeyedMapError(Exception):
    """Base class for all keyedmap errors."""


class UnsupportedOperationError(KeyedMapError, NotImplementedError):
    """Raised by operations that are deliberately left unimplemented."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} is not supported")


class InvalidStateError(KeyedMapError, RuntimeError):
    """Raised when an operation is invoked in a state that forbids it."""


class IneligibleKeyError(KeyedMapError, TypeError):
    """Raised when a key has no hash code and so cannot be stored."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"{key!r} has an undefined hash code and cannot be used as a key")
