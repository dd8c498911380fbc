from __future__ import annotations
from typing import Any, ClassVar, Generic, Optional, TypeVar

from .errors import UnsupportedOperationError

T = TypeVar("T")


class EqualityStrategy(Generic[T]):
    """A pair of functions deciding how a map hashes and compares objects.

    Implementations must be stateless. Whenever ``equals(a, b)`` holds,
    ``hash_code(a) == hash_code(b)`` must hold too; the map does not check it.
    """

    def hash_code(self, obj: T) -> Optional[int]:
        raise NotImplementedError

    def equals(self, a: T, b: Any) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}()"


class HashedValueStrategy(EqualityStrategy[T]):
    """Delegates to the object's own ``hash_code()`` and ``equals()``."""

    INSTANCE: ClassVar["HashedValueStrategy[Any]"]

    def hash_code(self, obj: T) -> Optional[int]:
        return obj.hash_code()  # type: ignore[attr-defined]

    def equals(self, a: T, b: Any) -> bool:
        return a.equals(b)  # type: ignore[attr-defined]


class IdentityStrategy(EqualityStrategy[T]):
    """Compares by object identity. Cannot hash, so only fit for values."""

    INSTANCE: ClassVar["IdentityStrategy[Any]"]

    def hash_code(self, obj: T) -> Optional[int]:
        raise UnsupportedOperationError("IdentityStrategy.hash_code")

    def equals(self, a: T, b: Any) -> bool:
        return a is b


class NativeStrategy(EqualityStrategy[T]):
    """Uses Python's built-in ``hash()`` and ``==``.

    Identity implies equality, as in ``dict``, so keys such as ``nan`` that
    are unequal to themselves can still be found again.
    """

    INSTANCE: ClassVar["NativeStrategy[Any]"]

    def hash_code(self, obj: T) -> Optional[int]:
        return hash(obj)

    def equals(self, a: T, b: Any) -> bool:
        return a is b or a == b


HashedValueStrategy.INSTANCE = HashedValueStrategy()
IdentityStrategy.INSTANCE = IdentityStrategy()
NativeStrategy.INSTANCE = NativeStrategy()
