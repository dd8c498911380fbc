"""Small value types shared by the test modules."""

from typing import Any, Optional


class Key:
    """Compares by name; the hash code is supplied, so collisions are easy."""

    def __init__(self, name: str, h: Optional[int] = 0) -> None:
        self.name = name
        self.h = h

    def equals(self, other: Any) -> bool:
        return isinstance(other, Key) and other.name == self.name

    def hash_code(self) -> Optional[int]:
        return self.h

    def __repr__(self) -> str:
        return f"Key({self.name!r}, {self.h!r})"


class Val:
    """Compares by payload."""

    def __init__(self, x: Any) -> None:
        self.x = x

    def equals(self, other: Any) -> bool:
        return isinstance(other, Val) and other.x == self.x

    def __repr__(self) -> str:
        return f"Val({self.x!r})"
