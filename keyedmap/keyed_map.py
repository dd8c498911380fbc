from __future__ import annotations
import logging
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .bucket import Bucket
from .cursors import EntryCursor, KeyCursor, ValueCursor
from .entry import Entry
from .errors import IneligibleKeyError, InvalidStateError, UnsupportedOperationError
from .strategies import EqualityStrategy, HashedValueStrategy, IdentityStrategy

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")

logger = logging.getLogger(__name__)


class Location(NamedTuple):
    """Result of looking a key up in the bucket table.

    ``bucket`` is ``None`` when no entry shares the key's hash code;
    ``position`` is only meaningful when ``found`` is true.
    """

    found: bool
    hash: int
    bucket: Optional[Bucket[Entry[Any, Any]]]
    position: int


def _check_strategy(strategy: Any, role: str) -> None:
    for name in ("hash_code", "equals"):
        if not callable(getattr(strategy, name, None)):
            raise TypeError(f"{role} strategy must provide a callable {name}()")


class KeyedMap(Generic[K, V]):
    """A hash map whose keys are hashed and compared by a pluggable strategy.

    Entries sharing a hash code live in one :class:`Bucket` and are told apart
    by a linear scan with the key strategy's ``equals``; the first match wins.
    Values are compared (never hashed) by a separate value strategy, which
    defaults to identity.

    Not thread-safe: exactly one owner may mutate a map at a time.
    """

    __slots__ = ("_table", "_count", "_key_strategy", "_value_strategy", "_frozen")

    def __init__(
        self,
        items: Optional[Union["KeyedMap[K, V]", Iterable[Tuple[K, V]]]] = None,
        *,
        key_strategy: EqualityStrategy[K] = HashedValueStrategy.INSTANCE,
        value_strategy: EqualityStrategy[V] = IdentityStrategy.INSTANCE,
    ) -> None:
        _check_strategy(key_strategy, "key")
        _check_strategy(value_strategy, "value")
        self._key_strategy = key_strategy
        self._value_strategy = value_strategy
        self._frozen = False
        self._table: Dict[int, Bucket[Entry[K, V]]] = {}
        self._count = 0
        if items is not None:
            self.put_all(items)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _locate(self, key: K) -> Location:
        """Find the bucket and position of `key`.

        Every other lookup is built on this, so they all agree on what
        "present" means.
        """
        try:
            h = self._key_strategy.hash_code(key)
        except (AttributeError, TypeError) as exc:
            # No hash_code() method, or natively unhashable.
            raise IneligibleKeyError(key) from exc
        if h is None:
            raise IneligibleKeyError(key)
        bucket = self._table.get(h)
        if bucket is not None:
            eq = self._key_strategy.equals
            for i, entry in enumerate(bucket):
                if eq(key, entry.key):
                    return Location(True, h, bucket, i)
        return Location(False, h, bucket, -1)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise InvalidStateError("cannot modify a frozen KeyedMap")

    def _insert(self, loc: Location, key: K, value: V) -> None:
        bucket = loc.bucket
        if bucket is None:
            bucket = self._table[loc.hash] = Bucket()
            logger.debug("created bucket for hash %d", loc.hash)
        bucket.append(Entry(key, value))
        self._count += 1

    def _excise(self, loc: Location) -> V:
        bucket = loc.bucket
        entry = bucket.excise(loc.position)  # type: ignore[union-attr]
        self._count -= 1
        if not bucket:
            del self._table[loc.hash]
            logger.debug("dropped empty bucket for hash %d", loc.hash)
        return entry.value

    # -----------------------------
    # Core operations
    # -----------------------------
    @property
    def key_strategy(self) -> EqualityStrategy[K]:
        return self._key_strategy

    @property
    def value_strategy(self) -> EqualityStrategy[V]:
        return self._value_strategy

    @property
    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        """Discard every entry."""
        self._check_mutable()
        logger.debug("clearing %d entries", self._count)
        self._table = {}
        self._count = 0

    def get(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Return the value mapped to `key`, or `default` when absent."""
        loc = self._locate(key)
        if loc.found:
            return loc.bucket[loc.position].value  # type: ignore[index]
        return default

    def has(self, key: K) -> bool:
        return self._locate(key).found

    contains_key = has

    def set(self, key: K, value: V) -> "KeyedMap[K, V]":
        """Map `key` to `value` and return the map, for chaining.

        An existing entry keeps its original key object; only its value is
        replaced.
        """
        self._check_mutable()
        loc = self._locate(key)
        if loc.found:
            loc.bucket[loc.position].value = value  # type: ignore[index]
        else:
            self._insert(loc, key, value)
        return self

    def put(self, key: K, value: V) -> V:
        """Like :meth:`set`, but return the replaced value, or `value` on insert."""
        self._check_mutable()
        loc = self._locate(key)
        if loc.found:
            entry = loc.bucket[loc.position]  # type: ignore[index]
            previous = entry.value
            entry.value = value
            return previous
        self._insert(loc, key, value)
        return value

    def delete(self, key: K) -> bool:
        """Remove `key` if present; return True if something was removed."""
        self._check_mutable()
        loc = self._locate(key)
        if not loc.found:
            return False
        self._excise(loc)
        return True

    def remove(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Remove `key` and return its value, or `default` if it was absent."""
        self._check_mutable()
        loc = self._locate(key)
        if not loc.found:
            return default
        return self._excise(loc)

    def contains_value(self, value: V) -> bool:
        """Scan every entry for `value` using the value strategy. O(n)."""
        eq = self._value_strategy.equals
        for bucket in self._table.values():
            for entry in bucket:
                if eq(entry.value, value):
                    return True
        return False

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def entries(self) -> EntryCursor[K, V]:
        return EntryCursor(self._table.values())

    def keys(self) -> KeyCursor[K, V]:
        return KeyCursor(self._table.values())

    def values(self) -> ValueCursor[K, V]:
        return ValueCursor(self._table.values())

    def for_each(self, callback: Callable[[V, K, "KeyedMap[K, V]"], Any]) -> None:
        """Call ``callback(value, key, self)`` for every entry, in entries() order."""
        for bucket in self._table.values():
            for entry in bucket:
                callback(entry.value, entry.key, self)

    # -----------------------------
    # Bulk operations
    # -----------------------------
    def put_all(self, other: Union["KeyedMap[K, V]", Iterable[Tuple[K, V]]]) -> None:
        """Set every pair from `other`, overwriting existing keys.

        `other` may be a KeyedMap, anything with ``items()``, or an iterable
        of pairs. Keys already applied stay applied if a later one fails.
        """
        self._check_mutable()
        if isinstance(other, KeyedMap):
            pairs: Iterable[Tuple[K, V]] = other.entries()
        elif hasattr(other, "items"):
            pairs = other.items()  # type: ignore[union-attr]
        else:
            pairs = other
        before = self._count
        for k, v in pairs:
            self.set(k, v)
        logger.debug("put_all added %d new keys", self._count - before)

    def clone(self) -> "KeyedMap[K, V]":
        """Return a shallow copy with fresh entries and the same strategies."""
        result: KeyedMap[K, V] = KeyedMap(
            key_strategy=self._key_strategy, value_strategy=self._value_strategy
        )
        result.put_all(self)
        logger.debug("cloned map with %d entries", self._count)
        return result

    def key_set(self) -> "KeySet[K]":
        """Return a snapshot of the current keys."""
        return KeySet(self)

    def entry_set(self):
        raise UnsupportedOperationError("KeyedMap.entry_set")

    # -----------------------------
    # Read-only state, equality, hashing
    # -----------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "KeyedMap[K, V]":
        """Mark the map read-only. There is no way back."""
        if not self._frozen:
            self._frozen = True
            logger.debug("froze map with %d entries", self._count)
        return self

    def equals(self, other: Any) -> bool:
        """Identity equality only.

        Comparing the contents of two maps with the same strategies is not
        supported and raises rather than guessing.
        """
        if self is other:
            return True
        if (
            isinstance(other, KeyedMap)
            and self._key_strategy is other._key_strategy
            and self._value_strategy is other._value_strategy
        ):
            raise UnsupportedOperationError("KeyedMap.equals")
        return False

    def hash_code(self) -> int:
        if not self._frozen:
            raise InvalidStateError("hash_code() of a mutable KeyedMap is unstable")
        raise UnsupportedOperationError("KeyedMap.hash_code")

    def to_string(self) -> str:
        return "{KeyedMap}"

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return self.entries()

    def __contains__(self, key: K) -> bool:
        return self.has(key)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.entries())
        return f"KeyedMap({{{pairs}}})"


class KeySet(Generic[K]):
    """A read-only snapshot of a map's keys.

    Membership is decided by the originating map's key strategy, so keys
    without native ``__hash__``/``__eq__`` behave as they do in the map.
    Later changes to the map are not reflected. A membership test with an
    ineligible key raises, exactly as it does on the map.
    """

    __slots__ = ("_keys",)

    def __init__(self, source: KeyedMap[K, Any]) -> None:
        self._keys: KeyedMap[K, K] = KeyedMap(
            ((k, k) for k in source.keys()),
            key_strategy=source.key_strategy,
        )

    def __contains__(self, key: object) -> bool:
        return self._keys.has(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        return self._keys.keys()

    def to_py(self) -> list[K]:
        return list(self._keys.keys())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"KeySet({self.to_py()!r})"
