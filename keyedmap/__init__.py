from .abstract import HashedValueType, ValueType
from .bucket import Bucket
from .cursors import EntryCursor, KeyCursor, ValueCursor
from .dictionary import KeyedDict
from .entry import Entry
from .errors import (
    IneligibleKeyError,
    InvalidStateError,
    KeyedMapError,
    UnsupportedOperationError,
)
from .keyed_map import KeyedMap, KeySet, Location
from .strategies import (
    EqualityStrategy,
    HashedValueStrategy,
    IdentityStrategy,
    NativeStrategy,
)

__all__ = [
    "Bucket",
    "Entry",
    "EntryCursor",
    "EqualityStrategy",
    "HashedValueStrategy",
    "HashedValueType",
    "IdentityStrategy",
    "IneligibleKeyError",
    "InvalidStateError",
    "KeyCursor",
    "KeySet",
    "KeyedDict",
    "KeyedMap",
    "KeyedMapError",
    "Location",
    "NativeStrategy",
    "UnsupportedOperationError",
    "ValueCursor",
    "ValueType",
]
