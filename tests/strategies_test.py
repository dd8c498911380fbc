import pytest

from keyedmap import (
    EqualityStrategy,
    HashedValueStrategy,
    IdentityStrategy,
    KeyedMap,
    NativeStrategy,
    UnsupportedOperationError,
)
from keyedmap.abstract import HashedValueType, ValueType

from sample_values import Key, Val


def test_hashed_value_strategy_delegates():
    s = HashedValueStrategy.INSTANCE
    assert s.hash_code(Key("a", 17)) == 17
    assert s.equals(Key("a", 1), Key("a", 1))
    assert not s.equals(Key("a", 1), Key("b", 1))
    assert s.hash_code(Key("a", None)) is None


def test_identity_strategy_compares_by_reference():
    s = IdentityStrategy.INSTANCE
    v = Val(1)
    assert s.equals(v, v)
    assert not s.equals(v, Val(1))
    with pytest.raises(UnsupportedOperationError):
        s.hash_code(v)
    with pytest.raises(NotImplementedError):
        s.hash_code(v)


def test_native_strategy_uses_builtin_protocols():
    s = NativeStrategy.INSTANCE
    assert s.hash_code("abc") == hash("abc")
    assert s.equals(1, 1.0)
    assert not s.equals("a", "b")


def test_instances_are_shared_singletons():
    assert isinstance(HashedValueStrategy.INSTANCE, HashedValueStrategy)
    assert isinstance(IdentityStrategy.INSTANCE, EqualityStrategy)
    assert NativeStrategy.INSTANCE is NativeStrategy.INSTANCE


def test_custom_strategy_drives_the_map():
    class CaseInsensitive(EqualityStrategy[str]):
        def hash_code(self, obj):
            return hash(obj.lower())

        def equals(self, a, b):
            return a.lower() == b.lower()

    m = KeyedMap(key_strategy=CaseInsensitive())
    m.set("Hello", 1)
    m.set("HELLO", 2)
    assert m.size == 1
    assert m.get("hello") == 2
    assert list(m.keys()) == ["Hello"]


def test_protocols_recognise_capable_values():
    assert isinstance(Key("a"), HashedValueType)
    assert isinstance(Val(1), ValueType)
    assert not isinstance(Val(1), HashedValueType)


def test_native_strategy_treats_identity_as_equality():
    nan = float("nan")
    s = NativeStrategy.INSTANCE
    assert s.equals(nan, nan)
    assert not s.equals(nan, float("nan"))

    m = KeyedMap(key_strategy=NativeStrategy.INSTANCE)
    m.set(nan, 1)
    m.set(nan, 2)
    assert m.size == 1
    assert m.get(nan) == 2
