import pytest

from keyedmap import HashedValueStrategy, KeyedDict

from sample_values import Key


def test_dict_like():
    d = KeyedDict({"a": 1, "b": 2}, c=3)
    assert d["a"] == 1
    assert d.get("z") is None
    assert "b" in d
    assert len(d) == 3

    assert set(d.keys()) == {"a", "b", "c"}
    assert set(d.values()) == {1, 2, 3}
    assert set(d.items()) == {("a", 1), ("b", 2), ("c", 3)}
    assert d.to_py() == {"a": 1, "b": 2, "c": 3}
    assert sorted(d) == ["a", "b", "c"]


def test_missing_key_raises_key_error():
    d = KeyedDict([("a", None)])
    assert d["a"] is None
    with pytest.raises(KeyError):
        d["b"]
    with pytest.raises(KeyError):
        del d["b"]
    del d["a"]
    assert "a" not in d


def test_custom_key_strategy():
    d = KeyedDict(key_strategy=HashedValueStrategy.INSTANCE)
    d[Key("x", 4)] = "first"
    d[Key("x", 4)] = "second"
    assert len(d) == 1
    assert d[Key("x", 4)] == "second"
    assert d.map.size == 1


def test_nan_key_is_found_again():
    nan = float("nan")
    d = KeyedDict()
    d[nan] = "x"
    assert d[nan] == "x"
    d[nan] = "y"
    assert len(d) == 1
    assert d[nan] == "y"


def test_to_py_is_a_shallow_copy():
    inner = KeyedDict(n=1)
    outer = KeyedDict(inner=inner)
    native = outer.to_py()
    assert native == {"inner": inner}
    assert native["inner"] is inner
