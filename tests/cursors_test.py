from keyedmap import EntryCursor, KeyCursor, KeyedMap, ValueCursor

from sample_values import Key


def populated():
    m = KeyedMap()
    for name, h in (("a", 1), ("b", 2), ("c", 1), ("d", 3)):
        m.set(Key(name, h), name.upper())
    return m


def test_cursor_types():
    m = populated()
    assert isinstance(m.entries(), EntryCursor)
    assert isinstance(m.keys(), KeyCursor)
    assert isinstance(m.values(), ValueCursor)


def test_walks_buckets_then_storage_order():
    m = populated()
    # Hash 1 was created first, so "a" and "c" come before "b" and "d".
    assert [k.name for k in m.keys()] == ["a", "c", "b", "d"]
    assert list(m.values()) == ["A", "C", "B", "D"]


def test_cursor_is_not_restartable():
    m = populated()
    cursor = m.keys()
    assert iter(cursor) is cursor
    assert len(list(cursor)) == 4
    assert list(cursor) == []
    assert next(cursor, "done") == "done"


def test_fresh_cursors_are_independent():
    m = populated()
    first = m.values()
    second = m.values()
    assert next(first) == "A"
    assert next(first) == "C"
    assert next(second) == "A"


def test_empty_map_yields_nothing():
    m = KeyedMap()
    assert list(m.entries()) == []
    assert list(m.keys()) == []
    assert list(m.values()) == []


def test_entries_are_key_value_tuples():
    m = populated()
    key, value = next(m.entries())
    assert key.name == "a"
    assert value == "A"
