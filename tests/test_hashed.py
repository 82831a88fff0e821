import pytest

from stlkit.hashed import SimpleUnorderedMap, SimpleUnorderedSet


def _example_map():
    m = SimpleUnorderedMap()
    m.insert(1, "one")
    m.insert(2, "two")
    m.insert(3, "three")
    return m


def test_map_example():
    m = _example_map()
    assert list(m) == [(1, "one"), (2, "two"), (3, "three")]
    assert 2 in m
    assert m.get(2) == "two"
    m.erase(2)
    assert list(m) == [(1, "one"), (3, "three")]
    assert 2 not in m
    assert len(m) == 2


def test_map_get_missing_raises():
    m = _example_map()
    with pytest.raises(KeyError):
        m.get(42)


def test_map_insert_existing_updates_value():
    m = _example_map()
    m.insert(1, "uno")
    assert m.get(1) == "uno"
    assert len(m) == 3


def test_map_erase_missing_is_noop():
    m = _example_map()
    m.erase(99)
    assert len(m) == 3
    assert dict(m) == {1: "one", 2: "two", 3: "three"}


def test_map_colliding_keys_share_bucket_in_order():
    m = SimpleUnorderedMap()
    m.insert(1, "a")
    m.insert(11, "b")
    m.insert(2, "c")
    assert [k for k, _ in m] == [1, 11, 2]
    assert m.get(11) == "b"
    m.erase(1)
    assert m.get(11) == "b"


def test_map_string_keys_round_trip():
    m = SimpleUnorderedMap()
    words = ["alpha", "beta", "gamma", "delta"]
    for w in words:
        m.insert(w, w.upper())
    assert all(m.get(w) == w.upper() for w in words)
    assert sorted(k for k, _ in m) == sorted(words)


def test_set_example():
    s = SimpleUnorderedSet()
    s.insert(1)
    s.insert(2)
    s.insert(3)
    assert list(s) == [1, 2, 3]
    assert 2 in s
    assert 5 not in s
    s.erase(2)
    assert list(s) == [1, 3]


def test_set_duplicates_ignored():
    s = SimpleUnorderedSet([4, 4, 14, 4])
    assert len(s) == 2
    assert list(s) == [4, 14]


def test_set_erase_missing_is_noop():
    s = SimpleUnorderedSet([1, 2])
    s.erase(7)
    assert len(s) == 2


def test_set_matches_builtin_set():
    values = [x * 7 % 23 for x in range(60)]
    s = SimpleUnorderedSet(values)
    assert sorted(s) == sorted(set(values))
    assert len(s) == len(set(values))