import pytest

from hephaistos.hashtable import Hashtable, hash_key


def test_hash_of_empty_key_is_zero():
    assert hash_key("", 7) == 0


def test_hash_of_single_char_is_code_modulo_size():
    assert hash_key("a", 255) == ord("a")


@pytest.mark.parametrize("key", ["a", "hello", "x" * 200, "é", "kernel/module"])
@pytest.mark.parametrize("size", [1, 3, 16, 255])
def test_hash_is_within_range_and_deterministic(key, size):
    first = hash_key(key, size)
    assert 0 <= first < size
    assert hash_key(key, size) == first


@pytest.mark.parametrize("size", [0, 256, -1])
def test_invalid_sizes_rejected(size):
    with pytest.raises(ValueError):
        hash_key("a", size)
    with pytest.raises(ValueError):
        Hashtable(size)


def test_insert_and_get():
    table = Hashtable(16)
    table.insert("one", 1)
    table.insert("two", 2)
    assert table.get("one") == 1
    assert table.get("two") == 2
    assert len(table) == 2


def test_insert_replaces_existing_value():
    table = Hashtable(16)
    table.insert("key", "old")
    table.insert("key", "new")
    assert table.get("key") == "new"
    assert len(table) == 1


def test_get_missing_raises_key_error():
    table = Hashtable(8)
    with pytest.raises(KeyError):
        table.get("absent")


def test_remove_and_missing_remove_is_ignored():
    table = Hashtable(8)
    table.insert("a", 1)
    table.remove("absent")
    assert table.get("a") == 1
    table.remove("a")
    assert "a" not in table
    assert len(table) == 0


def test_collisions_in_single_bucket():
    table = Hashtable(1)
    keys = [f"k{n}" for n in range(10)]
    for number, key in enumerate(keys):
        table.insert(key, number)
    for number, key in enumerate(keys):
        assert table.get(key) == number
    table.remove("k5")
    assert not table.contains_key("k5")
    assert sorted(table) == sorted(k for k in keys if k != "k5")


def test_newest_entry_chains_first():
    table = Hashtable(1)
    table.insert("first", 1)
    table.insert("second", 2)
    assert list(table) == ["second", "first"]


def test_contains_counts_none_values_as_present():
    table = Hashtable(4)
    table.insert("nothing", None)
    assert table.contains_key("nothing")
    assert "nothing" in table
    assert 5 not in table