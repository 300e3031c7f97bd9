import pytest

from hephaistos.array import DynamicArray


def test_push_and_get_preserve_order():
    array = DynamicArray(2)
    for value in ["a", "b", "c", "d", "e"]:
        array.push(value)
    assert list(array) == ["a", "b", "c", "d", "e"]
    assert array.get(3) == "d"
    assert len(array) == 5


def test_capacity_grows_when_full():
    array = DynamicArray(2)
    array.push(1)
    array.push(2)
    assert array.capacity == 2
    array.push(3)
    assert array.capacity == 4


def test_capacity_never_below_length():
    array = DynamicArray(0)
    for value in range(20):
        array.push(value)
        assert array.capacity >= len(array)
    assert list(array) == list(range(20))


def test_pop_is_lifo():
    array = DynamicArray(4)
    for value in range(6):
        array.push(value)
    assert [array.pop() for _ in range(6)] == [5, 4, 3, 2, 1, 0]
    assert len(array) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray(3).pop()


def test_pop_shrinks_sparse_array():
    array = DynamicArray(16)
    for value in range(5):
        array.push(value)
    while len(array) > 1:
        array.pop()
    assert array.capacity < 16
    assert array.capacity >= len(array)


def test_get_out_of_range_raises():
    array = DynamicArray(2)
    array.push("x")
    with pytest.raises(IndexError):
        array.get(1)
    with pytest.raises(IndexError):
        array.get(-1)


def test_set_replaces_value():
    array = DynamicArray(2)
    array.push("x")
    array.push("y")
    array.set(1, "z")
    assert list(array) == ["x", "z"]
    with pytest.raises(IndexError):
        array.set(2, "w")


def test_insert_positions():
    array = DynamicArray(1)
    array.push("b")
    array.insert(0, "a")
    array.insert(2, "d")
    array.insert(2, "c")
    assert list(array) == ["a", "b", "c", "d"]
    with pytest.raises(IndexError):
        array.insert(6, "z")


def test_remove_shifts_elements():
    array = DynamicArray(8)
    for value in "abcde":
        array.push(value)
    array.remove(1)
    assert list(array) == ["a", "c", "d", "e"]
    with pytest.raises(IndexError):
        array.remove(4)


def test_resize_clamps_to_length():
    array = DynamicArray(8)
    for value in range(5):
        array.push(value)
    array.resize(2)
    assert array.capacity == len(array)
    assert list(array) == [0, 1, 2, 3, 4]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)