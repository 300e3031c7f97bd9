import pytest

from hephaistos.stack import BoundedStack


def test_lifo_order():
    stack = BoundedStack(5)
    for value in ["a", "b", "c"]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty()


def test_full_stack_rejects():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_pop_and_peek_empty_raise():
    stack = BoundedStack(2)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_peek_returns_top_without_removing():
    stack = BoundedStack(3)
    stack.push("x")
    stack.push("y")
    assert stack.peek() == "y"
    assert len(stack) == 2


def test_get_counts_from_bottom():
    stack = BoundedStack(3)
    for value in ["bottom", "middle", "top"]:
        stack.push(value)
    assert stack.get(0) == "bottom"
    assert stack.get(2) == "top"
    with pytest.raises(IndexError):
        stack.get(3)
    with pytest.raises(IndexError):
        stack.get(-1)


def test_empty_and_full_flags():
    stack = BoundedStack(1)
    assert stack.is_empty() and not stack.is_full()
    stack.push(0)
    assert stack.is_full() and not stack.is_empty()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-3)