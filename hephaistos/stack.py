"""A last-in first-out stack with a fixed maximum size."""

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """LIFO stack that refuses new elements once ``max_size`` is reached."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self.max_size = max_size
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, max_size={self.max_size})"

    def push(self, data: T) -> None:
        """Put ``data`` on top; OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(data)

    def pop(self) -> T:
        """Remove and return the top element; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def get(self, index: int) -> T:
        """Return the element at ``index`` counted from the bottom."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for stack of {len(self._items)}")
        return self._items[index]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.max_size