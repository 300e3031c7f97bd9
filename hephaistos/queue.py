"""A first-in first-out queue with a fixed maximum size."""

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class BoundedQueue(Generic[T]):
    """FIFO queue that refuses new elements once ``max_size`` is reached."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self.max_size = max_size
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self._items)!r}, max_size={self.max_size})"

    def enqueue(self, data: T) -> None:
        """Add ``data`` at the back; OverflowError when the queue is full."""
        if len(self._items) >= self.max_size:
            raise OverflowError("queue is full")
        self._items.append(data)

    def dequeue(self) -> T:
        """Remove and return the front element; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front element without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]