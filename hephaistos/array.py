"""A growable array with an explicit, self-managed capacity."""

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Array that doubles its capacity when full and halves it when sparse.

    After a removal leaves the array non-empty but with fewer elements than a
    quarter of its capacity, the capacity is halved.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._items: List[T] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for array of {len(self._items)}")

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self.resize(max(1, self._capacity * 2))

    def _shrink_if_sparse(self) -> None:
        size = len(self._items)
        if 0 < size < self._capacity // 4:
            self.resize(self._capacity // 2)

    def resize(self, new_capacity: int) -> None:
        """Set the capacity, never below the current number of elements."""
        if new_capacity < 0:
            raise ValueError(f"capacity must not be negative, got {new_capacity}")
        self._capacity = max(new_capacity, len(self._items))

    def push(self, data: T) -> None:
        """Append ``data`` at the end, growing if needed."""
        self._grow_if_full()
        self._items.append(data)

    def pop(self) -> T:
        """Remove and return the last element; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty array")
        data = self._items.pop()
        self._shrink_if_sparse()
        return data

    def get(self, index: int) -> T:
        """Return the element at ``index``; IndexError when out of range."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, data: T) -> None:
        """Replace the element at ``index``; IndexError when out of range."""
        self._check_index(index)
        self._items[index] = data

    def insert(self, index: int, data: T) -> None:
        """Insert ``data`` before ``index`` (``index == len`` appends)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range for array of {len(self._items)}")
        self._grow_if_full()
        self._items.insert(index, data)

    def remove(self, index: int) -> None:
        """Delete the element at ``index``, shrinking if the array gets sparse."""
        self._check_index(index)
        del self._items[index]
        self._shrink_if_sparse()