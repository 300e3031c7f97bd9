"""A singly linked list with head and tail references."""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from hephaistos.compares import cmp_int

Comparator = Callable[[Any, Any], int]


def list_compare(a: int, b: int) -> int:
    """Compare two ints by their wrapped 32-bit difference."""
    return cmp_int(a, b)


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_back(self, data: Any) -> None:
        """Append ``data`` at the end."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def add_front(self, data: Any) -> None:
        """Prepend ``data`` at the start."""
        node = _Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def remove(self, data: Any) -> None:
        """Remove the first element equal to ``data``; ValueError if absent."""
        previous: Optional[_Node] = None
        for node in self._nodes():
            if node.data == data:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{data!r} is not in the list")

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def insert(self, data: Any, index: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position {index} out of range for list of {self._size}")
        if index == 0:
            self.add_front(data)
            return
        if index == self._size:
            self.add_back(data)
            return
        previous = self._node_at(index - 1)
        previous.next = _Node(data, previous.next)
        self._size += 1

    def is_empty(self) -> bool:
        return self._size == 0

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each element in order."""
        for data in self:
            func(data)

    def sort(self, cmp: Comparator) -> None:
        """Bubble-sort the elements in place using the three-way ``cmp``."""
        for passes in range(self._size - 1, 0, -1):
            node = self._head
            for _ in range(passes):
                following = node.next
                if cmp(node.data, following.data) > 0:
                    node.data, following.data = following.data, node.data
                node = following

    def _node_at(self, index: int) -> _Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range for list of {self._size}")

    def get(self, index: int) -> Any:
        """Return the element at ``index``; IndexError when out of range."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of {self._size}")
        return self._node_at(index).data