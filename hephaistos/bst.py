"""An unbalanced binary search tree ordered by a three-way comparison."""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], int]


@dataclass
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; equal elements are kept and go to the right."""

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self._root: Optional[_Node] = None

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"

    def insert(self, data: Any) -> None:
        """Add ``data`` to the tree."""
        node = _Node(data)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if self._cmp(data, current.data) < 0:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _replace_child(self, parent: Optional[_Node], old: _Node, new: Optional[_Node]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, data: Any) -> None:
        """Remove one element comparing equal to ``data``; absent data is ignored."""
        parent: Optional[_Node] = None
        current = self._root
        while current is not None:
            comparison = self._cmp(data, current.data)
            if comparison == 0:
                break
            parent = current
            current = current.left if comparison < 0 else current.right
        if current is None:
            return

        if current.left is None:
            self._replace_child(parent, current, current.right)
        elif current.right is None:
            self._replace_child(parent, current, current.left)
        else:
            successor_parent: Optional[_Node] = None
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.data = successor.data
            if successor_parent is None:
                current.right = successor.right
            else:
                successor_parent.left = successor.right

    def search(self, data: Any) -> Any:
        """Return the stored element equal to ``data``; KeyError when absent."""
        current = self._root
        while current is not None:
            comparison = self._cmp(data, current.data)
            if comparison == 0:
                return current.data
            current = current.left if comparison < 0 else current.right
        raise KeyError(data)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in order."""
        pending = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right