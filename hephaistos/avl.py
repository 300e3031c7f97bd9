"""A self-balancing AVL tree mapping integer keys to data."""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass
class _Node:
    key: int
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: int, data: Any) -> _Node:
    if node is None:
        return _Node(key, data)
    if key < node.key:
        node.left = _insert(node.left, key, data)
    elif key > node.key:
        node.right = _insert(node.right, key, data)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key, node.data = successor.key, successor.data
        node.right = _delete(node.right, successor.key)

    if node is None:
        return None

    _update(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Balanced search tree keyed by integers; duplicate keys are ignored."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def __repr__(self) -> str:
        return f"AVLTree(keys={self.keys()!r})"

    def insert(self, key: int, data: Any) -> None:
        """Store ``data`` under ``key``; an existing key keeps its data."""
        self._root = _insert(self._root, key, data)

    def delete(self, key: int) -> None:
        """Remove ``key``; a missing key is ignored."""
        self._root = _delete(self._root, key)

    def search(self, key: int) -> Any:
        """Return the data stored under ``key``; KeyError when absent."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node.data
            node = node.left if key < node.key else node.right
        raise KeyError(key)

    def height(self) -> int:
        """Return the height of the tree, 0 when empty."""
        return _height(self._root)

    def _in_order(self) -> Iterator[_Node]:
        pending: List[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node
            node = node.right

    def keys(self) -> List[int]:
        """Return the keys in ascending order."""
        return [node.key for node in self._in_order()]