"""A red-black tree ordered by a three-way comparison."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional

Comparator = Callable[[Any, Any], int]


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree."""

    data: Any
    color: Color = Color.RED
    left: Optional["RBNode"] = field(default=None, repr=False)
    right: Optional["RBNode"] = field(default=None, repr=False)
    parent: Optional["RBNode"] = field(default=None, repr=False)


def _is_black(node: Optional[RBNode]) -> bool:
    return node is None or node.color is Color.BLACK


def _is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.color is Color.RED


def _minimum(node: RBNode) -> RBNode:
    while node.left is not None:
        node = node.left
    return node


class RedBlackTree:
    """Red-black tree of unique elements; inserting an equal element is ignored."""

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self.root: Optional[RBNode] = None

    def __repr__(self) -> str:
        return f"RedBlackTree({list(self)!r})"

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fixup(self, z: RBNode) -> None:
        while z.parent is not None and z.parent.color is Color.RED:
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self.root.color = Color.BLACK

    def insert(self, data: Any) -> None:
        """Add ``data``; nothing happens when an equal element is present."""
        parent: Optional[RBNode] = None
        current = self.root
        went_left = False
        while current is not None:
            parent = current
            result = self._cmp(data, current.data)
            if result == 0:
                return
            went_left = result < 0
            current = current.left if went_left else current.right

        node = RBNode(data, parent=parent)
        if parent is None:
            self.root = node
        elif went_left:
            parent.left = node
        else:
            parent.right = node
        self._insert_fixup(node)

    def _transplant(self, u: RBNode, v: Optional[RBNode]) -> None:
        if u.parent is None:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent

    def _delete_fixup(self, x: RBNode) -> None:
        while x is not self.root and _is_black(x):
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if _is_black(w.left) and _is_black(w.right):
                    w.color = Color.RED
                    x = x.parent
                else:
                    if _is_black(w.right):
                        if w.left is not None:
                            w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    if w.right is not None:
                        w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self.root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if _is_black(w.right) and _is_black(w.left):
                    w.color = Color.RED
                    x = x.parent
                else:
                    if _is_black(w.left):
                        if w.right is not None:
                            w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    if w.left is not None:
                        w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self.root
        x.color = Color.BLACK

    def delete(self, data: Any) -> None:
        """Remove the element equal to ``data``; absent data is ignored."""
        try:
            z = self.search(data)
        except KeyError:
            return

        original_color = z.color
        if z.left is None:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is None:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = _minimum(z.right)
            original_color = y.color
            x = y.right
            if y.parent is z:
                if x is not None:
                    x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        z.left = z.right = z.parent = None
        if original_color is Color.BLACK and x is not None:
            self._delete_fixup(x)

    def search(self, data: Any) -> RBNode:
        """Return the node holding the element equal to ``data``; KeyError when absent."""
        current = self.root
        while current is not None:
            result = self._cmp(data, current.data)
            if result == 0:
                return current
            current = current.left if result < 0 else current.right
        raise KeyError(data)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in order."""
        pending: List[RBNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right