# hephaistos

A small library of classic data structures, three-way comparison functions
and sorting algorithms. It depends on nothing outside the standard library
and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `hephaistos.bits` | `count_set_bits(byte)`, the number of 1 bits in an unsigned byte |
| `hephaistos.compares` | Three-way comparators: `cmp_int`, `cmp_string`, `cmp_char`, `cmp_int8`, `cmp_int16`, `cmp_int32`, `cmp_int64`, `cmp_uint8`, `cmp_uint16`, `cmp_uint32`, `cmp_uint64`, `cmp_float`, `cmp_double` |
| `hephaistos.sorting` | In-place `bubble_sort`, `insertion_sort`, `quick_sort`, `counting_sort`, `radix_sort` |
| `hephaistos.array` | `DynamicArray`, a growable array whose capacity doubles and halves |
| `hephaistos.queue` | `BoundedQueue`, a FIFO queue with a maximum size |
| `hephaistos.stack` | `BoundedStack`, a LIFO stack with a maximum size |
| `hephaistos.linked_list` | `LinkedList`, a singly linked list, and the `list_compare` comparator |
| `hephaistos.hashtable` | `Hashtable`, a chained hash table keyed by strings, and `hash_key` |
| `hephaistos.bst` | `BinarySearchTree`, an unbalanced tree ordered by a comparator |
| `hephaistos.avl` | `AVLTree`, a self-balancing tree keyed by integers |
| `hephaistos.rbtree` | `RedBlackTree`, with its `RBNode` and `Color` |

## Bits

```python
from hephaistos.bits import count_set_bits

count_set_bits(0b1011)  # 3
count_set_bits(256)     # raises ValueError: not an unsigned 8-bit value
```

## Comparators

Each comparator takes two values and returns a negative number, zero or a
positive number. The sorting functions and the comparator-based trees all
use this convention.

- `cmp_int`, `cmp_int32` and `cmp_uint32` return the difference `a - b`
  wrapped to a signed 32-bit value, so operands very far apart can compare
  with the opposite sign.
- `cmp_int8`, `cmp_int16`, `cmp_uint8`, `cmp_uint16` and `cmp_char` return
  the plain difference (`cmp_char` accepts one-character strings or bytes,
  or integer codes, and raises `ValueError` for longer strings).
- `cmp_string`, `cmp_int64`, `cmp_uint64`, `cmp_float` and `cmp_double`
  return -1, 0 or 1 (the float variants return 0 when either side is NaN).

```python
from hephaistos.compares import cmp_int, cmp_string

cmp_int(3, 7)          # -4
cmp_string("b", "a")   # 1
```

## Sorting

The sorting functions reorder the sequence you pass to them in place and
return `None`.

```python
from hephaistos.compares import cmp_int
from hephaistos.sorting import bubble_sort, insertion_sort, quick_sort, radix_sort

values = [5, 2, 9, 1]
insertion_sort(values, cmp_int)
# values == [1, 2, 5, 9]

values = [5, 2, 9, 1]
quick_sort(values, 0, len(values) - 1, cmp_int)   # sorts the inclusive range low..high
# values == [1, 2, 5, 9]

values = [170, 45, 75, 90, 2]
radix_sort(values, cmp_int)
# values == [2, 45, 75, 90, 170]
```

`quick_sort` raises `IndexError` when a non-empty range reaches outside the
sequence. `counting_sort` and `radix_sort` are stable and need a comparator
that returns the integer distance `a - b` (as `cmp_int` does): each element
is keyed by its distance from the smallest element. A comparator that
returns a non-integer raises `TypeError`.

## Containers

```python
from hephaistos.array import DynamicArray
from hephaistos.queue import BoundedQueue
from hephaistos.stack import BoundedStack
from hephaistos.linked_list import LinkedList

array = DynamicArray(4)
array.push("a")
array.insert(0, "b")
list(array)             # ["b", "a"]
array.capacity          # 4

queue = BoundedQueue(2)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()         # 1

stack = BoundedStack(8)
stack.push("x")
stack.peek()            # "x"

items = LinkedList()
items.add_back(3)
items.add_front(1)
items.insert(2, 1)      # data 2 at index 1
list(items)             # [1, 2, 3]
```

Errors are raised rather than signalled by return values:

- `DynamicArray.get`, `set`, `insert`, `remove` and `pop` raise `IndexError`
  when the index is out of range or the array is empty. The capacity doubles
  when a full array grows and halves when a removal leaves it non-empty with
  fewer elements than a quarter of its capacity; `resize` never sets it
  below the current length.
- `BoundedQueue.enqueue` and `BoundedStack.push` raise `OverflowError` when
  full; `dequeue`, `pop`, `peek` and `BoundedStack.get` raise `IndexError`.
- `LinkedList.remove` raises `ValueError` when the element is absent;
  `get` and `insert` raise `IndexError` for bad positions. `sort(cmp)` is a
  bubble sort and `iterate(func)` calls `func` on each element.

## Maps and trees

```python
from hephaistos.hashtable import Hashtable
from hephaistos.avl import AVLTree
from hephaistos.bst import BinarySearchTree
from hephaistos.rbtree import RedBlackTree
from hephaistos.compares import cmp_int

table = Hashtable(16)
table.insert("name", "value")
"name" in table         # True
table.get("name")       # "value"

avl = AVLTree()
for key in (10, 20, 30):
    avl.insert(key, str(key))
avl.search(20)          # "20"
avl.keys()              # [10, 20, 30]
avl.height()            # 2

bst = BinarySearchTree(cmp_int)
bst.insert(4)
bst.insert(2)
list(bst)               # [2, 4]

rb = RedBlackTree(cmp_int)
for value in (7, 3, 9):
    rb.insert(value)
list(rb)                # [3, 7, 9]
rb.search(3).data       # 3
```

- `Hashtable(size)` takes between 1 and 255 buckets (otherwise `ValueError`).
  `get` raises `KeyError` for a missing key; `remove` ignores one.
  `hash_key(key, size)` gives the bucket a key falls into.
- `BinarySearchTree` keeps equal elements (they go to the right);
  `AVLTree` ignores a duplicate key and keeps its existing data;
  `RedBlackTree` ignores an element equal to one already stored.
- `search` raises `KeyError` when nothing matches; `RedBlackTree.search`
  returns the `RBNode`, whose `color` is a `Color`. Removing or deleting
  something absent does nothing.

## What this package does not do

It is an in-memory library only: there is no command-line tool, no
persistence to disk and no thread safety. The containers are not resized
or bounded by memory; `BoundedQueue` and `BoundedStack` are bounded only by
the `max_size` you give them.