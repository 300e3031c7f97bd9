"""In-place sorting routines driven by three-way comparison functions.

Every routine sorts the given mutable sequence in place and returns None.
``cmp(a, b)`` must return a negative number, zero or a positive number.
"""

from functools import cmp_to_key
from typing import Callable, List, MutableSequence, Sequence, Tuple, TypeVar

T = TypeVar("T")
Comparator = Callable[[T, T], int]


def bubble_sort(items: MutableSequence[T], cmp: Comparator) -> None:
    """Sort by swapping adjacent out-of-order pairs, restarting after each swap."""
    position = 0
    last = len(items) - 1
    while position < last:
        if cmp(items[position], items[position + 1]) > 0:
            items[position], items[position + 1] = items[position + 1], items[position]
            position = 0
        else:
            position += 1


def insertion_sort(items: MutableSequence[T], cmp: Comparator) -> None:
    """Sort by sinking each element left until it is in place."""
    for start in range(1, len(items)):
        j = start
        while j > 0 and cmp(items[j - 1], items[j]) > 0:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1


def _partition(items: MutableSequence[T], low: int, high: int, cmp: Comparator) -> int:
    pivot = low
    i, j = low, high
    while i < j:
        while cmp(items[i], items[pivot]) <= 0 and i < high:
            i += 1
        while cmp(items[j], items[pivot]) > 0:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[pivot], items[j] = items[j], items[pivot]
    return j


def quick_sort(items: MutableSequence[T], low: int, high: int, cmp: Comparator) -> None:
    """Quicksort the inclusive index range ``low..high`` of ``items``.

    Raises IndexError when a non-empty range reaches outside the sequence.
    """
    if low < high and (low < 0 or high >= len(items)):
        raise IndexError(f"range {low}..{high} is outside a sequence of {len(items)}")
    pending: List[Tuple[int, int]] = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = _partition(items, lo, hi, cmp)
        pending.append((pivot + 1, hi))
        if pivot > 0:
            pending.append((lo, pivot - 1))


def _offsets(items: Sequence[T], cmp: Comparator) -> List[int]:
    """Return each element's distance from the smallest element, as told by ``cmp``."""
    if not items:
        return []
    smallest = min(items, key=cmp_to_key(cmp))
    keys = []
    for item in items:
        key = cmp(item, smallest)
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"comparison returned {key!r}; an integer distance is required")
        if key < 0:
            raise ValueError("comparison is inconsistent: an element lies below the minimum")
        keys.append(key)
    return keys


def _stable_counting(
    pairs: Sequence[Tuple[int, T]], digit: Callable[[int], int], buckets: int
) -> List[Tuple[int, T]]:
    counts = [0] * buckets
    for key, _ in pairs:
        counts[digit(key)] += 1
    for bucket in range(1, buckets):
        counts[bucket] += counts[bucket - 1]
    output: List[Tuple[int, T]] = [None] * len(pairs)  # type: ignore[list-item]
    for pair in reversed(pairs):
        bucket = digit(pair[0])
        counts[bucket] -= 1
        output[counts[bucket]] = pair
    return output


def counting_sort(items: MutableSequence[T], cmp: Comparator) -> None:
    """Stable counting sort.

    ``cmp(a, b)`` must return the integer distance ``a - b`` (as ``cmp_int``
    does); each element is counted by its distance from the smallest element.
    """
    keys = _offsets(items, cmp)
    if not keys:
        return
    pairs = list(zip(keys, items))
    ordered = _stable_counting(pairs, lambda key: key, max(keys) + 1)
    items[:] = [item for _, item in ordered]


def radix_sort(items: MutableSequence[T], cmp: Comparator) -> None:
    """Stable least-significant-digit radix sort in base 10.

    ``cmp(a, b)`` must return the integer distance ``a - b`` (as ``cmp_int``
    does); elements are keyed by their distance from the smallest element.
    """
    keys = _offsets(items, cmp)
    if not keys:
        return
    largest = max(keys)
    pairs = list(zip(keys, items))
    place = 1
    while largest // place > 0:
        pairs = _stable_counting(pairs, lambda key, p=place: key // p % 10, 10)
        place *= 10
    items[:] = [item for _, item in pairs]