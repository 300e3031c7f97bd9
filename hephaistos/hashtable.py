"""A string-keyed hash table using separate chaining."""

from typing import Any, Iterator, List, Tuple

_UINT32_MASK = 0xFFFFFFFF


def _check_size(size: int) -> None:
    if not 1 <= size <= 0xFF:
        raise ValueError(f"size must be between 1 and 255, got {size!r}")


def hash_key(key: str, size: int) -> int:
    """Return the bucket index of ``key`` in a table of ``size`` buckets.

    The hash shifts left by five bits and adds each byte of the UTF-8
    encoded key, read as a signed char, in 32-bit unsigned arithmetic.
    """
    _check_size(size)
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 0x100 if byte >= 0x80 else byte
        value = ((value << 5) + signed) & _UINT32_MASK
    return value % size


class Hashtable:
    """Hash table with a fixed number of buckets; newest entries chain first."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._buckets: List[List[Tuple[str, Any]]] = [[] for _ in range(size)]

    def _bucket(self, key: str) -> List[Tuple[str, Any]]:
        return self._buckets[hash_key(key, self.size)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {self.get(key)!r}" for key in self)
        return f"Hashtable({{{pairs}}}, size={self.size})"

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.insert(0, (key, value))

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``; KeyError when absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def remove(self, key: str) -> None:
        """Delete ``key`` if present; a missing key is ignored."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return

    def contains_key(self, key: str) -> bool:
        """Return whether ``key`` is stored in the table."""
        return any(existing == key for existing, _ in self._bucket(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)