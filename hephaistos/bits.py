"""Bit-level helpers."""


def count_set_bits(byte: int) -> int:
    """Return the number of bits set to 1 in an 8-bit unsigned value.

    Raises ValueError when ``byte`` does not fit in an unsigned byte.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"value {byte!r} is not an unsigned 8-bit integer")
    count = 0
    while byte:
        count += byte & 1
        byte >>= 1
    return count