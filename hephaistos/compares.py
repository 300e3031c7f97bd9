"""Three-way comparison functions for use with the sorting routines and trees.

Each function returns a negative number, zero or a positive number when the
first argument is respectively less than, equal to or greater than the second.
The fixed-width integer variants keep the arithmetic of their machine type:
the 32-bit ones compute a wrapped 32-bit difference, so operands far apart can
compare with the "wrong" sign, exactly as a subtraction-based comparator does.
"""

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 1 << 31


def _as_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= _INT32_SIGN else value


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def _char_code(value) -> int:
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def cmp_int(a: int, b: int) -> int:
    """Compare two ints by their wrapped 32-bit difference."""
    return _as_int32(a - b)


def cmp_string(a, b) -> int:
    """Compare two strings (or byte strings) lexicographically."""
    return _sign(a, b)


def cmp_char(a, b) -> int:
    """Compare two characters by the difference of their codes."""
    return _char_code(a) - _char_code(b)


def cmp_int8(a: int, b: int) -> int:
    """Compare two signed 8-bit values by their difference."""
    return a - b


def cmp_int16(a: int, b: int) -> int:
    """Compare two signed 16-bit values by their difference."""
    return a - b


def cmp_int32(a: int, b: int) -> int:
    """Compare two signed 32-bit values by their wrapped 32-bit difference."""
    return _as_int32(a - b)


def cmp_int64(a: int, b: int) -> int:
    """Compare two signed 64-bit values, returning -1, 0 or 1."""
    return _sign(a, b)


def cmp_uint8(a: int, b: int) -> int:
    """Compare two unsigned 8-bit values by their difference."""
    return a - b


def cmp_uint16(a: int, b: int) -> int:
    """Compare two unsigned 16-bit values by their difference."""
    return a - b


def cmp_uint32(a: int, b: int) -> int:
    """Compare two unsigned 32-bit values by their wrapped 32-bit difference."""
    return _as_int32(a - b)


def cmp_uint64(a: int, b: int) -> int:
    """Compare two unsigned 64-bit values, returning -1, 0 or 1."""
    return _sign(a, b)


def cmp_float(a: float, b: float) -> int:
    """Compare two floats, returning -1, 0 or 1 (0 when either is NaN)."""
    return _sign(a, b)


def cmp_double(a: float, b: float) -> int:
    """Compare two doubles, returning -1, 0 or 1 (0 when either is NaN)."""
    return _sign(a, b)