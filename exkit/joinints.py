"""Join sequences of integers into a string with a separator.

Each variant checks that its values fit the integer width it names and
raises OverflowError otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable


def _join(values: Iterable[int], sep: str, bits: int, signed: bool) -> str:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    parts = []
    for value in values:
        number = int(value)
        if not lo <= number <= hi:
            kind = "int" if signed else "uint"
            raise OverflowError(f"{number} does not fit in {kind}{bits}")
        parts.append(str(number))
    return sep.join(parts)


def join_ints(values: Iterable[int], sep: str) -> str:
    """Join 64-bit signed integers with ``sep``."""
    return _join(values, sep, 64, True)


def join_int8s(values: Iterable[int], sep: str) -> str:
    """Join 8-bit signed integers with ``sep``."""
    return _join(values, sep, 8, True)


def join_int16s(values: Iterable[int], sep: str) -> str:
    """Join 16-bit signed integers with ``sep``."""
    return _join(values, sep, 16, True)


def join_int32s(values: Iterable[int], sep: str) -> str:
    """Join 32-bit signed integers with ``sep``."""
    return _join(values, sep, 32, True)


def join_int64s(values: Iterable[int], sep: str) -> str:
    """Join 64-bit signed integers with ``sep``."""
    return _join(values, sep, 64, True)


def join_uints(values: Iterable[int], sep: str) -> str:
    """Join 64-bit unsigned integers with ``sep``."""
    return _join(values, sep, 64, False)


def join_uint8s(values: Iterable[int], sep: str) -> str:
    """Join 8-bit unsigned integers with ``sep``."""
    return _join(values, sep, 8, False)


def join_uint16s(values: Iterable[int], sep: str) -> str:
    """Join 16-bit unsigned integers with ``sep``."""
    return _join(values, sep, 16, False)


def join_uint32s(values: Iterable[int], sep: str) -> str:
    """Join 32-bit unsigned integers with ``sep``."""
    return _join(values, sep, 32, False)


def join_uint64s(values: Iterable[int], sep: str) -> str:
    """Join 64-bit unsigned integers with ``sep``."""
    return _join(values, sep, 64, False)