"""Common string operations: replacement, repetition, joining, reversal and slicing.

Byte-producing helpers encode text as UTF-8 with ``surrogateescape``, so they
are the inverse of :func:`exkit.exbytes.to_string`.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from exkit.exutf8 import rune_sub_string

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _encode(s: str) -> bytes:
    return s.encode(_ENCODING, _ERRORS)


def _check_repeat(unit_len: int, count: int) -> None:
    if count < 0:
        raise ValueError("strings: negative Repeat count")
    if unit_len * count > sys.maxsize:
        raise OverflowError("strings: Repeat count causes overflow")


def replace(s: str, old: str, new: str, n: int) -> str:
    """Replace the first ``n`` occurrences of ``old`` in ``s`` with ``new``.

    A negative ``n`` replaces every occurrence. An empty ``old`` matches at
    the start of ``s`` and after each character.
    """
    return s.replace(old, new, n if n >= 0 else -1)


def unsafe_replace(s: str, old: str, new: str, n: int) -> str:
    """Same as :func:`replace`; kept for callers of the older name."""
    return replace(s, old, new, n)


def unsafe_replace_to_bytes(s: str, old: str, new: str, n: int) -> bytes:
    """Replace as :func:`replace` does and return the result as read-only bytes."""
    return _encode(replace(s, old, new, n))


def replace_to_bytes(s: str, old: str, new: str, n: int) -> bytearray:
    """Replace as :func:`replace` does and return a mutable bytearray."""
    return bytearray(_encode(replace(s, old, new, n)))


def repeat(s: str, count: int) -> str:
    """Return ``count`` copies of ``s`` joined together.

    Raises ValueError for a negative count and OverflowError when the
    result would be too large to index.
    """
    _check_repeat(len(s), count)
    return s * count


def unsafe_repeat(s: str, count: int) -> str:
    """Same as :func:`repeat`; kept for callers of the older name."""
    return repeat(s, count)


def repeat_to_bytes(s: str, count: int) -> bytes:
    """Return ``count`` copies of ``s`` as UTF-8 bytes; errors as :func:`repeat`."""
    data = _encode(s)
    _check_repeat(len(data), count)
    return data * count


def join(a: Iterable[str], sep: str) -> str:
    """Join the strings of ``a`` with ``sep`` between them."""
    return sep.join(a)


def unsafe_join(a: Iterable[str], sep: str) -> str:
    """Same as :func:`join`; kept for callers of the older name."""
    return join(a, sep)


def join_to_bytes(a: Iterable[str], sep: str) -> bytes:
    """Join the strings of ``a`` with ``sep`` and return UTF-8 bytes."""
    return _encode(join(a, sep))


def unsafe_to_bytes(s: str) -> bytes:
    """Encode ``s`` to immutable UTF-8 bytes."""
    return _encode(s)


def to_bytes(s: str) -> bytearray:
    """Encode ``s`` to a fresh, mutable UTF-8 bytearray."""
    return bytearray(_encode(s))


def reverse(s: str) -> str:
    """Reverse ``s`` character by character."""
    return s[::-1]


def reverse_ascii(s: str) -> str:
    """Reverse a string made of single-byte characters."""
    return s[::-1]


def unsafe_reverse_ascii(s: str) -> str:
    """Reverse a string made of single-byte characters."""
    return reverse_ascii(s)


def copy(src: str) -> str:
    """Return a new string equal to ``src``, detached from any larger string."""
    return _encode(src).decode(_ENCODING, _ERRORS)


def sub_string(s: str, start: int, length: int) -> str:
    """Slice ``s`` by character positions; see :func:`exkit.exutf8.rune_sub_string`."""
    return rune_sub_string(s, start, length)