"""Helpers for byte strings: replacement, reversal, slicing and decoding."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from exkit.exutf8 import _rune_width, rune_sub


def _character_boundaries(s: bytes | bytearray) -> list[int]:
    """Return every offset in ``s`` that begins or ends a character."""
    bounds = [0]
    i = 0
    while i < len(s):
        i += _rune_width(s, i)
        bounds.append(i)
    return bounds


def _insert_between_characters(s: bytes, new: bytes, n: int) -> bytes:
    bounds = _character_boundaries(s)
    if n > 0:
        bounds = bounds[:n]
    out = bytearray()
    prev = 0
    for pos in bounds:
        out += s[prev:pos]
        out += new
        prev = pos
    out += s[prev:]
    return bytes(out)


def replace(
    s: bytes | bytearray, old: bytes, new: bytes, n: int
) -> bytes | bytearray:
    """Replace the first ``n`` occurrences of ``old`` with ``new``.

    A negative ``n`` replaces every occurrence. An empty ``old`` matches at
    the start and after each UTF-8 character. When ``s`` is a bytearray and
    ``new`` is no longer than ``old``, ``s`` is rewritten in place and
    returned; otherwise a new object of the same type is returned.
    """
    if n == 0:
        return s
    source = bytes(s)
    old = bytes(old)
    new = bytes(new)
    if old:
        result = source.replace(old, new, n if n > 0 else -1)
    else:
        result = _insert_between_characters(source, new, n)

    if isinstance(s, bytearray) and len(old) >= len(new):
        s[:] = result
        return s
    return type(s)(result)


def reverse(s: MutableSequence[Any] | bytearray) -> None:
    """Reverse a mutable sequence of bytes in place."""
    s[:] = s[::-1]


def sub(p: bytes | bytearray, start: int, length: int) -> bytes | bytearray:
    """Slice ``p`` by character positions; see :func:`exkit.exutf8.rune_sub`."""
    return rune_sub(p, start, length)


def to_string(s: bytes | bytearray) -> str:
    """Decode ``s`` as UTF-8 without loss.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so
    ``to_string(s).encode("utf-8", "surrogateescape")`` gives ``s`` back.
    """
    return bytes(s).decode("utf-8", "surrogateescape")