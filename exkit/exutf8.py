"""Rune-aware indexing and slicing for UTF-8 byte strings and text.

Byte functions treat malformed or truncated encodings as single-byte
characters, so every byte sequence can be walked without raising.
"""

from __future__ import annotations

_LOCB = 0x80
_HICB = 0xBF

# High nibble: index into _ACCEPT_RANGES (or 0xF for single-byte cases).
# Low nibble: encoded length of the sequence.
_XX = 0xF1  # invalid leading byte
_AS = 0xF0  # ASCII
_S1 = 0x02
_S2 = 0x13
_S3 = 0x03
_S4 = 0x23
_S5 = 0x34
_S6 = 0x04
_S7 = 0x44

_ACCEPT_RANGES = {
    0: (_LOCB, _HICB),
    1: (0xA0, _HICB),
    2: (_LOCB, 0x9F),
    3: (0x90, _HICB),
    4: (_LOCB, 0x8F),
}


def _classify(byte: int) -> int:
    if byte < 0x80:
        return _AS
    if byte < 0xC2:
        return _XX
    if byte < 0xE0:
        return _S1
    if byte == 0xE0:
        return _S2
    if byte == 0xED:
        return _S4
    if byte < 0xF0:
        return _S3
    if byte == 0xF0:
        return _S5
    if byte < 0xF4:
        return _S6
    if byte == 0xF4:
        return _S7
    return _XX


_FIRST = tuple(_classify(b) for b in range(256))


def _rune_width(p: bytes | bytearray, i: int) -> int:
    """Return the byte width of the character that starts at ``p[i]``."""
    lead = p[i]
    if lead < 0x80:
        return 1
    info = _FIRST[lead]
    if info == _XX:
        return 1
    size = info & 7
    if i + size > len(p):
        return 1
    lo, hi = _ACCEPT_RANGES[info >> 4]
    if not lo <= p[i + 1] <= hi:
        return 1
    if size == 2:
        return 2
    if not _LOCB <= p[i + 2] <= _HICB:
        return 1
    if size == 3:
        return 3
    if not _LOCB <= p[i + 3] <= _HICB:
        return 1
    return 4


def _rune_count(p: bytes | bytearray) -> int:
    """Count characters in ``p``, each malformed byte counting as one."""
    count = 0
    i = 0
    while i < len(p):
        i += _rune_width(p, i)
        count += 1
    return count


def rune_index(p: bytes | bytearray, n: int) -> tuple[int, bool]:
    """Return the byte offset after the first ``n`` characters of ``p``.

    The flag is False when ``p`` holds fewer than ``n`` characters; the
    offset is then ``len(p)``.
    """
    if n <= 0:
        return 0, True
    i = 0
    while i < len(p) and n > 0:
        n -= 1
        i += _rune_width(p, i)
    return i, n <= 0


def rune_index_in_string(s: str, n: int) -> tuple[int, bool]:
    """Return the index after the first ``n`` characters of ``s``.

    The flag is False when ``s`` holds fewer than ``n`` characters; the
    index is then ``len(s)``.
    """
    if n <= 0:
        return 0, True
    return min(n, len(s)), n <= len(s)


def rune_sub(p: bytes | bytearray, start: int, length: int) -> bytes | bytearray:
    """Slice ``p`` by character positions rather than byte offsets.

    A negative ``start`` counts from the end. A positive ``length`` takes at
    most that many characters, a negative one drops that many from the end,
    and zero takes everything up to the end.
    """
    empty = p[:0]
    if not p:
        return empty
    if start < 0:
        start += _rune_count(p)
    if start < 0:
        return empty
    if start > 0:
        offset, _ = rune_index(p, start)
        p = p[offset:]
    if not p:
        return empty
    if length == 0:
        return p
    if length < 0:
        length += _rune_count(p)
    if length <= 0:
        return empty
    end, _ = rune_index(p, length)
    return p[:end]


def rune_sub_string(s: str, start: int, length: int) -> str:
    """Slice ``s`` by character positions with the rules of :func:`rune_sub`."""
    if not s:
        return ""
    if start < 0:
        start += len(s)
    if start < 0:
        return ""
    s = s[start:]
    if not s:
        return ""
    if length == 0:
        return s
    if length < 0:
        length += len(s)
    if length <= 0:
        return ""
    return s[:length]