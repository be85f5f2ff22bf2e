"""Pad a string to a given length with a repeated fill string."""

from __future__ import annotations

from enum import IntEnum


class PadDirection(IntEnum):
    """Where the fill goes; with BOTH an odd remainder lands on the right."""

    LEFT = 0
    BOTH = 1
    RIGHT = 2


def _fill_to(fill: str, size: int) -> str:
    if size <= 0:
        return ""
    if not fill:
        raise ValueError("fill string must not be empty")
    return (fill * (size // len(fill) + 1))[:size]


def pad(s: str, fill: str, c: int, flag: PadDirection | int) -> str:
    """Pad ``s`` with repetitions of ``fill`` up to ``c`` characters.

    ``flag`` chooses the side. A string already ``c`` long or longer is
    returned unchanged. Raises ValueError for an unknown direction or an
    empty fill when padding is needed.
    """
    direction = PadDirection(flag)
    pad_len = c - len(s)
    if pad_len <= 0:
        return s
    if direction is PadDirection.LEFT:
        return _fill_to(fill, pad_len) + s
    if direction is PadDirection.RIGHT:
        return s + _fill_to(fill, pad_len)
    left = pad_len // 2
    return _fill_to(fill, left) + s + _fill_to(fill, pad_len - left)


def left_pad(s: str, fill: str, c: int) -> str:
    """Pad ``s`` on the left with ``fill`` up to ``c`` characters."""
    return pad(s, fill, c, PadDirection.LEFT)


def right_pad(s: str, fill: str, c: int) -> str:
    """Pad ``s`` on the right with ``fill`` up to ``c`` characters."""
    return pad(s, fill, c, PadDirection.RIGHT)


def both_pad(s: str, fill: str, c: int) -> str:
    """Pad ``s`` on both sides; an odd remainder goes to the right."""
    return pad(s, fill, c, PadDirection.BOTH)


def unsafe_pad(s: str, fill: str, c: int, flag: PadDirection | int) -> str:
    """Same as :func:`pad`; kept for callers of the older name."""
    return pad(s, fill, c, flag)


def unsafe_left_pad(s: str, fill: str, c: int) -> str:
    """Same as :func:`left_pad`; kept for callers of the older name."""
    return left_pad(s, fill, c)


def unsafe_right_pad(s: str, fill: str, c: int) -> str:
    """Same as :func:`right_pad`; kept for callers of the older name."""
    return right_pad(s, fill, c)


def unsafe_both_pad(s: str, fill: str, c: int) -> str:
    """Same as :func:`both_pad`; kept for callers of the older name."""
    return both_pad(s, fill, c)