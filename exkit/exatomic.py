"""Thread-safe float32 and float64 cells with atomic add, swap and
compare-and-swap.

Values are held as their binary representation, so compare-and-swap
compares bit patterns: 0.0 and -0.0 differ, and a NaN matches the same NaN.
Float arithmetic keeps its usual precision limits: adding a small delta to
a very large value may leave it unchanged.
"""

from __future__ import annotations

import math
import struct
import threading


def _pack32(value: float) -> bytes:
    value = float(value)
    try:
        return struct.pack("<f", value)
    except OverflowError:
        return struct.pack("<f", math.copysign(math.inf, value))


def _unpack32(bits: bytes) -> float:
    return struct.unpack("<f", bits)[0]


def _pack64(value: float) -> bytes:
    return struct.pack("<d", float(value))


def _unpack64(bits: bytes) -> float:
    return struct.unpack("<d", bits)[0]


class _Cell:
    """Lock-guarded storage of a float's bit pattern."""

    def __init__(self, bits: bytes) -> None:
        self._lock = threading.Lock()
        self._bits = bits

    def _load_bits(self) -> bytes:
        with self._lock:
            return self._bits

    def _store_bits(self, bits: bytes) -> None:
        with self._lock:
            self._bits = bits

    def _swap_bits(self, bits: bytes) -> bytes:
        with self._lock:
            old = self._bits
            self._bits = bits
        return old

    def _cas_bits(self, expected: bytes, bits: bytes) -> bool:
        with self._lock:
            if self._bits != expected:
                return False
            self._bits = bits
            return True

    def _update_bits(self, step) -> bytes:
        with self._lock:
            self._bits = step(self._bits)
            return self._bits


class AtomicFloat32(_Cell):
    """A float cell with single-precision storage and arithmetic."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(_pack32(value))

    def load(self) -> float:
        """Return the current value."""
        return _unpack32(self._load_bits())

    def store(self, val: float) -> None:
        """Set the value to ``val``."""
        self._store_bits(_pack32(val))

    def swap(self, new: float) -> float:
        """Set the value to ``new`` and return the previous value."""
        return _unpack32(self._swap_bits(_pack32(new)))

    def compare_and_swap(self, old: float, new: float) -> bool:
        """Set the value to ``new`` if it currently equals ``old`` bit for bit."""
        return self._cas_bits(_pack32(old), _pack32(new))

    def add(self, delta: float) -> float:
        """Add ``delta`` to the value and return the new value."""
        step = _unpack32(_pack32(delta))
        bits = self._update_bits(lambda cur: _pack32(_unpack32(cur) + step))
        return _unpack32(bits)

    def __repr__(self) -> str:
        return f"AtomicFloat32({self.load()!r})"


class AtomicFloat64(_Cell):
    """A float cell with double-precision storage and arithmetic."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(_pack64(value))

    def load(self) -> float:
        """Return the current value."""
        return _unpack64(self._load_bits())

    def store(self, val: float) -> None:
        """Set the value to ``val``."""
        self._store_bits(_pack64(val))

    def swap(self, new: float) -> float:
        """Set the value to ``new`` and return the previous value."""
        return _unpack64(self._swap_bits(_pack64(new)))

    def compare_and_swap(self, old: float, new: float) -> bool:
        """Set the value to ``new`` if it currently equals ``old`` bit for bit."""
        return self._cas_bits(_pack64(old), _pack64(new))

    def add(self, delta: float) -> float:
        """Add ``delta`` to the value and return the new value."""
        step = float(delta)
        bits = self._update_bits(lambda cur: _pack64(_unpack64(cur) + step))
        return _unpack64(bits)

    def __repr__(self) -> str:
        return f"AtomicFloat64({self.load()!r})"