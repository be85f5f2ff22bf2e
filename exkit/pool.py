"""Shared pools of reusable in-memory byte buffers.

Pools are shared process-wide per size, so unrelated code can reuse the
same buffers instead of each keeping its own pool.
"""

from __future__ import annotations

import io
import threading
from functools import cache


class BufferPool:
    """A thread-safe pool of :class:`io.BytesIO` buffers.

    ``size`` is the nominal initial capacity the pool is meant for.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self._free: list[io.BytesIO] = []
        self._lock = threading.Lock()

    def get(self) -> io.BytesIO:
        """Return an empty buffer, reusing a returned one when available."""
        with self._lock:
            buf = self._free.pop() if self._free else None
        if buf is None:
            buf = io.BytesIO(bytes(self.size))
        buf.seek(0)
        buf.truncate()
        return buf

    def put(self, buf: io.BytesIO) -> None:
        """Return ``buf`` to the pool for later reuse."""
        with self._lock:
            self._free.append(buf)


@cache
def _shared(size: int) -> BufferPool:
    return BufferPool(size)


def get_buff64() -> BufferPool:
    """Return the shared pool of 64-byte buffers."""
    return _shared(64)


def get_buff128() -> BufferPool:
    """Return the shared pool of 128-byte buffers."""
    return _shared(128)


def get_buff512() -> BufferPool:
    """Return the shared pool of 512-byte buffers."""
    return _shared(512)


def get_buff1024() -> BufferPool:
    """Return the shared pool of 1024-byte buffers."""
    return _shared(1024)


def get_buff2048() -> BufferPool:
    """Return the shared pool of 2048-byte buffers."""
    return _shared(2048)


def get_buff4096() -> BufferPool:
    """Return the shared pool of 4096-byte buffers."""
    return _shared(4096)


def get_buff8192() -> BufferPool:
    """Return the shared pool of 8192-byte buffers."""
    return _shared(8192)