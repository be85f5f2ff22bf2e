"""Build CSV-like data log lines from fixed-length records.

A :class:`Record` is one line: a list of string fields in a fixed order.
Joining sanitises fields so a separator inside a value cannot break the
line layout; nested arrays are built with :meth:`Record.array_field_join`
and :meth:`Record.array_join`.
"""

from __future__ import annotations

import threading

FIELD_SEP = "\x01"
NEW_LINE = "\x03\n"
ARRAY_SEP = "\x02"
ARRAY_FIELD_SEP = "\x04"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class Record(list):
    """One log line: a list of string fields."""

    def _sanitize(self, first: str, second: str, *, always: bool) -> None:
        for i in range(len(self) - 1, -1, -1):
            value = self[i]
            if not always and first not in value and second not in value:
                continue
            self[i] = value.replace(first, " ").replace(second, " ")

    def to_bytes(self, sep: str, newline: str) -> bytes:
        """Join fields with ``sep`` and append ``newline``.

        Occurrences of ``sep`` and ``newline`` inside fields are replaced by
        a space first; the record is updated with the cleaned values.
        """
        self._sanitize(sep, newline, always=False)
        return self.join(sep, newline)

    def unsafe_to_bytes(self, sep: str, newline: str) -> bytes:
        """Like :meth:`to_bytes`, but cleans every field unconditionally."""
        self._sanitize(sep, newline, always=True)
        return self.join(sep, newline)

    def join(self, sep: str, suffix: str) -> bytes:
        """Join fields with ``sep``, append ``suffix`` and return UTF-8 bytes."""
        return (sep.join(self) + suffix).encode(_ENCODING, _ERRORS)

    def clean(self) -> None:
        """Reset every field to the empty string."""
        self[:] = [""] * len(self)

    def array_join(self, sep: str) -> str:
        """Join fields with ``sep`` to form the value of an array field."""
        return sep.join(self)

    def array_field_join(self, field_sep: str, array_sep: str) -> str:
        """Join fields with ``field_sep`` to form one element of an array.

        Occurrences of ``field_sep`` and ``array_sep`` inside fields are
        replaced by a space first.
        """
        self._sanitize(field_sep, array_sep, always=False)
        return field_sep.join(self)

    def unsafe_array_field_join(self, field_sep: str, array_sep: str) -> str:
        """Like :meth:`array_field_join`, but cleans every field unconditionally."""
        self._sanitize(field_sep, array_sep, always=True)
        return field_sep.join(self)


class RecordPool:
    """A thread-safe pool of records that all have the same length."""

    def __init__(self, length: int) -> None:
        self.length = length
        self._free: list[Record] = []
        self._lock = threading.Lock()

    def get(self) -> Record:
        """Return a pooled record, or a new empty one if none is free."""
        with self._lock:
            if self._free:
                return self._free.pop()
        return new_record(self.length)

    def put(self, record: Record) -> None:
        """Return ``record`` to the pool; call :meth:`Record.clean` first."""
        with self._lock:
            self._free.append(record)


def new_record(length: int) -> Record:
    """Create a record of ``length`` empty fields."""
    if length < 0:
        raise ValueError("record length must not be negative")
    return Record([""] * length)


def new_record_pool(length: int) -> RecordPool:
    """Create a pool of records of ``length`` fields."""
    if length < 0:
        raise ValueError("record length must not be negative")
    return RecordPool(length)