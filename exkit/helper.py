"""Small helpers for error handling."""

from __future__ import annotations

import sys
import time
import traceback
from typing import Any, TypeVar

T = TypeVar("T")


def must(value: T, err: Any) -> T:
    """Return ``value`` when ``err`` is None, otherwise raise ``err``.

    An ``err`` that is not an exception is raised as a RuntimeError.
    """
    if err is None:
        return value
    if isinstance(err, BaseException):
        raise err
    raise RuntimeError(str(err))


def panic_recover(r: Any) -> BaseException | None:
    """Turn a caught failure into an exception and log it with a stack trace.

    Returns None when ``r`` is None. A string becomes a RuntimeError with
    that message, an exception is returned as is, and anything else becomes
    a RuntimeError of its text. The report goes to standard error.
    """
    if r is None:
        return None

    if isinstance(r, BaseException) and r.__traceback__ is not None:
        stack = "".join(traceback.format_exception(type(r), r, r.__traceback__))
    else:
        stack = "".join(traceback.format_stack()[:-1])
    stamp = time.strftime("%Y/%m/%d %H:%M:%S")
    sys.stderr.write(f"{stamp} [Recovery] panic recovered:\n{r}\n{stack}\n")

    if isinstance(r, BaseException):
        return r
    return RuntimeError(r if isinstance(r, str) else f"{r}")