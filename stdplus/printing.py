"""Formatted printing to text or binary streams."""

from __future__ import annotations

import errno
import io
import sys
from typing import Any, IO


def prints(stream: IO[Any], data: str) -> None:
    """Write ``data`` to ``stream`` in full.

    Binary streams receive the UTF-8 encoding of ``data``.
    """
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        payload = memoryview(data.encode("utf-8"))
        while payload:
            written = stream.write(payload)
            if written is None:
                raise BlockingIOError(errno.EAGAIN, "stream would block")
            payload = payload[written:]
    else:
        stream.write(data)


def _target(file: IO[Any] | None) -> IO[Any]:
    return sys.stdout if file is None else file


def fprint(fmt: str, *args: Any, file: IO[Any] | None = None, **kwargs: Any) -> None:
    """Format with :meth:`str.format` and write to ``file`` (stdout by default)."""
    prints(_target(file), fmt.format(*args, **kwargs))


def fprintln(fmt: str, *args: Any, file: IO[Any] | None = None, **kwargs: Any) -> None:
    """Like :func:`fprint`, followed by a newline."""
    prints(_target(file), fmt.format(*args, **kwargs) + "\n")