"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from cub3d.words import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: Union[str, int], fd: int) -> None:
    """Write one character; an int is written as a single byte."""
    if fd < 0:
        return
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    _write_all(fd, data)


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s``; nothing is written for a missing string or a negative fd."""
    if s is None or fd < 0:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline."""
    if s is None or fd < 0:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    if fd < 0:
        return
    _write_all(fd, itoa(n).encode("ascii"))