"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the final line is returned without
    one when the input does not end in a newline.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE,
                 encoding: str = "utf-8") -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._remainder = bytearray()

    def _take_line(self) -> str:
        end = self._remainder.find(b"\n")
        cut = len(self._remainder) if end < 0 else end + 1
        line = bytes(self._remainder[:cut])
        del self._remainder[:cut]
        return line.decode(self.encoding)

    def read_line(self) -> Optional[str]:
        """The next line, or None once the input is exhausted."""
        while True:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._remainder += chunk
            if b"\n" in self._remainder:
                return self._take_line()
        if self._remainder:
            return self._take_line()
        return None

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Iterate over the lines of ``fd``."""
    return iter(LineReader(fd, buffer_size))