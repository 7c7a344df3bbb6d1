"""Byte-buffer helpers with the classic C memory-function semantics.

Buffers are ``bytearray`` objects (or other writable byte buffers). Positions
are returned as indices instead of pointers. ``None`` stands for a missing
buffer and is passed through the way the C helpers treat NULL.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: Optional[Buffer], c: int, n: int) -> Optional[Buffer]:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    if buf is None:
        return None
    _check_count(n, len(buf))
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Optional[Buffer], n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    if buf is None:
        return
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Optional[Bytes], c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` among the first ``n``."""
    if buf is None:
        return None
    _check_count(n, len(buf))
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Optional[Bytes], b: Optional[Bytes], n: int) -> int:
    """Compare the first ``n`` bytes; the result is the difference of the
    first pair of bytes that differ, or 0 when they are equal."""
    if a is None or b is None:
        return 0
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Optional[Buffer], src: Optional[Bytes], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None or src is None:
        return None
    if dest is src:
        return dest
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Optional[Buffer], dest: int, src: int, n: int) -> Optional[Buffer]:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if buf is None:
        return None
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf