"""String helpers with the classic C library semantics, expressed on Python strings.

Positions are returned as indices instead of pointers. ``None`` stands for a
missing string and is passed through the way the C helpers treat NULL.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]


def _as_char(c: Char) -> str:
    """Normalise a character given as a one-character string or an int."""
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(text: Optional[str]) -> int:
    """Length of ``text``; a missing string has length 0."""
    if text is None:
        return 0
    return len(text)


def strchr(text: Optional[str], c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    if text is None:
        return None
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: Optional[str], c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None."""
    if text is None:
        return None
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: Optional[str], b: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering.

    The result is the difference between the first two characters that
    differ, the end of a string counting as character 0.
    """
    if a is None or b is None:
        return 0
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            return 0
    return 0


def strnstr(haystack: Optional[str], needle: Optional[str],
            length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    if haystack is None or needle is None:
        return None
    if not needle:
        return 0
    for i in range(min(len(haystack), length)):
        if haystack.startswith(needle, i, length):
            return i
    return None


def strdup(text: Optional[str]) -> Optional[str]:
    """A copy of ``text``, or None when it is missing."""
    if text is None:
        return None
    return str(text)


def strlcpy(src: str, size: int) -> tuple:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the stored string and the length of ``src``; the caller can
    compare the two to detect truncation. With ``size`` 0 nothing is stored.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have
    had. When ``dest`` already fills the buffer it is left unchanged and
    the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is missing."""
    if a is None or b is None:
        return None
    return a + b