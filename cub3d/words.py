"""Word-level string helpers: number conversion, splitting, trimming, mapping."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def _separator(sep: Union[str, int]) -> str:
    if isinstance(sep, int):
        return chr(sep & 0xFF)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. The result wraps to a 32-bit signed int.
    A missing string gives 0.
    """
    if text is None:
        return 0
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    number = int(text[pos:end]) if end > pos else 0
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def split(text: Optional[str], sep: Union[str, int]) -> Optional[List[str]]:
    """Split ``text`` on ``sep``, dropping empty pieces; None if text is missing."""
    if text is None:
        return None
    ch = _separator(sep)
    if ch == "\0":
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        return None
    return text.strip(charset)


def strmapi(text: Optional[str],
            func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for each character.

    A returned NUL character ends the resulting string, as it would in C.
    """
    if text is None or func is None:
        return None
    mapped = "".join(func(index, ch) for index, ch in enumerate(text))
    return mapped.split("\0", 1)[0]


def striteri(text: Optional[str],
             func: Optional[Callable[[int, str], Optional[str]]]) -> Optional[str]:
    """Visit each character with ``func(index, char)``.

    ``func`` may return a replacement character; returning None keeps the
    character as it was. The updated string is returned.
    """
    if text is None or func is None:
        return text
    chars = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        chars.append(ch if replacement is None else replacement)
    return "".join(chars)