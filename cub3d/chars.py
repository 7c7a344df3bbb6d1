"""ASCII character classification and case conversion.

Characters may be given as one-character strings or as integer codes; the
case conversions return the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def is_alpha(c: Char) -> bool:
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
        return code if isinstance(c, int) else chr(code)
    return c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
        return code if isinstance(c, int) else chr(code)
    return c