"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

FIRST_ASCII_CHAR = 0
LAST_ASCII_CHAR = 127
FIRST_PRINTABLE_CHAR = 32
LAST_PRINTABLE_CHAR = 126
DIFF_LOWER_UPPER = 32
SPACE = 32
FIRST_WHITESPACE = 9
LAST_WHITESPACE = 13

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return FIRST_ASCII_CHAR <= _code(c) <= LAST_ASCII_CHAR


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return FIRST_PRINTABLE_CHAR <= _code(c) <= LAST_PRINTABLE_CHAR


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - DIFF_LOWER_UPPER)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + DIFF_LOWER_UPPER)
    return c