"""Number parsing and formatting with C integer semantics."""

from __future__ import annotations

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1
UINT_MAX = (1 << 32) - 1
LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def _skip_whitespace(text: str) -> int:
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _leading_digits(text: str, pos: int) -> str:
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[pos:end]


def _parse_signed(text: str) -> tuple[int, str]:
    pos = _skip_whitespace(text)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return sign, _leading_digits(text, pos)


def atoi(text: str) -> int:
    """Parse a leading decimal integer; wraps to 32 bits like a C int."""
    sign, digits = _parse_signed(text)
    value = int(digits) if digits else 0
    return _to_int32(sign * value)


def atol(text: str) -> int:
    """Parse a leading decimal integer, clamping at the 64-bit limits."""
    sign, digits = _parse_signed(text)
    value = int(digits) if digits else 0
    if value > LONG_MAX:
        return LONG_MAX if sign == 1 else LONG_MIN
    return sign * value


def _valid_base_length(base: str) -> int:
    """Return the length of ``base`` or 0 if it is not a usable base."""
    seen: set[str] = set()
    for ch in base:
        code = ord(ch)
        if ch in "+-" or code < 32 or code > 126 or ch in seen:
            return 0
        seen.add(ch)
    return len(base)


def atoi_base(text: str, base: str) -> int:
    """Parse ``text`` as a number written with the digits of ``base``.

    Leading whitespace is skipped and any run of signs is accepted. A base
    shorter than two digits, with repeated digits, signs or non-printable
    characters gives 0.
    """
    radix = _valid_base_length(base)
    if radix <= 1:
        return 0
    pos = _skip_whitespace(text)
    sign = 1
    while pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        pos += 1
    value = 0
    for ch in text[pos:]:
        digit = base.find(ch)
        if digit == -1:
            break
        value = value * radix + digit
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    return str(_to_int32(n))


def uitoa(n: int) -> str:
    """Format an integer taken as a 32-bit unsigned value in decimal."""
    return str(n & UINT_MAX)


def absolute(n: int) -> int:
    """Absolute value of a 32-bit signed integer."""
    n = _to_int32(n)
    return _to_int32(-n) if n < 0 else n