"""Formatted output with a small set of conversions, to strings or descriptors.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. A ``%`` followed by any other character is
written as is, and a lone ``%`` at the very end of the format is dropped.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from typing import Any

from cubkit.convert import itoa, uitoa

BUFFER_SIZE_PRINTF = 1024
BASE_HEXA_MINUS = "0123456789abcdef"
BASE_HEXA_MAJUS = "0123456789ABCDEF"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_SPEC = re.compile(r"%(.?)", re.DOTALL)


def _convert_base(nb: int, base: str) -> str:
    radix = len(base)
    digits = [base[nb % radix]]
    nb //= radix
    while nb:
        digits.append(base[nb % radix])
        nb //= radix
    return "".join(reversed(digits))


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _convert_base(address, BASE_HEXA_MINUS)


def _conv_signed(value: Any) -> str:
    return itoa(int(value))


def _conv_unsigned(value: Any) -> str:
    return uitoa(int(value))


def _conv_hex_lower(value: Any) -> str:
    return _convert_base(int(value) & _UINT_MASK, BASE_HEXA_MINUS)


def _conv_hex_upper(value: Any) -> str:
    return _convert_base(int(value) & _UINT_MASK, BASE_HEXA_MAJUS)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Extra arguments are ignored; too few raise :class:`TypeError`.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        if spec == "":
            return ""
        converter = _CONVERSIONS.get(spec)
        if converter is None:
            return "%" + spec
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string {fmt!r}"
            ) from None
        return converter(value)

    return _SPEC.sub(replace, fmt)


def _write(fd: int, text: str) -> int:
    data = text.encode(_ENCODING, _ERRORS)
    written = 0
    view = memoryview(data)
    while written < len(data):
        written += os.write(fd, view[written:])
    return written


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Format like :func:`sprintf` and write to ``fd``; return bytes written."""
    return _write(fd, sprintf(fmt, *args))


def put_char(c: str | int, fd: int) -> None:
    """Write one character to ``fd``."""
    _write(fd, _conv_char(c))


def put_str(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written for None."""
    if s is not None:
        _write(fd, s)


def put_endl(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    put_str(s, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to ``fd``."""
    _write(fd, itoa(n))