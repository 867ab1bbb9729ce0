"""String and byte-buffer helpers with C string-library semantics."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

NUL = "\0"


def _as_char(c: int | str) -> str:
    """Normalise a character given as a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _code_at(s: str, i: int) -> int:
    """Code of ``s[i]``, or 0 past the end as if the string were terminated."""
    return ord(s[i]) if i < len(s) else 0


def find_char(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _as_char(c)
    if ch == NUL:
        return len(s)
    pos = s.find(ch)
    return None if pos == -1 else pos


def rfind_char(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _as_char(c)
    if ch == NUL:
        return len(s)
    pos = s.rfind(ch)
    return None if pos == -1 else pos


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering.

    Returns the difference of the first pair of differing character codes,
    a shorter string comparing as if followed by a NUL.
    """
    for i in range(max(0, n)):
        c1 = _code_at(s1, i)
        c2 = _code_at(s2, i)
        if c1 != c2:
            return c1 - c2
        if c1 == 0:
            break
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two whole strings like :func:`strncmp` without a limit."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. The whole match must lie
    within the first ``length`` characters.
    """
    if not little:
        return 0
    limit = min(max(0, length), len(big))
    pos = big.find(little, 0, limit)
    return None if pos == -1 else pos


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the separator character, dropping empty words."""
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]


def count_words(s: str, sep: int | str) -> int:
    """Number of non-empty words between separator characters."""
    return len(split(s, sep))


def strtrim(s: str, charset: str | None) -> str:
    """Remove characters of ``charset`` from both ends of ``s``.

    With no charset the string is returned unchanged.
    """
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Concatenate two strings, a missing one counting as empty."""
    return (s1 or "") + (s2 or "")


def strmapi(s: str, func: Callable[[int, str], str] | None) -> str:
    """Build a string from ``func(index, char)`` for each character.

    Without a function a copy of ``s`` is returned.
    """
    if func is None:
        return s
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    s: MutableSequence[Any],
    func: Callable[[int, Any], Any] | None,
) -> None:
    """Call ``func(index, item)`` on each item of ``s`` in place.

    A value returned by ``func`` other than None replaces the item.
    """
    if func is None:
        return
    for i, item in enumerate(s):
        result = func(i, item)
        if result is not None:
            s[i] = result


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (as unsigned char) in ``n`` bytes."""
    if n < 0 or n > len(data):
        raise ValueError("n is outside the buffer")
    pos = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if pos == -1 else pos


def memcmp(
    a: bytes | bytearray | memoryview,
    b: bytes | bytearray | memoryview,
    n: int,
) -> int:
    """Compare the first ``n`` bytes; difference of the first differing pair."""
    if n < 0 or n > len(a) or n > len(b):
        raise ValueError("n is outside the buffers")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0