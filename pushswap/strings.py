"""String and byte helpers: parsing, formatting, splitting, searching and comparing.

Searches report positions as indexes into the given text, or ``None``
when nothing is found. Comparisons return the difference between the
first pair of characters that differ, so only the sign and zero carry
meaning to most callers.
"""

from __future__ import annotations

import operator
from typing import Callable

from pushswap.chars import is_digit

_SPACES = frozenset(" \t\n\v\f\r")


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _code_at(text: str, i: int) -> int:
    """Code of ``text[i]``, or 0 past the end of ``text``."""
    return ord(text[i]) if i < len(text) else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit; no digits at all gives 0.
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not is_digit(ch):
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return number * sign


def itoa(n: int) -> str:
    """Return the decimal form of the integer ``n``."""
    return str(operator.index(n))


def split(text: str, sep: str | int) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strcmp(a: str | None, b: str | None) -> int:
    """Compare two strings; ``None`` on either side gives -1."""
    if a is None or b is None:
        return -1
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    shared = min(len(a), len(b))
    return _code_at(a, shared) - _code_at(b, shared)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        ca = _code_at(a, i)
        cb = _code_at(b, i)
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strchr(text: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    ch = _char(c)
    if ch == "\0":
        position = text.find(ch)
        return len(text) if position < 0 else position
    position = text.find(ch)
    return None if position < 0 else position


def strrchr(text: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    position = text.rfind(ch)
    return None if position < 0 else position


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def _check_span(data: bytes | bytearray | memoryview, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(data):
        raise ValueError(f"n ({n}) exceeds the data length ({len(data)})")


def memcmp(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) in the first ``n`` bytes."""
    _check_span(data, n)
    position = bytes(data[:n]).find(operator.index(c) & 0xFF)
    return None if position < 0 else position