"""String helpers used by the map and configuration readers."""

from __future__ import annotations

import re
from typing import Callable

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d*)")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _as_char(char: str | int) -> str:
    """Normalise a character argument given as a one-character string or a code."""
    if isinstance(char, int):
        return chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text with no digits yields 0.
    The result wraps around like a 32-bit signed integer.
    """
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return _to_int32(-value if sign == "-" else value)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _as_char(sep)
    return [part for part in text.split(sep) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, ``haystack`` itself
    for an empty needle, or None when there is no match.
    """
    if not needle:
        return haystack
    index = haystack.find(needle, 0, max(length, 0))
    return None if index == -1 else haystack[index:]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive like C.

    The end of a string compares as a NUL character, so a shorter string
    sorts before a longer one it is a prefix of.
    """
    for index in range(max(n, 0)):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str | None, second: str | None) -> str:
    """Concatenate two strings; if either is missing the result is empty."""
    if first is None or second is None:
        return ""
    return first + second


def strchr(text: str, char: str | int) -> str | None:
    """Return ``text`` from the first occurrence of ``char``, or None.

    Searching for NUL yields the empty string, the position of the end.
    """
    char = _as_char(char)
    if char == "\0":
        return ""
    index = text.find(char)
    return None if index == -1 else text[index:]


def strrchr(text: str, char: str | int) -> str | None:
    """Return ``text`` from the last occurrence of ``char``, or None.

    Searching for NUL yields the empty string, the position of the end.
    """
    char = _as_char(char)
    if char == "\0":
        return ""
    index = text.rfind(char)
    return None if index == -1 else text[index:]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))