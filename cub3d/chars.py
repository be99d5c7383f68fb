"""Character classification and raw byte comparison helpers."""

from __future__ import annotations


def _check_span(name: str, data: bytes, n: int) -> None:
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, fewer than the {n} requested")


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns -1, 0 or 1. A count of zero or less compares equal.
    """
    if n <= 0:
        return 0
    _check_span("first", first, n)
    _check_span("second", second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return -1 if a < b else 1
    return 0


def memchr(data: bytes, byte: int, n: int) -> bytes | None:
    """Return ``data`` from the first occurrence of ``byte`` in its first ``n`` bytes.

    Only the low eight bits of ``byte`` are used. Returns None when absent.
    """
    if n <= 0:
        return None
    _check_span("data", data, n)
    index = data.find(bytes([byte & 0xFF]), 0, n)
    return None if index == -1 else data[index:]


def is_alpha(code: int) -> bool:
    """True for an ASCII letter."""
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(code: int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; other codes pass through."""
    return code + 32 if ord("A") <= code <= ord("Z") else code


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; other codes pass through."""
    return code - 32 if ord("a") <= code <= ord("z") else code