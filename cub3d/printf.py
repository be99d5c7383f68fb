"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
DECIMAL = "0123456789"

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _to_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def to_base(number: int, digits: str) -> str:
    """Write a non-negative ``number`` using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    out = []
    while True:
        number, rest = divmod(number, base)
        out.append(digits[rest])
        if number == 0:
            break
    return "".join(reversed(out))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return NULL_STRING if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return NULL_POINTER
    address = int(value) & 0xFFFFFFFFFFFFFFFF
    return "0x" + to_base(address, HEX_LOWER)


def _format_signed(value: Any) -> str:
    number = _to_int32(int(value))
    if number < 0:
        return "-" + to_base(-number, DECIMAL)
    return to_base(number, DECIMAL)


def _format_unsigned(value: Any) -> str:
    return to_base(_to_uint32(int(value)), DECIMAL)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": lambda value: to_base(_to_uint32(int(value)), HEX_LOWER),
    "X": lambda value: to_base(_to_uint32(int(value)), HEX_UPPER),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {fmt!r}") from None
            yield _CONVERSIONS[spec](value)
        # Unknown conversions and a trailing '%' produce nothing.


def ft_format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def ft_printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = ft_format(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)