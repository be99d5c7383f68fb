"""Reader for XPM images, as used for wall textures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from cub3d.colors import lookup_color

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 32-bit 0xAARRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first index of ``needle`` outside double quotes, or -1."""
    inside = False
    last_start = len(text) - len(needle) + 1
    for pos, char in enumerate(text[:last_start]):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank_comments(text: str, opener: str, closer: str, keep_closer: bool) -> str:
    while (start := find_unquoted(text, opener)) != -1:
        end = text.find(closer, start + len(opener))
        if end == -1:
            stop = len(text)
        else:
            stop = end + len(closer) if keep_closer else end
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces.

    Block comments are blanked first, then line comments together with
    the newline that ends them. The length of the text is preserved.
    """
    text = _blank_comments(text, "/*", "*/", keep_closer=True)
    return _blank_comments(text, "//", "\n", keep_closer=True)


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _pixel_value(color: int) -> int:
    if color == -1:
        return _TRANSPARENT
    return color & 0xFFFFFFFF


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the XPM strings (header, colours, then rows)."""
    source = iter(lines)

    def take(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(take("header line"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(header[:4])}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = take("colour definition")
        words = split_words(line[cpp:])
        try:
            at = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at + 1 >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        extra = words[at + 2] if at + 2 < len(words) else None
        value = lookup_color(words[at + 1], extra)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = take("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[x * cpp:(x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))