"""Command-line argument checks for the game."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

PARAMETERS_MESSAGE = "Check parameters. Should use ./cub3D path_to_map.cub"
EXTENSION_MESSAGE = "Check extension. The file should have a name and a .cub extension"
_EXTENSION = ".cub"


class ParseError(ValueError):
    """Raised when the arguments given to the game are not usable."""


def check_parameters(argv: Sequence[str]) -> str:
    """Require exactly one argument, the map path, and return it."""
    if len(argv) != 1:
        raise ParseError(PARAMETERS_MESSAGE)
    return argv[0]


def has_cub_extension(path: str) -> bool:
    """True if ``path`` ends in ".cub" preceded by a name that is not a directory separator."""
    if len(path) < len(_EXTENSION) + 1:
        return False
    if path[-(len(_EXTENSION) + 1)] == "/":
        return False
    return path.endswith(_EXTENSION)


def parse(argv: Sequence[str]) -> str:
    """Validate the arguments (program name excluded) and return the map path."""
    path = check_parameters(argv)
    if not has_cub_extension(path):
        raise ParseError(EXTENSION_MESSAGE)
    return path


def print_err(message: str, stream: TextIO | None = None) -> None:
    """Write an error report: the word Error, then the message, each on its own line."""
    out = sys.stderr if stream is None else stream
    out.write(f"Error\n{message}\n")