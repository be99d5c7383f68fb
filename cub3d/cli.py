"""Command entry point."""

from __future__ import annotations

import sys
from typing import Sequence

from cub3d.parsing import ParseError, parse, print_err

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Check the command-line arguments; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        parse(args)
    except ParseError as error:
        print_err(str(error))
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())