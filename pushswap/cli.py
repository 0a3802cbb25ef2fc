"""Command that prints the operations sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, empty_arg, parse_arguments, validate
from pushswap.sorter import solve

EXIT_FAILURE = 255
"""Exit status for invalid, empty or already sorted input."""


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or empty_arg(args[0]):
        return EXIT_FAILURE
    try:
        numbers = parse_arguments(args)
        if not validate(numbers, check_sort=True):
            return EXIT_FAILURE
    except InputError:
        print("Error", file=sys.stderr)
        return EXIT_FAILURE
    for operation in solve(numbers):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())