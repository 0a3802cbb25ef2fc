"""Checking that a list of instructions read from input sorts the stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from pushswap.cli import EXIT_FAILURE
from pushswap.parsing import InputError, empty_arg, parse_arguments, validate
from pushswap.queries import is_sorted_asc
from pushswap.stacks import Operation, Stacks, parse_operation

_MOVE_NAMES = frozenset(operation.value for operation in Operation)


def is_move(line: str) -> bool:
    """Tell whether ``line`` is an operation name ended by a newline."""
    return line.endswith("\n") and line[:-1] in _MOVE_NAMES


def read_moves(lines: Iterable[str]) -> Iterator[Operation]:
    """Yield the operation of each line; raise InputError at the first bad line."""
    for line in lines:
        if not is_move(line):
            raise InputError(f"invalid instruction: {line!r}")
        yield parse_operation(line[:-1])


def check(stacks: Stacks, lines: Iterable[str]) -> bool:
    """Apply the instructions and tell whether ``a`` ends sorted with ``b`` empty."""
    for operation in read_moves(lines):
        stacks.apply(operation)
    return not stacks.b and is_sorted_asc(stacks.a)


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or empty_arg(args[0]):
        return EXIT_FAILURE
    try:
        numbers = parse_arguments(args)
        if not validate(numbers, check_sort=False):
            return EXIT_FAILURE
        ok = check(Stacks(a=numbers), sys.stdin)
    except InputError:
        print("Error", file=sys.stderr)
        return EXIT_FAILURE
    print("OK" if ok else "KO")
    return 0 if ok else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())