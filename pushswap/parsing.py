"""Turning command-line arguments into a validated list of integers."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.queries import is_sorted_asc

_MIN_INT = "-2147483648"
_MAX_INT = "2147483647"


class InputError(ValueError):
    """The arguments do not describe a valid stack."""


def is_number(text: str) -> bool:
    """Tell whether ``text`` is an optional minus sign followed by digits only."""
    digits = text[1:] if text.startswith("-") else text
    return bool(digits) and all("0" <= ch <= "9" for ch in digits)


def is_valid_int(text: str) -> bool:
    """Tell whether ``text`` is a number that fits in a signed 32-bit int."""
    if not text or not is_number(text):
        return False
    limit = _MIN_INT if text.startswith("-") else _MAX_INT
    if len(text) > len(limit):
        return False
    if len(text) == len(limit) and text > limit:
        return False
    return True


def empty_arg(arg: str) -> bool:
    """Tell whether ``arg`` is empty or holds nothing but spaces."""
    return arg.count(" ") == len(arg)


def is_quoted(args: Sequence[str]) -> bool:
    """Tell whether the numbers come as one space-separated argument."""
    return len(args) == 1 and " " in args[0]


def has_duplicates(numbers: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    return len(set(numbers)) != len(numbers)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse the arguments (program name excluded) into stack ``a``, top first."""
    if is_quoted(args):
        tokens = [token for token in args[0].split(" ") if token]
    else:
        tokens = list(args)
    for token in tokens:
        if not is_valid_int(token):
            raise InputError(f"not a valid integer: {token!r}")
    return [int(token) for token in tokens]


def validate(numbers: Sequence[int], check_sort: bool) -> bool:
    """Check a parsed stack.

    Raises InputError on duplicates. Returns False when there is nothing to
    do (no numbers, or already sorted when ``check_sort`` is set).
    """
    if not numbers:
        return False
    if has_duplicates(numbers):
        raise InputError("duplicate values")
    if check_sort and is_sorted_asc(numbers):
        return False
    return True