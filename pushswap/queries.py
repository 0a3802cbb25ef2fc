"""Read-only questions about a stack: extremes, neighbours and order."""

from __future__ import annotations

from collections.abc import Sequence


def _require_items(stack: Sequence[int]) -> None:
    if not stack:
        raise ValueError("stack is empty")


def max_index(stack: Sequence[int]) -> int:
    """Return the index of the first largest value in ``stack``."""
    _require_items(stack)
    return max(range(len(stack)), key=stack.__getitem__)


def min_index(stack: Sequence[int]) -> int:
    """Return the index of the first smallest value in ``stack``."""
    _require_items(stack)
    return min(range(len(stack)), key=stack.__getitem__)


def next_greater_index(stack: Sequence[int], number: int) -> int:
    """Return the index of the smallest value above ``number``.

    Returns -1 when ``number`` exceeds every value, and the index of the
    maximum when nothing lies strictly above ``number``.
    """
    top = max_index(stack)
    if number > stack[top]:
        return -1
    greater = [(value, index) for index, value in enumerate(stack) if value > number]
    if not greater:
        return top
    return min(greater)[1]


def next_smaller_index(stack: Sequence[int], number: int) -> int:
    """Return the index of the largest value below ``number``.

    Returns -1 when ``number`` is below every value, and the index of the
    minimum when nothing lies strictly below ``number``.
    """
    bottom = min_index(stack)
    if number < stack[bottom]:
        return -1
    smaller = [(value, -index) for index, value in enumerate(stack) if value < number]
    if not smaller:
        return bottom
    return -max(smaller)[1]


def is_sorted_asc(stack: Sequence[int]) -> bool:
    """Tell whether ``stack`` is in ascending order from top to bottom."""
    return all(first <= second for first, second in zip(stack, stack[1:]))


def to_top(size: int, index: int) -> bool:
    """Tell whether the element at ``index`` is reached faster by rotating up."""
    if index <= 0:
        return True
    if size % 2 != 0:
        median = (size + 1) // 2 - 1
    else:
        median = size // 2 - 1
    return index <= median


def to_bottom(size: int, index: int) -> bool:
    """Tell whether the element at ``index`` is reached faster by rotating down."""
    return not to_top(size, index)