"""Sorting stack ``a`` with the puzzle's operations."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.planner import correct_stack_a, execute_cheapest_move
from pushswap.queries import is_sorted_asc, max_index, min_index, to_top
from pushswap.stacks import Operation, Stacks

# Moves that sort three elements, keyed by (index of maximum, index of minimum).
_THREE_MOVES: dict[tuple[int, int], tuple[Operation, ...]] = {
    (1, 0): (Operation.RRA, Operation.SA),
    (2, 1): (Operation.SA,),
    (1, 2): (Operation.RRA,),
    (0, 1): (Operation.RA,),
    (0, 2): (Operation.SA, Operation.RRA),
}


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element stack ``a`` in at most two recorded moves."""
    key = (max_index(stacks.a), min_index(stacks.a))
    for operation in _THREE_MOVES.get(key, ()):
        stacks.apply(operation, record=True)


def final_sort(stacks: Stacks) -> None:
    """Rotate ``a`` until its minimum is on top, turning the short way.

    Raises ValueError when ``a`` is not a rotation of an ascending sequence.
    """
    if is_sorted_asc(stacks.a):
        return
    size = len(stacks.a)
    operation = Operation.RA if to_top(size, min_index(stacks.a)) else Operation.RRA
    for _ in range(size):
        stacks.apply(operation, record=True)
        if is_sorted_asc(stacks.a):
            return
    raise ValueError("stack a is not a rotation of a sorted sequence")


def _sort_small(stacks: Stacks, size: int) -> None:
    if size == 2:
        stacks.apply(Operation.SA, record=True)
        return
    if size == 3:
        sort_three(stacks)
        return
    stacks.apply(Operation.PB, record=True)
    sort_three(stacks)
    correct_stack_a(stacks)
    final_sort(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` ascending, recording every operation in the history."""
    if is_sorted_asc(stacks.a):
        return
    size = len(stacks.a)
    if size <= 4:
        _sort_small(stacks, size)
        return
    while len(stacks.b) < 2:
        stacks.apply(Operation.PB, record=True)
    while len(stacks.a) > 3:
        execute_cheapest_move(stacks)
    sort_three(stacks)
    while stacks.b:
        correct_stack_a(stacks)
    final_sort(stacks)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``numbers`` (top first) ascending."""
    stacks = Stacks(a=list(numbers))
    sort_stacks(stacks)
    return list(stacks.history)