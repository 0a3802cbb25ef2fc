"""Choosing and carrying out the cheapest way to move an element between stacks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields

from pushswap.moveset import Moveset
from pushswap.queries import (
    max_index,
    min_index,
    next_greater_index,
    next_smaller_index,
    to_bottom,
    to_top,
)
from pushswap.stacks import Stacks


def _adopt_if_cheaper(moveset: Moveset, candidate: Moveset) -> None:
    if candidate.total() < moveset.total():
        for item in fields(Moveset):
            setattr(moveset, item.name, getattr(candidate, item.name))


def set_optimal_rotations(
    stack: Sequence[int], moveset: Moveset, index: int, stack_name: str
) -> None:
    """Set the rotations that bring ``stack[index]`` to the top the short way.

    An index of -1 stands for the minimum of stack ``a`` or the maximum of
    stack ``b``.
    """
    if stack_name not in ("a", "b"):
        raise ValueError(f"unknown stack: {stack_name!r}")
    if index == -1:
        index = min_index(stack) if stack_name == "a" else max_index(stack)
    size = len(stack)
    if to_top(size, index):
        if stack_name == "a":
            moveset.ra = index
        else:
            moveset.rb = index
    elif stack_name == "a":
        moveset.rra = size - index
    else:
        moveset.rrb = size - index


def case_a_down_b_up(
    stacks: Stacks, moveset: Moveset, index_a: int, index_b: int
) -> None:
    """Replace ``moveset`` by plain forward rotations of both stacks if cheaper."""
    if index_a == -1 or index_b == -1:
        return
    if not (to_bottom(len(stacks.a), index_a) and to_top(len(stacks.b), index_b)):
        return
    shared = min(index_a, index_b)
    candidate = Moveset(pb=1, rr=shared, ra=index_a - shared, rb=index_b - shared)
    _adopt_if_cheaper(moveset, candidate)


def case_b_down_a_up(
    stacks: Stacks, moveset: Moveset, index_a: int, index_b: int
) -> None:
    """Replace ``moveset`` by plain reverse rotations of both stacks if cheaper."""
    rra = len(stacks.a) - index_a
    rrb = len(stacks.b) - index_b
    if index_a == -1 or index_b == -1:
        return
    if not (to_bottom(len(stacks.b), index_b) and to_top(len(stacks.a), index_a)):
        return
    shared = min(rra, rrb)
    candidate = Moveset(pb=1, rrr=shared, rra=rra - shared, rrb=rrb - shared)
    _adopt_if_cheaper(moveset, candidate)


def calculate_movecount(
    stacks: Stacks, moveset: Moveset, index_a: int, index_b: int
) -> None:
    """Fill ``moveset`` with the cheapest rotations for the given positions."""
    set_optimal_rotations(stacks.a, moveset, index_a, "a")
    set_optimal_rotations(stacks.b, moveset, index_b, "b")
    moveset.merge_rotations()
    case_a_down_b_up(stacks, moveset, index_a, index_b)
    case_b_down_a_up(stacks, moveset, index_a, index_b)


def plan_a_to_b(stacks: Stacks, index_a: int, index_b: int) -> Moveset:
    """Plan moving ``a[index_a]`` onto ``b`` above ``b[index_b]``."""
    moveset = Moveset(pb=1)
    calculate_movecount(stacks, moveset, index_a, index_b)
    return moveset


def plan_b_to_a(stacks: Stacks, index_a: int, index_b: int) -> Moveset:
    """Plan moving ``b[index_b]`` onto ``a`` above ``a[index_a]``."""
    moveset = Moveset(pa=1)
    calculate_movecount(stacks, moveset, index_a, index_b)
    return moveset


def find_cheapest_move(stacks: Stacks) -> int:
    """Return the index in ``a`` of the element cheapest to push into ``b``."""
    lowest_count = 0
    lowest_index = 0
    for index, value in enumerate(stacks.a):
        if lowest_count == 1:
            break
        target = next_smaller_index(stacks.b, value)
        count = plan_a_to_b(stacks, index, target).total()
        if index == 0 or count < lowest_count:
            lowest_count = count
            lowest_index = index
    return lowest_index


def execute_cheapest_move(stacks: Stacks) -> None:
    """Push the cheapest element of ``a`` into its place in ``b``."""
    index_a = find_cheapest_move(stacks)
    index_b = next_smaller_index(stacks.b, stacks.a[index_a])
    plan_a_to_b(stacks, index_a, index_b).execute(stacks)


def correct_stack_a(stacks: Stacks) -> None:
    """Push the top of ``b`` into its place in ``a``."""
    index_b = 0
    index_a = next_greater_index(stacks.a, stacks.b[index_b])
    plan_b_to_a(stacks, index_a, index_b).execute(stacks)