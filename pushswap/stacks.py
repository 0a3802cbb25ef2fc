"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operation(str, Enum):
    """An instruction that acts on one or both stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_operation(text: str) -> Operation:
    """Return the operation named by ``text``; raise ValueError if there is none."""
    try:
        return Operation(text)
    except ValueError:
        raise ValueError(f"unknown operation: {text!r}") from None


def _swap_top(stack: list[int]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[int]) -> None:
    if len(stack) > 1:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) > 1:
        stack.insert(0, stack.pop())


def _push(source: list[int], dest: list[int]) -> None:
    if source:
        dest.insert(0, source.pop(0))


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with the operations recorded so far."""

    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)
    history: list[Operation] = field(default_factory=list)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap_top(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap_top(self.b)

    def ss(self) -> None:
        """Do ``sa`` and ``sb`` together."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)

    def rr(self) -> None:
        """Do ``ra`` and ``rb`` together."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb`` together."""
        self.rra()
        self.rrb()

    def apply(self, operation: Operation | str, record: bool = False) -> None:
        """Perform ``operation``; when ``record`` is set, append it to the history."""
        op = operation if isinstance(operation, Operation) else parse_operation(operation)
        getattr(self, op.value)()
        if record:
            self.history.append(op)