"""Counted batches of operations that move one element into place."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pushswap.stacks import Operation, Stacks

# The order in which counted operations are carried out: swaps first, then
# shared rotations, rotations of a, rotations of b, and finally the pushes.
_EXECUTION_ORDER: tuple[tuple[str, Operation], ...] = (
    ("sa", Operation.SA),
    ("sb", Operation.SB),
    ("rr", Operation.RR),
    ("rrr", Operation.RRR),
    ("ra", Operation.RA),
    ("rra", Operation.RRA),
    ("rb", Operation.RB),
    ("rrb", Operation.RRB),
    ("pa", Operation.PA),
    ("pb", Operation.PB),
)


@dataclass
class Moveset:
    """How many times each operation is to be performed."""

    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    def merge_rotations(self) -> None:
        """Fold matching rotations of both stacks into shared ``rr``/``rrr`` moves."""
        if self.ra and self.rb:
            self.rr = min(self.ra, self.rb)
            self.ra -= self.rr
            self.rb -= self.rr
        if self.rra and self.rrb:
            self.rrr = min(self.rra, self.rrb)
            self.rra -= self.rrr
            self.rrb -= self.rrr

    def total(self) -> int:
        """Return the number of operations the moveset stands for."""
        return (
            self.sa + self.sb + self.ss
            + self.pa + self.pb
            + self.ra + self.rb + self.rr
            + self.rra + self.rrb + self.rrr
        )

    def operations(self) -> Iterator[Operation]:
        """Yield the operations in the order they are executed."""
        for name, operation in _EXECUTION_ORDER:
            for _ in range(getattr(self, name)):
                yield operation

    def execute(self, stacks: Stacks) -> None:
        """Perform the operations on ``stacks``, recording each one."""
        for operation in self.operations():
            stacks.apply(operation, record=True)