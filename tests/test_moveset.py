import copy

import pytest

from pushswap.moveset import Moveset
from pushswap.stacks import Operation, Stacks


def test_fresh_moveset_is_empty():
    moveset = Moveset()
    assert moveset.total() == 0
    assert list(moveset.operations()) == []


def test_total_counts_every_field():
    moveset = Moveset(sa=1, sb=1, ss=1, pa=1, pb=1, ra=1, rb=1, rr=1, rra=1, rrb=1, rrr=1)
    assert moveset.total() == 11


def test_merge_forward_rotations_takes_the_smaller_count():
    moveset = Moveset(ra=3, rb=5)
    moveset.merge_rotations()
    assert moveset.rr == 3
    assert moveset.ra == 0
    assert moveset.rb == 5 - 3


def test_merge_reverse_rotations_takes_the_smaller_count():
    moveset = Moveset(rra=4, rrb=1)
    moveset.merge_rotations()
    assert moveset.rrr == 1
    assert moveset.rrb == 0
    assert moveset.rra == 4 - 1


@pytest.mark.parametrize(
    "fields",
    [
        {"ra": 2, "rb": 2},
        {"ra": 7, "rb": 1, "rra": 0, "rrb": 3},
        {"rra": 2, "rrb": 6, "pb": 1},
        {"ra": 4, "rrb": 4, "pb": 1},
    ],
)
def test_merge_saves_exactly_the_shared_moves(fields):
    moveset = Moveset(**fields)
    before = moveset.total()
    moveset.merge_rotations()
    assert moveset.total() == before - moveset.rr - moveset.rrr
    assert moveset.ra == 0 or moveset.rb == 0
    assert moveset.rra == 0 or moveset.rrb == 0


def test_merge_leaves_one_sided_rotations_alone():
    moveset = Moveset(ra=4, rrb=2)
    moveset.merge_rotations()
    assert moveset == Moveset(ra=4, rrb=2)


def test_operations_follow_execution_order():
    moveset = Moveset(pb=1, ra=1, rr=1, sa=1, rrb=1, sb=1)
    assert list(moveset.operations()) == [
        Operation.SA,
        Operation.SB,
        Operation.RR,
        Operation.RA,
        Operation.RRB,
        Operation.PB,
    ]


def test_operations_repeat_by_count():
    moveset = Moveset(rra=2, pa=1)
    assert list(moveset.operations()) == [Operation.RRA, Operation.RRA, Operation.PA]


def test_execute_rotates_and_records():
    stacks = Stacks(a=[3, 1, 2])
    Moveset(ra=1).execute(stacks)
    assert stacks.a == [1, 2, 3]
    assert stacks.history == [Operation.RA]


def test_execute_push_moves_top_of_a():
    stacks = Stacks(a=[5, 6, 7], b=[1])
    Moveset(pb=1).execute(stacks)
    assert stacks.a == [6, 7]
    assert stacks.b == [5, 1]
    assert stacks.history == [Operation.PB]


def test_execute_matches_applying_operations_one_by_one():
    moveset = Moveset(sa=1, rr=2, rra=1, rrb=1, pb=1)
    stacks = Stacks(a=[4, 9, 2, 7, 1], b=[8, 3, 6])
    expected = copy.deepcopy(stacks)
    for operation in moveset.operations():
        expected.apply(operation)
    moveset.execute(stacks)
    assert (stacks.a, stacks.b) == (expected.a, expected.b)
    assert stacks.history == list(moveset.operations())


def test_execute_keeps_element_count():
    stacks = Stacks(a=[10, 20, 30, 40], b=[50])
    moveset = Moveset(ra=1, rb=1, pa=1)
    moveset.execute(stacks)
    assert sorted(stacks.a + stacks.b) == [10, 20, 30, 40, 50]
    assert len(stacks.history) == moveset.total()