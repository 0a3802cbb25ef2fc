import io
import sys

import pytest

from pushswap.checker import check, is_move, main, read_moves
from pushswap.cli import EXIT_FAILURE
from pushswap.parsing import InputError
from pushswap.sorter import solve
from pushswap.stacks import Operation, Stacks


@pytest.mark.parametrize("name", [op.value for op in Operation])
def test_is_move_accepts_every_operation(name):
    assert is_move(name + "\n") is True


@pytest.mark.parametrize("line", ["sa", "rra", "\n", "sx\n", "rra \n", "sa\n\n", "rrrr\n", "s\n", ""])
def test_is_move_rejects(line):
    assert is_move(line) is False


def test_read_moves_yields_operations():
    assert list(read_moves(["sa\n", "pb\n", "rrr\n"])) == [
        Operation.SA,
        Operation.PB,
        Operation.RRR,
    ]


def test_read_moves_raises_on_bad_line():
    with pytest.raises(InputError):
        list(read_moves(["sa\n", "nope\n"]))


def test_check_ok_after_swap():
    assert check(Stacks(a=[2, 1]), ["sa\n"]) is True


def test_check_ko_without_moves():
    assert check(Stacks(a=[2, 1]), []) is False


def test_check_ko_when_b_not_empty():
    assert check(Stacks(a=[1, 2, 3]), ["pb\n"]) is False


def test_check_accepts_solver_output():
    numbers = [9, -4, 7, 0, 3, 12, 1]
    lines = [f"{op}\n" for op in solve(numbers)]
    assert check(Stacks(a=numbers), lines) is True


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa\n"))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ok_sorted_input_no_moves(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ra\n"))
    assert main(["3", "1", "2", "4"]) == EXIT_FAILURE
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa\nfoo\n"))
    assert main(["2", "1"]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_missing_final_newline(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa"))
    assert main(["2", "1"]) == EXIT_FAILURE
    assert capsys.readouterr().err == "Error\n"


def test_main_duplicates(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["1", "2", "1"]) == EXIT_FAILURE
    assert capsys.readouterr().err == "Error\n"


def test_main_invalid_number(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["1", "abc"]) == EXIT_FAILURE
    assert capsys.readouterr().err == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == EXIT_FAILURE
    assert main(["   "]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""