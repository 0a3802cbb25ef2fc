# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed set of instructions. The package has two commands. `push-swap` prints a short list of instructions that sorts the numbers. `push-swap-checker` checks whether a list of instructions really sorts them.

## Instructions

| name  | effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

An instruction that has nothing to act on (a swap or rotation of a stack with fewer than two elements, a push from an empty stack) does nothing.

## Install

```
pip install .
```

## Producing instructions

Give the numbers either as separate arguments or as a single space-separated argument. The first number is the top of `a`.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The instructions are printed one per line on standard output, and the exit status is 0.

The input is rejected, with a non-zero exit status, in these cases:

- no arguments, or a first argument that is empty or only spaces: nothing is printed;
- the numbers are already in ascending order: nothing is printed;
- an argument is not an integer that fits in a signed 32-bit int (only an optional `-` followed by digits is accepted): `Error` is written to standard error;
- a number occurs twice: `Error` is written to standard error.

Stacks of two to four numbers are sorted with a few fixed moves. Larger stacks are sorted by pushing each element of `a` into `b` at the point that costs the fewest rotations, then bringing the elements back into place in `a`.

## Checking instructions

`push-swap-checker` takes the numbers in the same way as `push-swap` and reads instructions from standard input, one per line, each ended by a newline. It prints `OK` and exits with status 0 when the instructions leave `a` sorted in ascending order and `b` empty. Otherwise it prints `KO` and exits with a non-zero status. A line that is not exactly one of the instruction names, an invalid number or a duplicate makes it write `Error` to standard error and exit with a non-zero status. Already sorted input is accepted here.

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

## Using it from Python

```python
from pushswap.sorter import solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])          # [Operation.SA, Operation.RRA]
stacks = Stacks(a=[3, 2, 1])
for move in moves:
    stacks.apply(move)
print(stacks.a)                   # [1, 2, 3]
```

- `pushswap.sorter.solve(numbers)` returns the list of `Operation` values that sorts the numbers; `sort_stacks(stacks)` sorts a `Stacks` in place and records the operations in its `history`.
- `pushswap.stacks.Stacks` holds the lists `a` and `b` (top first) and has one method per instruction (`sa()`, `pb()`, `rrr()`, ...). `apply(operation, record=False)` performs an `Operation` or an instruction name and, when `record` is set, appends it to `history`.
- `pushswap.stacks.parse_operation(text)` turns a name such as `"rra"` into an `Operation` and raises `ValueError` for an unknown name.
- `pushswap.parsing.parse_arguments(args)` and `validate(numbers, check_sort)` turn command-line arguments into a list of integers; they raise `InputError` on bad input.
- `pushswap.checker.check(stacks, lines)` applies instruction lines and tells whether the stacks end sorted.

## Tests

```
pip install ".[test]"
pytest
```