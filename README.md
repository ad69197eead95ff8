# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and only
these operations:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two items of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate up: the top item goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate down: the bottom item goes to the top |

For more than three values the sorter pushes two values to `b`, then
repeatedly moves whichever value of `a` is cheapest to place in `b`, sorts
the last three values left in `a`, inserts everything from `b` back into
`a`, and finally rotates the smallest value to the top. Input that is
already sorted produces no operations.

## Installation

```
pip install .
```

## Command line

Print the operations that sort the numbers, one per line:

```
push-swap 3 2 1 5 4
```

Numbers may also be given inside one quoted argument, separated by
whitespace (`push-swap "3 2 1 5 4"`). If an argument is empty or blank,
holds a token that is not an integer, a value outside the 32-bit signed
range, or if a value is repeated, `Error` is written to standard error and
the exit status is 1. If no numbers are given, nothing is printed.

Check a list of operations read from standard input, one per line:

```
push-swap 3 2 1 5 4 | push-swap-checker 3 2 1 5 4
```

The checker prints `OK` if the operations leave `a` sorted and `b` empty,
and `KO` otherwise. It prints `Error` on standard error, with exit status
1, for bad numbers, an empty line, an unknown operation, or a push from an
empty stack. With no numbers it reads and prints nothing.

## Library use

```python
from pushswap.sorting import push_swap
from pushswap.checker import check
from pushswap.stack import Machine

ops = push_swap([3, 2, 1, 5, 4])   # list of operation names
print(ops)

machine = Machine([2, 1, 3])
machine.apply("sa")
print(list(machine.a))              # [1, 2, 3]
print(machine.operations())         # ['sa']

print(check([3, 2, 1, 5, 4], ops))  # True
```

- `pushswap.parsing.parse_arguments` turns command-line strings into a list
  of integers and raises `pushswap.parsing.ParseError` on bad input.
- `pushswap.stack.Machine.apply(name, record=True)` applies one operation;
  `describe()` returns a text dump of both stacks.
- `pushswap.sorting` also exposes the individual steps (`find_cheapest`,
  `move_to_second_stack`, `sort_three`, `rotate_min_to_top`, `is_sorted`,
  `sort_machine`).
- `pushswap.checker.apply_commands` applies command lines to a machine and
  raises `pushswap.checker.CheckerError` on an invalid one.

## Helper modules

The package also carries small utility modules used by, or alongside, the
sorter:

- `pushswap.charclass` – ASCII classification and case mapping on integer
  codes (`isalpha`, `isdigit`, `toupper`, ...).
- `pushswap.memory` – fill, copy, move, search and compare operations on
  `bytearray` buffers, plus `strlcpy` and `strlcat`.
- `pushswap.strings` – `atoi`, `itoa`, string search, comparison, slicing,
  trimming and per-character mapping.
- `pushswap.linkedlist` – a singly linked `LinkedList` of `Node`s.
- `pushswap.words` – splitting on one separator character, or on
  whitespace as the argument parser does.
- `pushswap.output` – a small `printf`/`format` supporting `%c %s %p %d %i
  %u %x %X %%`, and `put_char`, `put_str`, `put_endl`, `put_nbr`.

## Running the tests

```
pip install ".[test]"
pytest
```