"""The sorting strategy: move values from stack a to stack b choosing
each time the cheapest one to place, sort the last three in a, then
insert everything back into a and bring the minimum to the top."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, List

from pushswap.stack import Machine, Stack

ROTATE_BOTH = 1
REVERSE_BOTH = 2
SEPARATE = 3


@dataclass(frozen=True)
class Cost:
    """Number of operations a move takes and the strategy that achieves it."""

    count: int
    variant: int


def biggest_lower_index(stack: Stack, value: int) -> int:
    """Position of the largest value below ``value``; if none is below,
    the position of the largest value overall."""
    best = max(
        ((index, item) for index, item in enumerate(stack) if item < value),
        key=lambda pair: pair[1],
        default=None,
    )
    if best is None:
        return stack.index_of_max()
    return best[0]


def lowest_bigger_index(stack: Stack, value: int) -> int:
    """Position of the smallest value above ``value``; if none is above,
    the position of the smallest value overall."""
    best = min(
        ((index, item) for index, item in enumerate(stack) if item > value),
        key=lambda pair: pair[1],
        default=None,
    )
    if best is None:
        return stack.index_of_min()
    return best[0]


def min_of_three(up: int, down: int, easy: int) -> Cost:
    """Pick the cheapest of the three strategies, preferring the separate
    one, then rotating both, on ties."""
    if easy <= up and easy <= down:
        return Cost(easy, SEPARATE)
    if up <= down:
        return Cost(up, ROTATE_BOTH)
    return Cost(down, REVERSE_BOTH)


def _one_way(length: int, index: int) -> int:
    return index if length // 2 >= index else length - index


def count_operations(machine: Machine, index: int) -> Cost:
    """Cost of moving the value at ``index`` in a to its place in b."""
    a, b = machine.a, machine.b
    in_b = biggest_lower_index(b, a[index])
    up = max(index, in_b) + 1
    down = max(len(a) - index, len(b) - in_b) + 1
    easy = 1 + _one_way(len(a), index) + _one_way(len(b), in_b)
    return min_of_three(up, down, easy)


def find_cheapest(machine: Machine) -> int:
    """Position in a of the first value that is cheapest to move to b."""
    if not len(machine.a):
        raise ValueError("stack a is empty")
    return min(range(len(machine.a)), key=lambda i: count_operations(machine, i).count)


def _repeat(machine: Machine, name: str, times: int) -> None:
    for _ in range(times):
        machine.apply(name)


def _rotate_both_push(machine: Machine, index: int) -> None:
    in_b = biggest_lower_index(machine.b, machine.a[index])
    shared = min(index, in_b)
    _repeat(machine, "rr", shared)
    if index == shared:
        _repeat(machine, "rb", in_b - shared)
    else:
        _repeat(machine, "ra", index - shared)
    machine.apply("pb")


def _reverse_both_push(machine: Machine, index: int) -> None:
    in_b = biggest_lower_index(machine.b, machine.a[index])
    steps_a = len(machine.a) - index
    steps_b = len(machine.b) - in_b
    shared = min(steps_a, steps_b)
    _repeat(machine, "rrr", shared)
    if steps_a == shared:
        _repeat(machine, "rrb", steps_b - shared)
    else:
        _repeat(machine, "rra", steps_a - shared)
    machine.apply("pb")


def _separate_push(machine: Machine, index: int) -> None:
    a, b = machine.a, machine.b
    in_b = biggest_lower_index(b, a[index])
    if len(a) // 2 >= index:
        _repeat(machine, "ra", index)
    else:
        _repeat(machine, "rra", len(a) - index)
    if len(b) // 2 >= in_b:
        _repeat(machine, "rb", in_b)
    else:
        _repeat(machine, "rrb", len(b) - in_b)
    machine.apply("pb")


def move_to_second_stack(machine: Machine, index: int) -> None:
    """Move the value at ``index`` in a onto b the cheapest way."""
    variant = count_operations(machine, index).variant
    if variant == SEPARATE:
        _separate_push(machine, index)
    elif variant == ROTATE_BOTH:
        _rotate_both_push(machine, index)
    else:
        _reverse_both_push(machine, index)


def sort_three(machine: Machine) -> None:
    """Sort a stack a of three (or two) values in at most two operations."""
    a = machine.a
    if len(a) < 2:
        raise ValueError("stack a needs at least two values")
    if a[0] > a[1] and a[-1] < a[-2]:
        machine.apply("sa")
    elif a[-1] < a[-2] and a[0] < a[-1]:
        machine.apply("sa")
    if a[0] < a[1] and a[-2] < a[-1]:
        return
    if a[-1] > a[-2] and a[-1] < a[0]:
        machine.apply("ra")
    elif a[0] > a[1] and a[-1] > a[0]:
        machine.apply("sa")
    else:
        machine.apply("rra")


def rotate_for_insert(machine: Machine, value: int) -> None:
    """Rotate a so that ``value`` pushed on top lands in order."""
    a = machine.a
    index = lowest_bigger_index(a, value)
    if len(a) // 2 >= index:
        _repeat(machine, "ra", index)
    else:
        _repeat(machine, "rra", len(a) - index)


def rotate_min_to_top(machine: Machine) -> None:
    """Rotate a the short way until its smallest value is on top."""
    a = machine.a
    index = a.index_of_min()
    if len(a) // 2 >= index:
        _repeat(machine, "ra", index)
    else:
        _repeat(machine, "rra", len(a) - index)


def is_sorted(machine: Machine) -> bool:
    """Return True when no value in a is above a smaller one."""
    return not any(upper > lower for upper, lower in pairwise(machine.a))


def sort_machine(machine: Machine) -> None:
    """Sort stack a of ``machine`` in ascending order from the top."""
    a, b = machine.a, machine.b
    if len(a) <= 3:
        if len(a) == 3:
            sort_three(machine)
        elif len(a) == 2 and a[0] > a[-1]:
            machine.apply("sa")
        return
    if is_sorted(machine):
        return
    machine.apply("pb")
    machine.apply("pb")
    while len(a) > 3:
        move_to_second_stack(machine, find_cheapest(machine))
    sort_three(machine)
    while len(b):
        rotate_for_insert(machine, b[0])
        machine.apply("pa")
    rotate_min_to_top(machine)


def push_swap(values: Iterable[int]) -> List[str]:
    """Return the operations that sort ``values``."""
    machine = Machine(values)
    sort_machine(machine)
    return machine.operations()