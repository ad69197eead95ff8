"""The two stacks of the puzzle and the machine that applies the eleven
named operations to them, recording the ones that count as moves."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List

from pushswap import output

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class Stack:
    """A named stack of integers; index 0 is the top."""

    def __init__(self, name: str, values: Iterable[int] = ()) -> None:
        self.name = name
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    def swap(self) -> bool:
        """Exchange the two top values. Returns False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom. Returns False if there is nothing to move."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top. Returns False if there is nothing to move."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def push_from(self, other: Stack) -> None:
        """Take the top value of ``other`` and put it on top of this stack."""
        if not other._items:
            raise IndexError(f"stack {other.name} is empty")
        self._items.appendleft(other._items.popleft())

    def index_of_min(self) -> int:
        """Return the position of the smallest value (the first, on ties)."""
        if not self._items:
            raise ValueError(f"stack {self.name} is empty")
        return min(enumerate(self._items), key=lambda pair: pair[1])[0]

    def index_of_max(self) -> int:
        """Return the position of the largest value (the first, on ties)."""
        if not self._items:
            raise ValueError(f"stack {self.name} is empty")
        return max(enumerate(self._items), key=lambda pair: pair[1])[0]


def _describe_stack(stack: Stack) -> str:
    parts = [output.format("t_stack %c - length %d\n", stack.name, len(stack))]
    if len(stack):
        parts.append(output.format("Start value %d - start index %d\n", stack[0], 0))
        parts.append(
            output.format("End value %d - end index %d\n\n", stack[-1], len(stack) - 1)
        )
    else:
        parts.append("Start value NULL - start index NULL\n")
        parts.append("End value NULL - end index NULL\n\n")
    parts.extend(
        output.format("Index: %d - Value: %d\n", index, value)
        for index, value in enumerate(stack)
    )
    return "".join(parts)


class Machine:
    """Stacks ``a`` and ``b`` with a log of the operations applied."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack("a", values)
        self.b = Stack("b")
        self._log: List[str] = []

    def apply(self, name: str, record: bool = True) -> None:
        """Apply the operation ``name``.

        A swap or rotation of a single stack that has nothing to move is
        not logged; the combined operations and pushes always are. Pushing
        from an empty stack raises IndexError; an unknown name, ValueError.
        """
        a, b = self.a, self.b
        match name:
            case "sa":
                done = a.swap()
            case "sb":
                done = b.swap()
            case "ss":
                a.swap()
                b.swap()
                done = True
            case "pa":
                a.push_from(b)
                done = True
            case "pb":
                b.push_from(a)
                done = True
            case "ra":
                done = a.rotate()
            case "rb":
                done = b.rotate()
            case "rr":
                a.rotate()
                b.rotate()
                done = True
            case "rra":
                done = a.reverse_rotate()
            case "rrb":
                done = b.reverse_rotate()
            case "rrr":
                a.reverse_rotate()
                b.reverse_rotate()
                done = True
            case _:
                raise ValueError(f"unknown operation: {name!r}")
        if done and record:
            self._log.append(name)

    def operations(self) -> List[str]:
        """Return the logged operations in the order they were applied."""
        return list(self._log)

    def describe(self) -> str:
        """Return a dump of both stacks, lengths, ends and every value."""
        return _describe_stack(self.a) + _describe_stack(self.b)