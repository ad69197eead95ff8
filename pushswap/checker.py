"""Command that reads operations from standard input, applies them to the
given integers and reports whether they end up sorted."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import is_sorted
from pushswap.stack import OPERATIONS, Machine

_MAX_COMMAND = 3


class CheckerError(ValueError):
    """Raised for an invalid command or one that cannot be carried out."""


def apply_commands(machine: Machine, lines: Iterable[str]) -> Machine:
    """Apply each command line to ``machine`` in order and return it.

    A trailing newline on a line is ignored. An empty line, an unknown
    command, or a push from an empty stack raises CheckerError.
    """
    for line in lines:
        command = line.removesuffix("\n")
        if len(command) > _MAX_COMMAND or command not in OPERATIONS:
            raise CheckerError(f"invalid command: {command!r}")
        try:
            machine.apply(command, record=False)
        except IndexError as exc:
            raise CheckerError(str(exc)) from exc
    return machine


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Return True if the commands leave ``values`` sorted in a and b empty."""
    machine = apply_commands(Machine(values), lines)
    return is_sorted(machine) and len(machine.b) == 0


def _read_commands(text: str) -> List[str]:
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input and print ``OK`` or ``KO``.

    Invalid numbers or commands print ``Error`` on standard error and give
    exit status 1. With no numbers nothing is read or printed.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        sorted_ok = check(values, _read_commands(sys.stdin.read()))
    except (ParseError, CheckerError):
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())