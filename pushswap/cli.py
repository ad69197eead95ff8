"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line for the numbers in ``argv``.

    With no arguments nothing is printed. Invalid input prints ``Error``
    on standard error and gives exit status 1.
    """
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{name}\n" for name in push_swap(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())