"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

import re
from typing import Iterable, List

from pushswap.words import split_whitespace

INT_MIN = -2147483648
INT_MAX = 2147483647

_LEADING = " \t\n\v\f\r"
# Characters that may directly follow the digits; anything after them
# is ignored.
_ALLOWED_AFTER = frozenset(" \n\v\f")
_DIGITS = re.compile(r"[0-9]*")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def parse_int(token: str) -> int:
    """Parse one number token, which must fit a 32-bit signed integer.

    Leading whitespace and one sign are accepted; a sign must be followed
    by a digit. The digits may be followed only by a space, line feed,
    vertical tab or form feed.
    """
    nul = token.find("\0")
    text = token if nul == -1 else token[:nul]
    rest = text.lstrip(_LEADING)
    sign = 1
    if rest[:1] in ("-", "+") and rest[:1]:
        following = rest[1:2]
        if not ("0" <= following <= "9") or not following:
            raise ParseError(f"sign without digits in {token!r}")
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    match = _DIGITS.match(rest)
    digits = match.group()
    tail = rest[match.end():]
    if tail and tail[0] not in _ALLOWED_AFTER:
        raise ParseError(f"not a number: {token!r}")
    value = sign * int(digits or "0")
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"out of range: {token!r}")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Parse every argument, each holding one or more numbers, into a list.

    An empty or blank argument, a malformed or out-of-range number, or a
    repeated value raises ParseError.
    """
    values: List[int] = []
    for arg in args:
        words = split_whitespace(arg) if arg else []
        if not words:
            raise ParseError(f"empty argument: {arg!r}")
        values.extend(parse_int(word) for word in words)
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return values