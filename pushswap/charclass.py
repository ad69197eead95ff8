"""Character classification and case conversion on integer character codes.

Every predicate works on the ASCII range only: any code outside it,
negative values included, is simply not a member of the class.
"""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def isalpha(code: int) -> bool:
    """Return True for an ASCII letter."""
    return code in _UPPER or code in _LOWER


def isdigit(code: int) -> bool:
    """Return True for an ASCII decimal digit."""
    return code in _DIGITS


def isalnum(code: int) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: int) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return code in _ASCII


def isprint(code: int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return code in _PRINTABLE


def toupper(code: int) -> int:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    return code - _CASE_OFFSET if code in _LOWER else code


def tolower(code: int) -> int:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    return code + _CASE_OFFSET if code in _UPPER else code