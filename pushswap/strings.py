"""String helpers: integer conversion, searching, comparing, joining,
slicing, trimming and per-character mapping.

Strings behave as NUL-terminated: a NUL character inside a string ends it
for every search and comparison.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def _terminated(text: str) -> str:
    """Return ``text`` cut at its first NUL character, if it has one."""
    nul = text.find(_NUL)
    return text if nul == -1 else text[:nul]


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped and one optional sign is accepted. A sign
    that is not directly followed by a digit gives 0, as does text with no
    leading digits. Parsing stops at the first non-digit.
    """
    text = _terminated(text)
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if not rest[1:2].isascii() or not rest[1:2].isdigit():
            return 0
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    _check_char(char)
    text = _terminated(text)
    if char == _NUL:
        return len(text)
    found = text.find(char)
    return None if found == -1 else found


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    _check_char(char)
    text = _terminated(text)
    if char == _NUL:
        return len(text)
    found = text.rfind(char)
    return None if found == -1 else found


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points of the first unequal pair,
    the end of a string counting as 0; returns 0 if they agree.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    left = _terminated(first)[:n]
    right = _terminated(second)[:n]
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) == len(right):
        return 0
    # One string ended inside the compared span.
    tail_left = ord(left[len(right)]) if len(left) > len(right) else 0
    tail_right = ord(right[len(left)]) if len(right) > len(left) else 0
    return tail_left - tail_right


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``n``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    if n < 0:
        raise ValueError("count must not be negative")
    needle = _terminated(needle)
    if not needle:
        return 0
    window = _terminated(haystack)[:n]
    found = window.find(needle)
    return None if found == -1 else found


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return _terminated(first) + _terminated(second)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    text = _terminated(text)
    chars = _terminated(chars)
    if not chars:
        return text
    return text.strip(chars)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(_terminated(text)))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> MutableSequence[str]:
    """Call ``func(index, chars)`` for each position of ``chars`` in turn.

    ``func`` may change ``chars[index]`` in place; iteration stops at a
    NUL character. Returns ``chars``.
    """
    index = 0
    while index < len(chars) and chars[index] != _NUL:
        func(index, chars)
        index += 1
    return chars