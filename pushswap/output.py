"""Formatted output: a small printf with the conversions c, s, p, d, i,
u, x, X and %, plus helpers that write characters, strings and numbers
to a text stream."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

_NUL = "\0"
_MISSING = object()


def _as_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - (1 << 32) if number >= 1 << 31 else number


def _as_uint32(number: int) -> int:
    return number & 0xFFFFFFFF


def _as_uint64(number: int) -> int:
    return number & 0xFFFFFFFFFFFFFFFF


def _terminated(text: str) -> str:
    nul = text.find(_NUL)
    return text if nul == -1 else text[:nul]


def _stream(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def _as_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def format_hex(number: int, upper: bool = False) -> str:
    """Return ``number`` as an unsigned 32-bit value in hexadecimal."""
    value = _as_uint32(number)
    return f"{value:X}" if upper else f"{value:x}"


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for 0."""
    if not address:
        return "(nil)"
    return f"0x{_as_uint64(address):x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else _terminated(str(value))
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    return format_hex(value, upper=spec == "X")


def format(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions produce nothing and use no argument; a lone
    ``%`` at the end of ``fmt`` is dropped.
    """
    values = iter(args)
    chars = iter(_terminated(fmt))
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` and return how many characters it has."""
    text = format(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(char: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_as_char(char))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    _stream(stream).write(_terminated(text))


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _stream(stream).write(_terminated(text) + "\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _stream(stream).write(str(_as_int32(number)))