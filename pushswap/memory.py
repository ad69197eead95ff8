"""Byte-buffer primitives: filling, copying, searching, comparing and
bounded NUL-terminated string copying on mutable byte buffers."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(buffer: BytesLike, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buffer):
        raise IndexError(f"{what} holds {len(buffer)} bytes, {n} requested")


def _check_span(buffer: BytesLike, offset: int, n: int) -> None:
    if offset < 0 or n < 0:
        raise ValueError("offset and byte count must not be negative")
    if offset + n > len(buffer):
        raise IndexError(
            f"span {offset}..{offset + n} exceeds buffer of {len(buffer)} bytes"
        )


def _terminated_length(data: BytesLike) -> int:
    """Length up to the first NUL byte, or the whole data if there is none."""
    raw = bytes(data)
    nul = raw.find(0)
    return len(raw) if nul == -1 else nul


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_count(buffer, n)
    buffer[:n] = bytes((value & 0xFF,)) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(nitems: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nitems * size`` bytes.

    A request for zero items is refused, as are negative counts.
    """
    if nitems < 0 or size < 0:
        raise ValueError("item count and size must not be negative")
    if nitems == 0:
        raise ValueError("cannot allocate zero items")
    return bytearray(nitems * size)


def memchr(buffer: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` among the
    first ``n`` bytes, or None if there is none."""
    _check_count(buffer, n)
    found = bytes(buffer[:n]).find(value & 0xFF)
    return None if found == -1 else found


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_count(first, n, "first buffer")
    _check_count(second, n, "second buffer")
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dest``."""
    _check_count(src, n, "source")
    _check_count(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dest``; overlapping spans are handled correctly."""
    _check_span(buffer, src, n)
    _check_span(buffer, dest, n)
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy the string in ``src`` into ``dest``, writing at most ``size``
    bytes including the terminating NUL.

    Returns the length of ``src``, so a result of ``size`` or more means
    the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _terminated_length(src)
    if size > 0:
        count = min(src_len, size - 1)
        _check_count(dest, count + 1, "destination")
        dest[:count] = bytes(src[:count])
        dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append the string in ``src`` to the string in ``dest`` so that the
    result, NUL included, takes at most ``size`` bytes.

    Returns the length of the string it tried to build; a result of
    ``size`` or more means the result was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _terminated_length(src)
    nul = bytes(dest[:size]).find(0)
    if nul == -1:
        if size > len(dest):
            raise ValueError("destination string is not terminated")
        dest_len = size
    else:
        dest_len = nul
    if size <= dest_len:
        return size + src_len
    count = min(src_len, size - 1 - dest_len)
    _check_count(dest, dest_len + count + 1, "destination")
    dest[dest_len : dest_len + count] = bytes(src[:count])
    dest[dest_len + count] = 0
    return dest_len + src_len