"""Byte-buffer operations on bytes and bytearray objects.

Lengths are checked against the buffers: asking for more bytes than a buffer
holds raises IndexError, a negative length raises ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check(buf: Bytes, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("lengths and offsets must not be negative")
    if offset + n > len(buf):
        raise IndexError(
            f"range {offset}..{offset + n} exceeds buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c in the first n bytes, or None."""
    _check(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first n bytes as unsigned values.

    Returns the difference of the first differing pair, or 0 when equal.
    """
    _check(a, n)
    _check(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest; return dest."""
    _check(dest, n)
    _check(src, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest, overlap allowed."""
    _check(buf, n, dest)
    _check(buf, n, src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf