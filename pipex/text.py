"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices (or None when nothing is found), and
bounded copies return both the resulting text and the length the routine
would have tried to build, which is how truncation is detected.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

Char = Union[int, str]

NUL = "\0"


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(s: str, sep: Char) -> list[str]:
    """Split s on the separator character, dropping empty fields."""
    return [part for part in s.split(_char(sep)) if part]


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Looking for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Looking for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def striteri(buf: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call func(index, item) for every item of buf, in order.

    When func returns something other than None, it replaces the item in place.
    """
    for index, item in enumerate(buf):
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the length of src; a length of size or more
    means the copy was truncated.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have had. When dst already fills the buffer it is left unchanged and the
    reported length is size plus the length of src.
    """
    _non_negative("size", size)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the difference of the first differing character codes, a missing
    character counting as 0, or 0 when the compared parts are equal.
    """
    _non_negative("n", n)
    a = s1[:n]
    b = s2[:n]
    for pos in range(max(len(a), len(b))):
        x = ord(a[pos]) if pos < len(a) else 0
        y = ord(b[pos]) if pos < len(b) else 0
        if x != y:
            return x - y
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly in big[:length].

    An empty needle is found at index 0; no match gives None.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Strip every character in charset from both ends of s."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end yields an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]