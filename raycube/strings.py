"""String helpers: length, search, duplication, slicing, joining, trimming, comparison."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Normalise a character given as a string or an integer code (taken as a byte)."""
    if isinstance(c, bool):
        raise TypeError(f"expected a single character or an integer code, got {c!r}")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise TypeError(f"expected a single character or an integer code, got {c!r}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0" and ch not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of ``s``; None stays None."""
    if s is None:
        return None
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError(f"substr: negative start or length ({start}, {length})")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strtrim(s: Optional[str], chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``s``.

    None gives an empty string.
    """
    if s is None:
        return ""
    if not chars:
        return s
    return s.strip(chars)


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at 0; no match gives None.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strnstr_echo(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Like :func:`strnstr`, but on a match return the index just past a
    needle-length prefix of ``haystack`` (that is, ``len(needle)``).

    An empty needle gives 0; no match gives None.
    """
    if not needle:
        return 0
    if strnstr(haystack, needle, limit) is None:
        return None
    return len(needle)


def strncmp(a: Optional[str], b: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters; return the code difference of the first
    unequal pair, or 0. A NUL character ends both strings."""
    if a is None and b is None:
        return 0
    if a is None or b is None:
        raise TypeError("strncmp: cannot compare a string with None")
    pairs = zip_longest(map(ord, a[:n]), map(ord, b[:n]), fillvalue=0)
    for x, y in pairs:
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to the text of ``dest`` up to its first NUL."""
    return dest.split("\0", 1)[0] + src.split("\0", 1)[0]