"""Substring search that can skip quoted regions, and splitting into words."""

from __future__ import annotations

import re
from typing import List, Optional

_WORD = re.compile(r"[^ \t]+")


def _terminated(text: str) -> str:
    """Text up to its first NUL character."""
    return text.split("\0", 1)[0]


def _search(text: str, find: str, length: int, skip_quoted: bool) -> Optional[int]:
    if not find:
        raise ValueError("cannot search for an empty string")
    if len(find) > length:
        return None
    text = _terminated(text)
    inside = False
    for pos in range(len(text) - len(find) + 1):
        if skip_quoted and text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(find, pos):
            return pos
    return None


def str_str(text: str, find: str, length: int) -> Optional[int]:
    """Return the position of ``find`` in ``text``, or None.

    ``length`` is the room left in the buffer: a ``find`` longer than it is
    never found.
    """
    return _search(text, find, length, skip_quoted=False)


def str_str_quoted(text: str, find: str, length: int) -> Optional[int]:
    """Like :func:`str_str`, but ignore matches inside double quotes.

    An opening quote starts a quoted region; the closing quote itself lies
    outside it.
    """
    return _search(text, find, length, skip_quoted=True)


def to_wordtab(text: str) -> List[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return _WORD.findall(_terminated(text))