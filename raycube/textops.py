"""Splitting, per-character mapping and size-bounded string copying."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on every item of ``chars`` in place.

    A returned character replaces the item; None leaves it unchanged.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (terminator included).

    Returns the resulting text and the full length of ``src``. With a size of
    0 the destination is left untouched.
    """
    _check_size(size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have needed; when ``dest`` already fills the buffer that length is
    ``size + len(src)``.
    """
    _check_size(size)
    if len(dest) >= size:
        total = size + len(src)
    else:
        total = len(dest) + len(src)
    room = max(0, size - len(dest) - 1)
    return dest + src[:room], total