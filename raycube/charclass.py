"""Character classification and case conversion limited to the ASCII range.

Every function accepts either a one-character string or an integer code.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(map(ord, "\t\n\v\f\r "))


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as a string or a code."""
    if isinstance(c, bool):
        raise TypeError(f"expected a single character or an integer code, got {c!r}")
    if isinstance(c, int):
        return c
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    raise TypeError(f"expected a single character or an integer code, got {c!r}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def is_digit_string(s: str) -> bool:
    """True when every character of ``s`` is an ASCII digit (so also for "")."""
    return all(is_digit(ch) for ch in s)


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES