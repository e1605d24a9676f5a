"""Integer parsing, formatting and writing with 32-bit signed semantics."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_LEADING_DIGITS = re.compile(r"[0-9]*")


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (value + 2**31) % 2**32 - 2**31


def _digit_value(text: str) -> int:
    digits = _LEADING_DIGITS.match(text).group()
    return int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped. A '+' is skipped unless a '-' follows it;
    a '-' counts as a sign only when a digit follows it. Parsing stops at the
    first non-digit, and the result wraps like a 32-bit int.
    """
    s = text.lstrip(_WHITESPACE)
    if s.startswith("+") and not s.startswith("+-"):
        s = s[1:]
    sign = 1
    if len(s) >= 2 and s[0] == "-" and s[1] in _DIGITS:
        sign = -1
        s = s[1:]
    return _wrap32(sign * _digit_value(s))


def atol(text: str) -> int:
    """Parse a leading decimal integer with an optional single sign."""
    s = text.lstrip(_WHITESPACE)
    negative = False
    if s.startswith("+"):
        s = s[1:]
    elif s.startswith("-"):
        negative = True
        s = s[1:]
    value = _wrap32(_digit_value(s))
    return _wrap32(-value) if negative else value


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(int(n))


def power(num: int, exponent: int) -> int:
    """Raise ``num`` to a whole ``exponent``; negative exponents give 0."""
    if exponent < 0:
        return 0
    return _wrap32(num**exponent)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string to ``stream``."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline to ``stream``."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal to ``stream``."""
    _target(stream).write(itoa(n))