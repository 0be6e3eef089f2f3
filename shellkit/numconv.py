"""Conversions between decimal text and integers."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ULONG_MAX = 2**64 - 1
_SPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is taken,
    then digits are read until the first non-digit. Text with no digits
    gives 0. The result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer as decimal text."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def ulitoa(n: int) -> str:
    """Format a 64-bit unsigned integer as decimal text."""
    if n < 0:
        raise ValueError(f"{n} is negative")
    if n > _ULONG_MAX:
        raise OverflowError(f"{n} does not fit in a 64-bit unsigned integer")
    return str(n)