"""A small printf with the conversions ``%c %s %p %d %i %u %x %X %%``.

Flags, widths and precisions are not supported. A ``%`` followed by a
character that is not a known conversion produces nothing and consumes
no argument. A lone ``%`` at the end of the format is dropped.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

from shellkit.numconv import itoa

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_POINTER = "(nil)"
# Length reported for a missing string, although nothing is written.
_NULL_STRING_COUNT = 6


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion '%{spec}'") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)} characters")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _PTR_MASK
    if address == 0:
        return _NULL_POINTER
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> tuple[str, int]:
    """Return the text for one conversion and the count it contributes."""
    if spec == "%":
        return "%", 1
    if spec == "c":
        text = _char(_next_arg(args, spec))
    elif spec == "s":
        value = _next_arg(args, spec)
        if value is None:
            return "", _NULL_STRING_COUNT
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, not {type(value).__name__}")
        text = value
    elif spec == "p":
        text = _pointer(_next_arg(args, spec))
    elif spec in ("d", "i"):
        text = itoa(operator.index(_next_arg(args, spec)))
    elif spec == "u":
        text = str(operator.index(_next_arg(args, spec)) & _UINT_MASK)
    elif spec == "x":
        text = f"{operator.index(_next_arg(args, spec)) & _UINT_MASK:x}"
    elif spec == "X":
        text = f"{operator.index(_next_arg(args, spec)) & _UINT_MASK:X}"
    else:
        return "", 0
    return text, len(text)


def _format(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    pieces: list[str] = []
    count = 0
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            count += 1
            continue
        spec = next(chars, None)
        if spec is None:
            break
        text, produced = _convert(spec, remaining)
        pieces.append(text)
        count += produced
    return "".join(pieces), count


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    return _format(fmt, args)[0]


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters reported as printed; a ``None``
    passed to ``%s`` writes nothing but counts as six.
    """
    text, count = _format(fmt, args)
    (sys.stdout if file is None else file).write(text)
    return count


def put_str(text: Optional[str], file: Optional[TextIO] = None) -> int:
    """Write ``text`` and return its length; ``None`` writes nothing and gives 6."""
    if text is None:
        return _NULL_STRING_COUNT
    (sys.stdout if file is None else file).write(text)
    return len(text)


def put_endl(text: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    (sys.stdout if file is None else file).write(text + "\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    (sys.stdout if file is None else file).write(itoa(n))