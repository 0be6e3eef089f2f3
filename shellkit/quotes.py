"""Quote checking and removal for shell command text.

Single and double quotes may each enclose the other. A quote character
that opens or closes a quoted section is syntax; one lying inside the
other kind of quotes is ordinary text.
"""

from __future__ import annotations

from typing import Iterator, Optional

SINGLE = "'"
DOUBLE = '"'
_QUOTES = (SINGLE, DOUBLE)


class UnclosedQuoteError(ValueError):
    """Raised when command text ends inside a quoted section."""

    def __init__(self, quote: str) -> None:
        kind = "single" if quote == SINGLE else "double"
        super().__init__(f"unexpected end of input while looking for matching {kind} quote {quote}")
        self.quote = quote


def check_quotes(text: Optional[str]) -> None:
    """Raise :class:`UnclosedQuoteError` if a quote in ``text`` is left open."""
    if not text:
        return
    open_quote: Optional[str] = None
    for ch in text:
        if ch in _QUOTES:
            if open_quote is None:
                open_quote = ch
            elif open_quote == ch:
                open_quote = None
    if open_quote is not None:
        raise UnclosedQuoteError(open_quote)


def _scan(text: str) -> Iterator[tuple[str, Optional[str]]]:
    """Yield each character with the quote enclosing it, if any.

    A quote character that itself opens or closes a section is reported
    as enclosed by nothing.
    """
    first: Optional[str] = None
    single_count = 0
    double_count = 0
    for ch in text:
        if ch == SINGLE:
            if first is None:
                first = SINGLE
            single_count += 1
            if first == SINGLE and single_count % 2 == 0:
                first = None
                double_count = 0
        elif ch == DOUBLE:
            if first is None:
                first = DOUBLE
            double_count += 1
            if first == DOUBLE and double_count % 2 == 0:
                first = None
                single_count = 0
        yield ch, (None if first == ch else first)


def inside_quotes(text: str, index: int) -> Optional[str]:
    """Return the quote enclosing ``text[index]``, or ``None`` if there is none.

    The quote characters that delimit a section are not inside it.
    """
    if not 0 <= index < len(text):
        raise IndexError(f"index {index} is out of range for text of length {len(text)}")
    for position, (_, enclosing) in enumerate(_scan(text)):
        if position == index:
            return enclosing
    raise AssertionError("unreachable")


def remove_quotes(text: str) -> str:
    """Drop the quote characters that delimit quoted sections of ``text``."""
    return "".join(
        ch for ch, enclosing in _scan(text) if ch not in _QUOTES or enclosing is not None
    )