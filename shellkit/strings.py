"""String and byte-buffer helpers: splitting, trimming, searching, comparing.

Search functions return an index into their argument, or ``None`` when
nothing is found. Comparison functions return the difference between the
first pair of characters (or bytes) that differ, and 0 when they agree.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _single_char(char: str, name: str = "char") -> str:
    if not isinstance(char, str):
        raise TypeError(f"{name} must be a one-character string, not {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"{name} must be a single character, got {len(char)} characters")
    return char


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "sep")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of ``text`` gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or ``None``.

    Searching for ``"\\0"`` finds the end of the string when ``text`` holds
    no NUL itself, so the result is then ``len(text)``.
    """
    _single_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    if char == _NUL:
        return len(text)
    return None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or ``None``.

    Searching for ``"\\0"`` always gives ``len(text)``, the end of the string.
    """
    _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty ``needle`` is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def _compare(a: str, b: str) -> int:
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    The end of a string compares as a NUL character, lower than any other.
    """
    _non_negative(n, "n")
    return _compare(a[:n], b[:n])


def strcmp(a: str, b: str) -> int:
    """Compare ``a`` and ``b`` character by character."""
    return _compare(a, b)


def _prefix(data: BytesLike, n: int, name: str) -> bytes:
    _non_negative(n, "n")
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"n ({n}) is larger than {name} ({len(view)} bytes)")
    return view[:n]


def memchr(data: BytesLike, byte: int, n: int) -> Optional[int]:
    """Index of the first ``byte`` among the first ``n`` bytes of ``data``.

    Only the low eight bits of ``byte`` are used.
    """
    index = _prefix(data, n, "data").find(byte & 0xFF)
    return index if index >= 0 else None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values."""
    left = _prefix(a, n, "a")
    right = _prefix(b, n, "b")
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))