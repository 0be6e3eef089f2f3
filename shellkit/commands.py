"""Token streams for one command line: finding builtins and building argv.

A command line is a sequence of typed tokens. A pipe token separates
commands. Within one command the first ``CMD`` token names the program,
and the ``ARG`` tokens that follow it are its arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, Iterator, Optional, Sequence, Union

from shellkit.quotes import remove_quotes

SHELL_NAME = "shellkit"
NOT_A_DIRECTORY = ": Not a directory\n"


class TokenType(Enum):
    """The role a token plays in a command line."""

    CMD = auto()
    ARG = auto()
    PIPE = auto()
    INFILE = auto()
    OUTFILE = auto()
    OUTFAPP = auto()
    LIMITER = auto()


# Token types whose text is a word subject to quote removal.
_WORD_TYPES = frozenset(
    {
        TokenType.INFILE,
        TokenType.OUTFILE,
        TokenType.OUTFAPP,
        TokenType.LIMITER,
        TokenType.CMD,
        TokenType.ARG,
    }
)


@dataclass(frozen=True)
class Token:
    """One piece of a command line with its role."""

    type: TokenType
    text: str


class Builtin(Enum):
    """Commands the shell runs itself rather than as a separate program."""

    CD = 0
    ECHO = 1
    ENV = 2
    EXIT = 3
    EXPORT = 4
    PWD = 5
    UNSET = 6

    @property
    def command(self) -> str:
        """The name typed to run this builtin."""
        return self.name.lower()


_BUILTINS_BY_NAME = {builtin.command: builtin for builtin in Builtin}


def _segment(tokens: Sequence[Token], start: int) -> Iterator[Token]:
    """Yield the tokens from ``start`` up to, not including, the next pipe."""
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    for token in tokens[start:]:
        if token.type is TokenType.PIPE:
            return
        yield token


def find_builtin(tokens: Sequence[Token], start: int = 0) -> Optional[Builtin]:
    """Return the builtin named by the command starting at ``start``, if any."""
    for token in _segment(tokens, start):
        if token.type is TokenType.CMD:
            builtin = _BUILTINS_BY_NAME.get(token.text)
            if builtin is not None:
                return builtin
    return None


def command_argv(tokens: Sequence[Token], start: int = 0) -> list[str]:
    """Return the command name and its arguments for the command at ``start``.

    Tokens before the first ``CMD`` are skipped; after it only ``ARG``
    tokens are kept. A command with no ``CMD`` token gives an empty list.
    """
    segment = _segment(tokens, start)
    for token in segment:
        if token.type is TokenType.CMD:
            return [token.text] + [t.text for t in segment if t.type is TokenType.ARG]
    return []


def unquote_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens with delimiting quotes removed from every word token."""
    return [
        replace(token, text=remove_quotes(token.text)) if token.type in _WORD_TYPES else token
        for token in tokens
    ]


def is_directory(path: Union[str, os.PathLike, None]) -> bool:
    """True if ``path`` exists and is a directory; missing paths give False."""
    if path is None:
        return False
    return os.path.isdir(path)


def cd_error_message(path: str, reason: str) -> str:
    """Build the message ``cd`` reports for ``path``; ``reason`` follows it verbatim."""
    return f"{SHELL_NAME}: cd: {path}{reason}"