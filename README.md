# shellkit

Building blocks for a small interactive shell: ASCII character classes,
C-style number and string helpers, a minimal `printf`, a buffered line
reader, quote checking and removal, and the logic that recognises builtin
commands in a stream of typed tokens.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `shellkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`
and `to_lower`. Each takes a one-character string or an integer code.
Only ASCII ranges count; `to_upper` and `to_lower` return the argument
unchanged unless it is an ASCII letter of the other case, and give back
the same kind (string or integer) they were given.

### `shellkit.numconv`

- `atoi(text)` skips leading whitespace, takes one optional `+` or `-`,
  reads digits up to the first non-digit and wraps the result like a
  32-bit signed integer. Text without digits gives 0.
- `itoa(n)` formats a 32-bit signed integer; values outside that range
  raise `OverflowError`.
- `ulitoa(n)` formats a 64-bit unsigned integer; negative values raise
  `ValueError`, values that are too large raise `OverflowError`.

### `shellkit.strings`

- `split(text, sep)` splits on one character and drops empty pieces.
- `strtrim(text, charset)` strips the characters of `charset` from both ends.
- `substr(text, start, length)` returns up to `length` characters from `start`.
- `strchr`, `strrchr`, `strnstr` and `memchr` return an index or `None`.
  Searching for `"\0"` with `strchr`/`strrchr` finds the end of the string.
- `strcmp`, `strncmp` and `memcmp` return the difference of the first
  differing characters or bytes, or 0.
- `strmapi(text, func)` joins `func(index, char)` over the text.

Negative lengths and starts raise `ValueError`.

### `shellkit.printf`

- `render(fmt, *args)` formats `%c %s %p %d %i %u %x %X %%`. No flags,
  widths or precisions; an unknown conversion produces nothing.
- `printf(fmt, *args, file=None)` writes the result (to standard output
  by default) and returns the character count; a `None` given to `%s`
  writes nothing but counts as 6.
- `put_str`, `put_endl` and `put_nbr` write a string, a string with a
  newline, and a 32-bit integer.

### `shellkit.lines`

`LineReader(stream, buffer_size=42)` reads a text or binary stream
`buffer_size` units at a time. `read_line()` returns the next line with its
newline, or `None` when nothing is left; the reader is also an iterator. A
short read ends the current line even without a newline, and a later call
resumes from the stream.

### `shellkit.quotes`

- `check_quotes(text)` raises `UnclosedQuoteError` (a `ValueError`) when a
  `'` or `"` is left open.
- `inside_quotes(text, index)` returns the quote enclosing that position,
  or `None`; delimiting quotes are not inside their own section.
- `remove_quotes(text)` drops the quotes that delimit quoted sections.

### `shellkit.commands`

- `TokenType` (`CMD`, `ARG`, `PIPE`, `INFILE`, `OUTFILE`, `OUTFAPP`,
  `LIMITER`), the frozen dataclass `Token(type, text)`, and `Builtin`
  (`CD`, `ECHO`, `ENV`, `EXIT`, `EXPORT`, `PWD`, `UNSET`, each with a
  `command` name).
- `find_builtin(tokens, start=0)` returns the `Builtin` named by the
  command that begins at `start` and ends at the next pipe, or `None`.
- `command_argv(tokens, start=0)` returns the command name followed by
  its `ARG` tokens, or an empty list when there is no `CMD` token.
- `unquote_tokens(tokens)` removes delimiting quotes from word tokens.
- `is_directory(path)` and `cd_error_message(path, reason)` help a `cd`
  implementation check its target and word its error.

## Example

```python
from shellkit.quotes import check_quotes, remove_quotes
from shellkit.printf import render

check_quotes("echo 'hello world'")
print(remove_quotes("'it''s'\"x\""))                      # its x
print(render("%s has %d items (%x)", "list", 42, 255))   # list has 42 items (ff)
```

## What it does not do

shellkit is a library, not a shell. It has no command to run, no prompt,
no tokenizer that turns a command line into `Token`s, no variable
expansion, no redirections or pipes, and it never starts programs. It
recognises builtins and builds their argument lists, but does not carry
out `cd`, `echo`, `env`, `exit`, `export`, `pwd` or `unset`.