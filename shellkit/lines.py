"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of the stream may
    have none. A read that returns fewer than ``buffer_size`` units is taken
    as the end of the data for the current line, so the text gathered so
    far is returned even without a newline. Reading again later resumes
    from the stream, which suits pipes and terminals.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        """Gather data until it holds a newline or a read comes up short."""
        chunk = self._pending
        self._pending = None
        end_of_data = False
        while not end_of_data and (chunk is None or _find_newline(chunk) < 0):
            data = self._stream.read(self._buffer_size)
            if data is None:
                data = chunk[:0] if chunk is not None else b""
            if len(data) < self._buffer_size:
                end_of_data = True
            chunk = data if chunk is None else chunk + data
        return chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when no data is left.

        An error raised by the stream is passed on, and any data held back
        from earlier reads is discarded.
        """
        try:
            chunk = self._fill()
        except OSError:
            self._pending = None
            raise
        if not chunk:
            return None
        index = _find_newline(chunk)
        if index < 0:
            return chunk
        rest = chunk[index + 1:]
        self._pending = rest if rest else None
        return chunk[:index + 1]

    def __iter__(self) -> "LineReader[AnyStr]":
        return self

    def __next__(self) -> AnyStr:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line


def _find_newline(chunk: Any) -> int:
    """Index of the first newline in a str or bytes chunk, or -1."""
    if isinstance(chunk, str):
        return chunk.find("\n")
    return chunk.find(b"\n")