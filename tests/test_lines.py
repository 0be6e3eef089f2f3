import io

import pytest

from shellkit.lines import LineReader


class ScriptedStream:
    """A stream whose reads return preset results, one per call."""

    def __init__(self, results):
        self._results = list(results)

    def read(self, size):
        if not self._results:
            return self._results_empty()
        item = self._results.pop(0)
        if isinstance(item, Exception):
            raise item
        assert len(item) <= size
        return item

    @staticmethod
    def _results_empty():
        return ""


def test_text_lines_keep_newlines():
    text = "first line\nsecond\nlast without newline"
    reader = LineReader(io.StringIO(text), 4)
    lines = list(reader)
    assert lines == ["first line\n", "second\n", "last without newline"]


def test_binary_lines():
    data = b"alpha\nbeta\n"
    lines = list(LineReader(io.BytesIO(data)))
    assert lines == [b"alpha\n", b"beta\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_join_round_trip(size):
    text = "one\n\ntwo\nthree\nfour and more text\n\n"
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line.endswith("\n") for line in lines)


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_none_after_last_line():
    reader = LineReader(io.BytesIO(b"x\n"), 8)
    assert reader.read_line() == b"x\n"
    assert reader.read_line() is None


def test_short_read_ends_the_line():
    reader = LineReader(ScriptedStream(["ab", "c\n"]), 4)
    assert reader.read_line() == "ab"
    assert reader.read_line() == "c\n"
    assert reader.read_line() is None


def test_full_reads_continue_until_newline():
    reader = LineReader(ScriptedStream(["abcd", "ef\ng"]), 4)
    assert reader.read_line() == "abcdef\n"
    assert reader.read_line() == "g"


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), size)


def test_read_error_discards_pending_data():
    reader = LineReader(ScriptedStream(["a\nb", OSError("boom"), "c\n"]), 3)
    assert reader.read_line() == "a\n"
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() == "c\n"


def test_next_raises_stop_iteration():
    reader = LineReader(io.StringIO("only\n"))
    assert next(reader) == "only\n"
    with pytest.raises(StopIteration):
        next(reader)