import io

import pytest

from solong.line_reader import LineReader, read_lines


class _RecordingStream:
    def __init__(self, text):
        self._inner = io.StringIO(text)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._inner.read(size)


class _BrokenStream:
    def read(self, size):
        raise OSError("read failed")


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 20, 1000])
def test_lines_match_splitlines(buffer_size):
    text = "first line\nsecond\n\nlast without newline"
    lines = list(read_lines(io.StringIO(text), buffer_size))
    assert lines == text.splitlines(keepends=True)
    assert "".join(lines) == text


def test_every_line_but_last_ends_with_newline():
    text = "a\nbb\nccc"
    lines = list(LineReader(io.StringIO(text), 2))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


def test_binary_stream():
    data = b"alpha\nbeta\n"
    lines = list(read_lines(io.BytesIO(data), 4))
    assert lines == data.splitlines(keepends=True)
    assert b"".join(lines) == data


def test_empty_stream_returns_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("only\n"), 3)
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_line_longer_than_buffer():
    long_line = "x" * 97 + "\n"
    reader = LineReader(io.StringIO(long_line + "tail"), 5)
    assert reader.read_line() == long_line
    assert reader.read_line() == "tail"


def test_reads_only_as_far_as_needed():
    stream = io.StringIO("ab\ncd\n")
    reader = LineReader(stream, 1)
    assert reader.read_line() == "ab\n"
    assert stream.tell() == len("ab\n")


def test_default_buffer_size():
    stream = _RecordingStream("some text that is long enough\n")
    LineReader(stream).read_line()
    assert stream.sizes
    assert set(stream.sizes) == {20}


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), size)


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_BrokenStream()).read_line()