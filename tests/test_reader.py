import io

import pytest

from minish.reader import LineReader


def test_reads_lines_with_newlines():
    reader = LineReader(io.StringIO("a\nb\nc"))
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b\n"
    assert reader.read_line() == "c"
    assert reader.read_line() is None


def test_empty_stream_returns_none():
    assert LineReader(io.StringIO("")).read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 50, 1000])
def test_join_round_trip(size):
    data = "first line\n\nthird one is longer than a few bytes\nlast"
    lines = list(LineReader(io.StringIO(data), size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_line_longer_than_buffer():
    data = "x" * 200 + "\n"
    assert list(LineReader(io.StringIO(data), 4)) == [data]


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"one\ntwo\n"), 3)
    assert list(reader) == [b"one\n", b"two\n"]


def test_stays_exhausted():
    reader = LineReader(io.StringIO("only\n"))
    assert list(reader) == ["only\n"]
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


@pytest.mark.parametrize("size", [0, -5])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)