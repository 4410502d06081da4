import os

import pytest

from fdlines.multi import MultiLineReader


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(content: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        os.close(fd)


def _drain(reader, fd):
    lines = []
    while (line := reader.read_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("buffer_size", [1, 5, 42, 4096])
def test_single_fd_lines(open_fd, buffer_size):
    reader = MultiLineReader(buffer_size)
    fd = open_fd(b"one\ntwo\nthree")
    assert _drain(reader, fd) == [b"one\n", b"two\n", b"three"]


def test_interleaved_descriptors_keep_separate_state(open_fd):
    reader = MultiLineReader(3)
    fd_a = open_fd(b"a1\na2\na3\n")
    fd_b = open_fd(b"b1\nb2\n")
    assert reader.read_line(fd_a) == b"a1\n"
    assert reader.read_line(fd_b) == b"b1\n"
    assert reader.read_line(fd_a) == b"a2\n"
    assert reader.read_line(fd_b) == b"b2\n"
    assert reader.read_line(fd_b) is None
    assert reader.read_line(fd_a) == b"a3\n"
    assert reader.read_line(fd_a) is None


def test_state_tracked_while_data_is_pending(open_fd):
    reader = MultiLineReader(100)
    fd = open_fd(b"x\ny\n")
    assert reader.read_line(fd) == b"x\n"
    assert fd in reader
    assert len(reader) == 1
    assert reader.read_line(fd) == b"y\n"
    assert fd not in reader
    assert len(reader) == 0


def test_exhausted_descriptor_is_forgotten(open_fd):
    reader = MultiLineReader()
    fd = open_fd(b"")
    assert reader.read_line(fd) is None
    assert fd not in reader


def test_discard_drops_pending_data(open_fd):
    reader = MultiLineReader(100)
    fd = open_fd(b"keep\ndropped\n")
    assert reader.read_line(fd) == b"keep\n"
    reader.discard(fd)
    assert fd not in reader
    assert reader.read_line(fd) is None


def test_discard_unknown_fd_is_harmless():
    reader = MultiLineReader()
    reader.discard(12345)
    assert len(reader) == 0


def test_lines_join_back_to_content(open_fd):
    content = b"".join(b"row %d\n" % n for n in range(150)) + b"tail"
    reader = MultiLineReader(9)
    assert b"".join(_drain(reader, open_fd(content))) == content


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        MultiLineReader().read_line(-1)


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_non_positive_buffer_rejected(buffer_size):
    with pytest.raises(ValueError):
        MultiLineReader(buffer_size)


def test_read_error_forgets_descriptor():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    reader = MultiLineReader()
    with pytest.raises(OSError):
        reader.read_line(read_end)
    assert read_end not in reader