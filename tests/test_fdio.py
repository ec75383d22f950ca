import logging
import os

import pytest

from bbxfer.fdio import FdIO


@pytest.fixture
def pipe():
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def datafile(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"0123456789")
    fd = os.open(path, os.O_RDWR)
    yield fd, path
    try:
        os.close(fd)
    except OSError:
        pass


def test_read_full_size(datafile):
    fd, _ = datafile
    io = FdIO(fd)
    assert io.read(4) == b"0123"
    assert io.position == 4
    assert io.io_stats()[0] == 4


def test_read_stops_at_eof(datafile):
    fd, _ = datafile
    io = FdIO(fd)
    assert io.read(100) == b"0123456789"
    assert io.read(5) == b""
    assert io.io_stats()[0] == 10


def test_seek_then_read(datafile):
    fd, _ = datafile
    io = FdIO(fd)
    io.seek(6)
    assert io.position == 6
    assert io.read(10) == b"6789"
    assert io.position == 10


def test_write_then_read_pipe(pipe):
    r, w = pipe
    writer, reader = FdIO(w), FdIO(r)
    assert writer.write(b"hello world") == 11
    writer.close()
    assert reader.read(64) == b"hello world"
    assert writer.io_stats()[0] == reader.io_stats()[0] == 11


def test_positional_write(datafile):
    fd, path = datafile
    io = FdIO(fd)
    assert io.write(b"ab", 3) == 2
    assert io.position == 5
    assert path.read_bytes() == b"012ab56789"


def test_writev_and_readv_round_trip(pipe):
    r, w = pipe
    writer, reader = FdIO(w), FdIO(r)
    assert writer.writev([b"abc", b"defg"]) == 7
    first, second = bytearray(3), bytearray(4)
    assert reader.readv([first, second]) == 7
    assert bytes(first) + bytes(second) == b"abcdefg"
    assert reader.position == 7


def test_stats_time_non_negative(pipe):
    r, w = pipe
    io = FdIO(w)
    io.write(b"xyz")
    count, seconds = io.io_stats()
    assert count == 3
    assert seconds >= 0.0


def test_close_is_idempotent(pipe):
    r, _ = pipe
    io = FdIO(r)
    io.close()
    assert io.fd == -1
    io.close()
    with pytest.raises(OSError):
        os.fstat(r)


def test_context_manager_closes(pipe):
    r, _ = pipe
    with FdIO(r) as io:
        assert io.fd == r
    assert io.fd == -1


def test_read_after_close_raises(pipe):
    r, _ = pipe
    io = FdIO(r)
    io.close()
    with pytest.raises(OSError):
        io.read(1)


def test_write_to_read_end_raises(pipe):
    r, _ = pipe
    io = FdIO(r)
    with pytest.raises(OSError):
        io.write(b"x")
    assert io.io_stats()[0] == 0


def test_log_keys():
    io = FdIO()
    io.log("NET", None)
    assert io.read_keys == ("START_NET_READ", "END_NET_READ")
    assert io.write_keys is None
    io.log(None, "NET")
    assert io.read_keys is None
    assert io.write_keys == ("START_NET_WRITE", "END_NET_WRITE")


def test_logging_emits_events(pipe, caplog):
    r, w = pipe
    io = FdIO(w)
    io.log(None, "NET")
    with caplog.at_level(logging.DEBUG, logger="bbxfer.fdio"):
        io.write(b"abc")
    messages = [rec.getMessage() for rec in caplog.records]
    assert any(m.startswith("START_NET_WRITE") for m in messages)
    assert any(m.startswith("END_NET_WRITE") and "BBCP.SZ=3" in m for m in messages)


def test_no_logging_without_keys(pipe, caplog):
    r, w = pipe
    io = FdIO(w)
    with caplog.at_level(logging.DEBUG, logger="bbxfer.fdio"):
        io.write(b"abc")
    assert caplog.records == []