"""Byte transfer over a raw file descriptor, with transfer accounting."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator, Sequence

__all__ = ["FdIO"]

_log = logging.getLogger(__name__)


def _log_keys(key: str | None, action: str) -> tuple[str, str] | None:
    if key is None:
        return None
    return f"START_{key}_{action}", f"END_{key}_{action}"


class FdIO:
    """Reads and writes a file descriptor while counting bytes and time spent."""

    def __init__(self, fd: int = -1) -> None:
        self._fd = fd
        self._read_keys: tuple[str, str] | None = None
        self._write_keys: tuple[str, str] | None = None
        self._bytes = 0
        self._seconds = 0.0
        self.position = 0

    @property
    def fd(self) -> int:
        """The descriptor in use, or -1 once closed."""
        return self._fd

    @property
    def read_keys(self) -> tuple[str, str] | None:
        """Start and end event names logged around reads."""
        return self._read_keys

    @property
    def write_keys(self) -> tuple[str, str] | None:
        """Start and end event names logged around writes."""
        return self._write_keys

    def __enter__(self) -> "FdIO":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the descriptor; closing twice does nothing."""
        if self._fd > 0:
            old, self._fd = self._fd, -1
            os.close(old)

    def log(self, read_key: str | None, write_key: str | None) -> None:
        """Set the event keys logged around reads and writes (None turns logging off)."""
        self._read_keys = _log_keys(read_key, "READ")
        self._write_keys = _log_keys(write_key, "WRITE")

    def _emit(self, keys: tuple[str, str] | None, end: bool, size: int) -> None:
        if keys is not None:
            _log.debug(
                "%s BBCP.FD=%d BBCP.SK=%d BBCP.SZ=%d",
                keys[1] if end else keys[0], self._fd, self.position, size,
            )

    @contextmanager
    def _timed(self) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self._seconds += time.perf_counter() - start

    def _account(self, count: int) -> None:
        if count > 0:
            self._bytes += count
            self.position += count

    def read(self, size: int) -> bytes:
        """Read until size bytes arrive or end of file; raises OSError on failure."""
        chunks: list[bytes] = []
        remaining = size
        got = 0
        error: OSError | None = None
        with self._timed():
            while True:
                self._emit(self._read_keys, False, remaining)
                try:
                    chunk = os.read(self._fd, remaining)
                except InterruptedError:
                    self._emit(self._read_keys, True, 0)
                    continue
                except OSError as exc:
                    self._emit(self._read_keys, True, 0)
                    error = exc
                    break
                self._emit(self._read_keys, True, len(chunk))
                if not chunk:
                    break
                chunks.append(chunk)
                remaining -= len(chunk)
                got += len(chunk)
        self._account(got)
        if error is not None:
            raise error
        return b"".join(chunks)

    def readv(self, buffers: Sequence) -> int:
        """Scatter one read into writable buffers and return the byte count."""
        total = sum(memoryview(b).nbytes for b in buffers)
        with self._timed():
            self._emit(self._read_keys, False, total)
            try:
                while True:
                    try:
                        count = os.readv(self._fd, buffers)
                        break
                    except InterruptedError:
                        continue
            except OSError:
                self._emit(self._read_keys, True, 0)
                raise
            self._emit(self._read_keys, True, count)
        self._account(count)
        return count

    def seek(self, offset: int) -> None:
        """Move to an absolute offset."""
        os.lseek(self._fd, offset, os.SEEK_SET)
        self.position = offset

    def write(self, data, offset: int | None = None) -> int:
        """Write all of data, at offset when given; returns the bytes written."""
        view = memoryview(data).cast("B")
        written = 0
        error: OSError | None = None
        if offset is not None:
            self.position = offset
        with self._timed():
            while written < len(view):
                remaining = len(view) - written
                self._emit(self._write_keys, False, remaining)
                try:
                    if offset is None:
                        count = os.write(self._fd, view[written:])
                    else:
                        count = os.pwrite(self._fd, view[written:], offset + written)
                except InterruptedError:
                    self._emit(self._write_keys, True, 0)
                    continue
                except OSError as exc:
                    self._emit(self._write_keys, True, 0)
                    error = exc
                    break
                self._emit(self._write_keys, True, count)
                written += count
        self._account(written)
        if error is not None:
            raise error
        return written

    def writev(self, buffers: Sequence) -> int:
        """Gather buffers into one write and return the byte count."""
        total = sum(memoryview(b).nbytes for b in buffers)
        with self._timed():
            self._emit(self._write_keys, False, total)
            try:
                while True:
                    try:
                        count = os.writev(self._fd, buffers)
                        break
                    except InterruptedError:
                        continue
            except OSError:
                self._emit(self._write_keys, True, 0)
                raise
            self._emit(self._write_keys, True, count)
        self._account(count)
        return count

    def io_stats(self) -> tuple[int, float]:
        """Return the bytes transferred and the seconds spent transferring them."""
        return self._bytes, self._seconds