"""Transfer endpoint that discards writes and reads back zeros."""

from __future__ import annotations

from typing import Sequence

from .fdio import FdIO

__all__ = ["NullIO"]


class NullIO(FdIO):
    """Accounts for bytes as if they were moved, without touching any descriptor."""

    def __init__(self, fd: int = -1) -> None:
        super().__init__(fd)

    def close(self) -> None:
        """Nothing to release; the descriptor is left as it is."""

    def seek(self, offset: int) -> None:
        """Positioning has no meaning here and is ignored."""

    def read(self, size: int) -> bytes:
        """Return size zero bytes."""
        with self._timed():
            self._bytes += size
            self.position = self._bytes
            data = bytes(size)
        return data

    def readv(self, buffers: Sequence) -> int:
        """Zero-fill every buffer and return their combined length."""
        total = 0
        for buffer in buffers:
            view = memoryview(buffer).cast("B")
            view[:] = bytes(len(view))
            total += len(view)
        with self._timed():
            self._bytes += total
            self.position = self._bytes
        return total

    def write(self, data, offset: int | None = None) -> int:
        """Discard data and return its length; the offset is ignored."""
        count = memoryview(data).nbytes
        with self._timed():
            self._bytes += count
        return count

    def writev(self, buffers: Sequence) -> int:
        """Discard every buffer and return their combined length."""
        with self._timed():
            total = sum(memoryview(b).nbytes for b in buffers)
            self._bytes += total
        return total