"""MD5 checksum backed by the hashlib implementation."""

from __future__ import annotations

import hashlib

__all__ = ["LibMD5"]


class LibMD5:
    """Incremental MD5 checksum with a 16-byte digest, computed by hashlib."""

    name = "md5sl"
    digest_size = 16

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a new accumulation."""
        self._ctx = hashlib.md5()

    def update(self, data) -> None:
        """Add bytes to the running digest."""
        self._ctx.update(memoryview(data))

    def current(self) -> bytes:
        """Return the digest of what has been added so far, leaving the state intact."""
        return self._ctx.copy().digest()

    def final(self) -> bytes:
        """Return the digest and start a new accumulation."""
        digest = self._ctx.digest()
        self.reset()
        return digest

    def compute(self, data) -> bytes:
        """Return the digest of data alone."""
        self.reset()
        self.update(data)
        return self.final()

    def check(self, data, expected) -> bool:
        """Return True when the digest of data equals expected."""
        return self.compute(data) == bytes(expected)