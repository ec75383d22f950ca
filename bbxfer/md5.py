"""MD5 message digest computed in pure Python."""

from __future__ import annotations

import struct

__all__ = ["MD5", "md5_digest"]

_MASK = 0xFFFFFFFF

_INIT_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4

_BLOCK = 64


def _rotl(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _transform(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, (const, shift) in enumerate(zip(_CONSTANTS, _SHIFTS)):
        if i < 16:
            f = d ^ (b & (c ^ d))
            g = i
        elif i < 32:
            f = c ^ (d & (b ^ c))
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK))
            g = (7 * i) % 16
        f = (f + a + const + words[g]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotl(f, shift)) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


def _finish(state: tuple[int, int, int, int], pending: bytes, count: int) -> bytes:
    bit_length = (count * 8) & 0xFFFFFFFFFFFFFFFF
    pad_len = (55 - len(pending)) % _BLOCK
    tail = pending + b"\x80" + b"\x00" * pad_len + struct.pack("<Q", bit_length)
    for start in range(0, len(tail), _BLOCK):
        state = _transform(state, tail[start:start + _BLOCK])
    return struct.pack("<4I", *state)


class MD5:
    """Incremental MD5 checksum with a 16-byte digest."""

    name = "md5"
    digest_size = 16

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a new accumulation."""
        self._state = _INIT_STATE
        self._pending = b""
        self._count = 0

    def update(self, data) -> None:
        """Add bytes to the running digest."""
        chunk = bytes(memoryview(data))
        self._count += len(chunk)
        buffer = self._pending + chunk
        full = len(buffer) - len(buffer) % _BLOCK
        state = self._state
        for start in range(0, full, _BLOCK):
            state = _transform(state, buffer[start:start + _BLOCK])
        self._state = state
        self._pending = buffer[full:]

    def current(self) -> bytes:
        """Return the digest of what has been added so far, leaving the state intact."""
        return _finish(self._state, self._pending, self._count)

    def final(self) -> bytes:
        """Return the digest and start a new accumulation."""
        digest = self.current()
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


def md5_digest(data) -> bytes:
    """Return the MD5 digest of data."""
    return MD5().compute(data)