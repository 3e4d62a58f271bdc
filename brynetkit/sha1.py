"""Incremental SHA-1 message digest with textual hash reports."""

from __future__ import annotations

import enum
import struct
from os import PathLike
from typing import Union

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_FILE_CHUNK = 32 * 20 * 820
_BLOCK = struct.Struct(">16I")


class ReportType(enum.IntEnum):
    """Textual layouts produced by :meth:`SHA1.report_hash`."""

    HEX = 0
    DIGIT = 1
    HEX_SHORT = 2


def _rol(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK32


def _transform(state: list[int], block: bytes) -> None:
    w = list(_BLOCK.unpack(block))
    for t in range(16, 80):
        w.append(_rol(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))

    a, b, c, d, e = state
    for t, word in enumerate(w):
        if t < 20:
            f = ((b & (c ^ d)) ^ d)
            k = 0x5A827999
        elif t < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif t < 60:
            f = ((b | c) & d) | (b & c)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        temp = (_rol(a, 5) + f + e + k + word) & _MASK32
        e, d, c, b, a = d, c, _rol(b, 30), a, temp

    for index, value in enumerate((a, b, c, d, e)):
        state[index] = (state[index] + value) & _MASK32


class SHA1:
    """SHA-1 hasher fed with :meth:`update` and finished with :meth:`final`."""

    def __init__(self) -> None:
        self._state: list[int] = []
        self._count = 0
        self._buffer = bytearray(64)
        self._digest: bytes | None = None
        self.reset()

    def reset(self) -> None:
        """Start a fresh hash computation."""
        self._state = list(_INITIAL_STATE)
        self._count = 0

    def update(self, data: Union[bytes, bytearray, memoryview]) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        length = len(data)
        j = (self._count >> 3) & 0x3F
        self._count = (self._count + (length << 3)) & _MASK64

        i = 0
        if j + length > 63:
            i = 64 - j
            self._buffer[j:64] = data[:i]
            _transform(self._state, bytes(self._buffer))
            while i + 63 < length:
                _transform(self._state, data[i:i + 64])
                i += 64
            j = 0

        rest = length - i
        if rest:
            self._buffer[j:j + rest] = data[i:]

    def final(self) -> None:
        """Finish the computation and store the digest."""
        final_count = self._count.to_bytes(8, "big")
        self.update(b"\x80")
        while (self._count & 504) != 448:
            self.update(b"\x00")
        self.update(final_count)

        self._digest = b"".join(value.to_bytes(4, "big") for value in self._state)

        # Wipe the working state.
        self._buffer = bytearray(64)
        self._state = [0] * 5
        self._count = 0
        _transform(self._state, bytes(self._buffer))

    def hash_file(self, path: Union[str, PathLike]) -> None:
        """Feed the contents of a file into the hash; OSError on failure."""
        with open(path, "rb") as stream:
            while chunk := stream.read(_FILE_CHUNK):
                self.update(chunk)

    def digest(self) -> bytes:
        """The 20-byte digest; RuntimeError if :meth:`final` has not run."""
        if self._digest is None:
            raise RuntimeError("hash has not been finalized")
        return self._digest

    def report_hash(self, report_type: ReportType = ReportType.HEX) -> str:
        """The digest as text in the given layout."""
        kind = ReportType(report_type)
        digest = self.digest()
        if kind is ReportType.HEX:
            return " ".join(f"{byte:02X}" for byte in digest)
        if kind is ReportType.HEX_SHORT:
            return "".join(f"{byte:02X}" for byte in digest)
        return " ".join(str(byte) for byte in digest)