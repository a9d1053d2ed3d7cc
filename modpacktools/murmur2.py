"""MurmurHash2 and the whitespace-stripping CurseForge fingerprint."""

from __future__ import annotations

_M = 0x5BD1E995
_R = 24
_MASK = 0xFFFFFFFF
_WHITESPACE = frozenset((9, 10, 13, 32))


def murmurhash2(data: bytes, seed: int) -> int:
    """Return the 32-bit MurmurHash2 of ``data``."""
    data = bytes(data)
    length = len(data)
    h = (seed ^ length) & _MASK
    full = length - length % 4
    for offset in range(0, full, 4):
        k = int.from_bytes(data[offset:offset + 4], "little")
        k = (k * _M) & _MASK
        k ^= k >> _R
        k = (k * _M) & _MASK
        h = (h * _M) & _MASK
        h ^= k
    tail = data[full:]
    if tail:
        if len(tail) >= 3:
            h ^= tail[2] << 16
        if len(tail) >= 2:
            h ^= tail[1] << 8
        h ^= tail[0]
        h = (h * _M) & _MASK
    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15
    return h


def normalize(data: bytes) -> bytes:
    """Drop tab, newline, carriage return and space bytes."""
    return bytes(b for b in bytes(data) if b not in _WHITESPACE)


def fingerprint(data: bytes) -> int:
    """Return the CurseForge fingerprint of a file's contents."""
    return murmurhash2(normalize(data), 1)


class Murmur2CF:
    """Hash object producing CurseForge fingerprints.

    The hash is seeded with the input length, so input is buffered until
    the digest is requested.
    """

    name = "murmur2"
    digest_size = 4
    block_size = 4

    def __init__(self, data: bytes = b"") -> None:
        self._buf = bytearray()
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        self._buf.extend(normalize(data))

    def intdigest(self) -> int:
        return murmurhash2(self._buf, 1)

    def digest(self) -> bytes:
        return self.intdigest().to_bytes(4, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def reset(self) -> None:
        self._buf.clear()