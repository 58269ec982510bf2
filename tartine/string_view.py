"""A read-only view over a byte sequence, hashed with MurmurHash3."""

from __future__ import annotations

from typing import Optional, Union

_MASK = 0xFFFFFFFF


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _MASK


def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK
    h ^= h >> 16
    return h


def murmur3_32(data: bytes, seed: int = 0) -> int:
    """The 32-bit MurmurHash3 of ``data``."""
    c1, c2 = 0xCC9E2D51, 0x1B873593
    h1 = seed & _MASK
    length = len(data)
    whole = length - length % 4
    for offset in range(0, whole, 4):
        k1 = int.from_bytes(data[offset:offset + 4], "little")
        k1 = (k1 * c1) & _MASK
        k1 = _rotl32(k1, 15)
        k1 = (k1 * c2) & _MASK
        h1 ^= k1
        h1 = _rotl32(h1, 13)
        h1 = (h1 * 5 + 0xE6546B64) & _MASK
    tail = data[whole:]
    if tail:
        k1 = int.from_bytes(tail, "little")
        k1 = (k1 * c1) & _MASK
        k1 = _rotl32(k1, 15)
        k1 = (k1 * c2) & _MASK
        h1 ^= k1
    h1 ^= length & _MASK
    return _fmix32(h1)


_Needle = Union[bytes, bytearray, str, int, "StringView"]


class StringView:
    """A window ``data[start:start + length]`` that shares the underlying bytes."""

    __slots__ = ("_data", "_start", "_len")

    def __init__(
        self,
        data: Union[bytes, bytearray, str] = b"",
        start: int = 0,
        length: Optional[int] = None,
    ) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)
        if not 0 <= start <= len(data):
            raise IndexError("Out of range.")
        available = len(data) - start
        if length is None:
            length = available
        if not 0 <= length <= available:
            raise IndexError("Out of range.")
        self._data = data
        self._start = start
        self._len = length

    @staticmethod
    def _needle(needle: _Needle) -> bytes:
        if isinstance(needle, StringView):
            return bytes(needle)
        if isinstance(needle, str):
            return needle.encode("utf-8")
        if isinstance(needle, int):
            return bytes([needle])
        return bytes(needle)

    def substr(self, pos: int, count: Optional[int] = None) -> "StringView":
        """The view of at most ``count`` bytes starting at ``pos``."""
        if pos < 0 or pos > self._len:
            raise IndexError("Out of range.")
        remaining = self._len - pos
        count = remaining if count is None else min(count, remaining)
        return StringView(self._data, self._start + pos, count)

    def find(self, needle: _Needle, pos: int = 0) -> int:
        """Index of the first occurrence at or after ``pos``, or -1."""
        target = self._needle(needle)
        if pos < 0 or pos > self._len or self._len - pos < len(target):
            return -1
        found = self._data.find(target, self._start + pos, self._start + self._len)
        return -1 if found < 0 else found - self._start

    def rfind(self, needle: _Needle, pos: Optional[int] = None) -> int:
        """Index of the last occurrence starting at or before ``pos``, or -1."""
        target = self._needle(needle)
        if len(target) > self._len:
            return -1
        last_start = self._len - len(target)
        if pos is not None:
            last_start = min(last_start, pos)
        if last_start < 0:
            return -1
        end = self._start + last_start + len(target)
        found = self._data.rfind(target, self._start, end)
        return -1 if found < 0 else found - self._start

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, index):
        return bytes(self)[index]

    def __bytes__(self) -> bytes:
        return self._data[self._start:self._start + self._len]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringView):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray)):
            return bytes(self) == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return murmur3_32(bytes(self))

    def __repr__(self) -> str:
        return f"StringView({bytes(self)!r})"