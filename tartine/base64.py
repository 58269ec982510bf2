"""Base 64 encoding and decoding of raw bytes."""

from __future__ import annotations

from typing import Union

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE_TABLE = {char: index for index, char in enumerate(_ALPHABET)}
_PAD = "="


class Base64Decoder:
    """Decode a base 64 string to raw bytes."""

    def __init__(self, encoded: str) -> None:
        self.encoded = encoded
        self.decoded = b""

    def calculate_decoded_size(self) -> int:
        """Number of bytes that decoding the string produces."""
        length = len(self.encoded)
        if length % 4:
            raise ValueError("Base 64 input length must be a multiple of four")
        if length == 0:
            return 0
        padding = len(self.encoded) - len(self.encoded.rstrip(_PAD))
        if padding > 2:
            raise ValueError("Too much base 64 padding")
        return length // 4 * 3 - padding

    @staticmethod
    def _decode_character(char: str) -> int:
        try:
            return _DECODE_TABLE[char]
        except KeyError:
            raise ValueError(f"Invalid base 64 character: {char!r}") from None

    def decode(self) -> bytes:
        """Decode the string, keep the result and return it."""
        size = self.calculate_decoded_size()
        body = self.encoded.rstrip(_PAD)
        out = bytearray()
        for offset in range(0, len(body), 4):
            chunk = body[offset:offset + 4]
            bits = 0
            for char in chunk:
                bits = (bits << 6) | self._decode_character(char)
            bits <<= 6 * (4 - len(chunk))
            out.extend(bits.to_bytes(3, "big"))
        self.decoded = bytes(out[:size])
        return self.decoded


class Base64Encoder:
    """Encode raw bytes as a base 64 string."""

    def __init__(self, data: Union[bytes, bytearray]) -> None:
        self.data = bytes(data)
        self.encoded = ""

    @staticmethod
    def calculate_encoded_size(decoded_size: int) -> int:
        """Length of the base 64 string for ``decoded_size`` raw bytes."""
        return 4 * ((decoded_size + 2) // 3)

    def encode(self) -> str:
        """Encode the data, keep the result and return it."""
        parts = []
        for offset in range(0, len(self.data), 3):
            chunk = self.data[offset:offset + 3]
            bits = int.from_bytes(chunk + bytes(3 - len(chunk)), "big")
            chars = [_ALPHABET[(bits >> shift) & 0x3F] for shift in (18, 12, 6, 0)]
            kept = len(chunk) + 1
            parts.append("".join(chars[:kept]) + _PAD * (4 - kept))
        self.encoded = "".join(parts)
        return self.encoded

    @staticmethod
    def encode_string(text: str) -> str:
        """Encode the UTF-8 bytes of ``text``."""
        return Base64Encoder(text.encode("utf-8")).encode()