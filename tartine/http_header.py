"""The HTTP header base class, header identity hashing and custom headers."""

from __future__ import annotations

import abc
import enum
import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Type, TypeVar, Union

_FNV_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1
_SIGN_EXTEND = 0xFFFF_FFFF_FFFF_FF00


def fnv1a_64(text: Union[str, bytes]) -> int:
    """The 64-bit FNV-1a hash of ``text``, bytes taken as signed chars."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _FNV_BASIS
    for byte in data:
        char = byte if byte < 0x80 else byte | _SIGN_EXTEND
        value = ((value ^ char) * _FNV_PRIME) & _MASK64
    return value


class Encoding(enum.Enum):
    """Content and transfer codings."""

    GZIP = "gzip"
    COMPRESS = "compress"
    DEFLATE = "deflate"
    IDENTITY = "identity"
    CHUNKED = "chunked"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Header(abc.ABC):
    """A typed HTTP header; subclasses set ``NAME``."""

    NAME: ClassVar[Optional[str]] = None
    HASH: ClassVar[Optional[int]] = None

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("NAME") is not None:
            cls.HASH = fnv1a_64(cls.NAME)

    @property
    def name(self) -> str:
        if self.NAME is None:
            raise TypeError(f"{type(self).__name__} has no header name")
        return self.NAME

    @abc.abstractmethod
    def parse(self, data: str) -> None:
        """Read the header's value from its text."""

    @abc.abstractmethod
    def write(self) -> str:
        """The header's value as text."""

    def hash(self) -> int:
        """The FNV-1a hash of the header name, identifying the header type."""
        if self.HASH is None:
            raise TypeError(f"{type(self).__name__} has no header name")
        return self.HASH

    def __str__(self) -> str:
        return self.write()


H = TypeVar("H", bound=Header)


def header_cast(header: Header, header_type: Type[H]) -> Optional[H]:
    """``header`` if it is of the header type ``header_type``, else None."""
    if not (isinstance(header_type, type) and issubclass(header_type, Header)):
        raise TypeError(f"{header_type!r} is not a header type")
    if header_type.HASH is None:
        raise TypeError(f"{header_type.__name__} has no header name")
    return header if header.hash() == header_type.HASH else None  # type: ignore[return-value]


def custom_header(header_name: str) -> Type[Header]:
    """Create a header class named ``header_name`` holding a plain text value."""

    class _CustomHeader(Header):
        NAME = header_name

        def __init__(self, value: str = "") -> None:
            self.value = value

        def parse(self, data: str) -> None:
            self.value = data

        def write(self) -> str:
            return self.value

        @property
        def val(self) -> str:
            return self.value

    _CustomHeader.__name__ = header_name
    _CustomHeader.__qualname__ = header_name
    return _CustomHeader


@dataclass(frozen=True)
class Raw:
    """A header kept as its name and unparsed value."""

    name: str = ""
    value: str = ""


_STOI = re.compile(r"\s*([+-]?[0-9]+)")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT32_MASK = (1 << 32) - 1


def _to_uint32(text: str) -> int:
    match = _STOI.match(text)
    if not match:
        raise ValueError(f"Invalid integer: {text!r}")
    number = int(match.group(1))
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError(f"Integer out of range: {text!r}")
    return number & _UINT32_MASK


class XProtocolVersion(Header):
    """A ``major.minor`` protocol version header."""

    NAME = "X-Protocol-Version"

    def __init__(self, major: int = 0, minor: int = 0) -> None:
        for part in (major, minor):
            if not 0 <= part <= _UINT32_MASK:
                raise ValueError("Version numbers must fit in 32 unsigned bits")
        self.major = major
        self.minor = minor

    def parse(self, data: str) -> None:
        major, sep, minor = data.partition(".")
        self.major = _to_uint32(major)
        if sep and minor:
            self.minor = _to_uint32(minor)

    def write(self) -> str:
        return f"{self.major}.{self.minor}"