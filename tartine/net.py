"""Ports, IP addresses and socket addresses."""

from __future__ import annotations

import ipaddress
import re
import socket
from typing import Optional, Tuple, Union

from tartine.config import HTTP_STANDARD_PORT

_PORT_TEXT = re.compile(r"\s*[+-]?[0-9]+")
_DOTTED = re.compile(r"[0-9.]+")
_RESERVED_BELOW = 1024

_IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class NetError(ValueError):
    """An address or a port is invalid or cannot be resolved."""


def _parse_port(text: str) -> int:
    if not _PORT_TEXT.fullmatch(text):
        raise NetError(f"Invalid port: {text!r}")
    return int(text)


class Port:
    """A TCP port number in [0, 65535]."""

    __slots__ = ("_value",)

    MIN = 0
    MAX = 65535

    def __init__(self, value: Union[int, str, "Port"] = 0) -> None:
        if isinstance(value, Port):
            number = value._value
        elif isinstance(value, str):
            number = _parse_port(value)
        elif isinstance(value, int):
            number = int(value)
        else:
            raise TypeError(f"Cannot make a port from {value!r}")
        if not self.MIN <= number <= self.MAX:
            raise NetError(f"Invalid port: {value!r}")
        self._value = number

    def is_reserved(self) -> bool:
        """Whether the port is below 1024."""
        return self._value < _RESERVED_BELOW

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Port({self._value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Port):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (Port, int)):
            return self._value < int(other)
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, (Port, int)):
            return self._value > int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


class IP:
    """An IPv4 or IPv6 address."""

    __slots__ = ("_addr",)

    def __init__(self, address: Union[None, str, "IP", _IPAddress] = None) -> None:
        if address is None:
            addr: _IPAddress = ipaddress.IPv4Address(0)
        elif isinstance(address, IP):
            addr = address._addr
        elif isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            addr = address
        elif isinstance(address, str):
            try:
                addr = ipaddress.ip_address(address)
            except ValueError as exc:
                raise NetError(f"Invalid IP address: {address!r}") from exc
        else:
            raise TypeError(f"Cannot make an IP address from {address!r}")
        self._addr = addr

    @classmethod
    def v4(cls, a: int, b: int, c: int, d: int) -> "IP":
        """An IPv4 address from its four octets."""
        octets = (a, b, c, d)
        if not all(0 <= octet <= 0xFF for octet in octets):
            raise NetError("IPv4 octets must be in [0, 255]")
        return cls(ipaddress.IPv4Address(bytes(octets)))

    @classmethod
    def v6(cls, *args: int) -> "IP":
        """An IPv6 address from its eight 16-bit groups."""
        if len(args) != 8:
            raise NetError("An IPv6 address needs eight groups")
        if not all(0 <= group <= 0xFFFF for group in args):
            raise NetError("IPv6 groups must be in [0, 65535]")
        packed = b"".join(group.to_bytes(2, "big") for group in args)
        return cls(ipaddress.IPv6Address(packed))

    @classmethod
    def any(cls, ipv6: bool = False) -> "IP":
        """The wildcard address of the family."""
        return cls("::" if ipv6 else "0.0.0.0")

    @classmethod
    def loopback(cls, ipv6: bool = False) -> "IP":
        """The loopback address of the family."""
        return cls("::1" if ipv6 else "127.0.0.1")

    @staticmethod
    def supported() -> bool:
        """Whether this system can open IPv6 sockets."""
        if not socket.has_ipv6:
            return False
        try:
            with socket.socket(socket.AF_INET6, socket.SOCK_STREAM):
                return True
        except OSError:
            return False

    def family(self) -> int:
        return socket.AF_INET6 if self._addr.version == 6 else socket.AF_INET

    def __str__(self) -> str:
        return str(self._addr)

    def __repr__(self) -> str:
        return f"IP({str(self._addr)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IP):
            return NotImplemented
        return self._addr == other._addr

    def __hash__(self) -> int:
        return hash(self._addr)


class AddressParser:
    """Split ``host[:port]`` or ``[ipv6][:port]`` into its raw parts."""

    def __init__(self, data: str) -> None:
        self._has_colon = False
        self._port = ""
        start = data.find("[")
        end = data.find("]")
        if start != -1 and end != -1 and start < end:
            self._family = socket.AF_INET6
            self._host = data[start:end + 1]
            rest = data[end + 1:]
            if rest:
                if not rest.startswith(":"):
                    raise NetError(f"Invalid address: {data!r}")
                self._has_colon = True
                self._port = rest[1:]
                if not self._port:
                    raise NetError("Invalid port")
        else:
            self._family = socket.AF_INET
            host, sep, port = data.partition(":")
            self._host = host
            if sep:
                self._has_colon = True
                self._port = port
                if not port:
                    raise NetError("Invalid port")

    def raw_host(self) -> str:
        return self._host

    def raw_port(self) -> str:
        return self._port

    def has_colon(self) -> bool:
        return self._has_colon

    def family(self) -> int:
        return self._family


def _lookup(host: str, family: int) -> IP:
    try:
        literal: Optional[_IPAddress] = ipaddress.ip_address(host)
    except ValueError:
        literal = None
    if literal is not None:
        if (literal.version == 6) != (family == socket.AF_INET6):
            raise NetError(f"Address family mismatch: {host!r}")
        return IP(literal)
    if (
        not host
        or (family == socket.AF_INET6 and ":" in host)
        or (family == socket.AF_INET and _DOTTED.fullmatch(host))
    ):
        raise NetError(f"Invalid address: {host!r}")
    try:
        infos = socket.getaddrinfo(host, None, family, socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise NetError(str(exc)) from exc
    if not infos:
        raise NetError(f"Could not resolve {host!r}")
    return IP(infos[0][4][0])


class Address:
    """An IP address together with a port."""

    __slots__ = ("_ip", "_port")

    def __init__(
        self,
        host: Union[None, str, IP] = None,
        port: Union[None, int, str, Port] = None,
    ) -> None:
        if host is None or isinstance(host, IP):
            self._ip = IP(host)
            self._port = Port(port if port is not None else 0)
        else:
            text = host if port is None else f"{host}:{Port(port)}"
            self._ip, self._port = self._resolve(text)

    @classmethod
    def parse(cls, text: str) -> "Address":
        """Build an address from ``host[:port]``; the port defaults to 80."""
        return cls(text)

    @staticmethod
    def _resolve(text: str) -> Tuple[IP, Port]:
        parser = AddressParser(text)
        raw = parser.raw_host()
        if parser.family() == socket.AF_INET6:
            host = raw[1:-1]
        else:
            host = "0.0.0.0" if raw == "*" else raw
        raw_port = parser.raw_port()
        port = Port(raw_port) if raw_port else Port(HTTP_STANDARD_PORT)
        return _lookup(host, parser.family()), port

    def host(self) -> str:
        return str(self._ip)

    def port(self) -> Port:
        return self._port

    def family(self) -> int:
        return self._ip.family()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._ip == other._ip and self._port == other._port

    def __hash__(self) -> int:
        return hash((self._ip, self._port))

    def __repr__(self) -> str:
        return f"Address({self.host()!r}, {int(self._port)})"