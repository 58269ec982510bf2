"""HTTP cookies (RFC 6265) and a jar to hold them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from tartine.http_defs import FullDate

_INTEGER = re.compile(r"[+-]?\d+")


class CookieError(RuntimeError):
    """A cookie could not be parsed or found."""


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"Invalid integer: {text!r}")
    return int(text)


@dataclass
class Cookie:
    """A cookie with its attributes."""

    name: str
    value: str
    path: Optional[str] = None
    domain: Optional[str] = None
    expires: Optional[FullDate] = None
    max_age: Optional[int] = None
    secure: bool = False
    http_only: bool = False
    ext: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_string(cls, text: str) -> "Cookie":
        """Parse a ``Set-Cookie`` style value such as ``a=b; Path=/; Secure``."""
        first, *attributes = text.split(";")
        name, sep, value = first.partition("=")
        if not sep:
            raise CookieError(f"Invalid cookie, expected name=value: {first!r}")
        cookie = cls(name.strip(), value.strip())
        for attribute in attributes:
            attribute = attribute.strip()
            if not attribute:
                continue
            key, sep, val = attribute.partition("=")
            key, val = key.strip(), val.strip()
            lower = key.lower()
            if lower == "secure":
                cookie.secure = True
            elif lower == "httponly":
                cookie.http_only = True
            elif lower in ("path", "domain", "max-age", "expires"):
                if not sep:
                    raise CookieError(f"Cookie attribute {key!r} needs a value")
                if lower == "path":
                    cookie.path = val
                elif lower == "domain":
                    cookie.domain = val
                elif lower == "max-age":
                    cookie.max_age = _parse_int(val)
                else:
                    cookie.expires = FullDate.from_string(val)
            else:
                cookie.ext[key] = val
        return cookie

    def __str__(self) -> str:
        parts = [f"{self.name}={self.value}"]
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self.domain is not None:
            parts.append(f"Domain={self.domain}")
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age}")
        if self.expires is not None:
            parts.append(f"Expires={self.expires.write()}")
        if self.secure:
            parts.append("Secure")
        if self.http_only:
            parts.append("HttpOnly")
        parts.extend(f"{key}={val}" for key, val in sorted(self.ext.items()))
        return "; ".join(parts)


class CookieJar:
    """Cookies grouped by name, then by value."""

    def __init__(self) -> None:
        self._cookies: Dict[str, Dict[str, Cookie]] = {}

    def add(self, cookie: Cookie) -> None:
        self._cookies.setdefault(cookie.name, {})[cookie.value] = cookie

    def remove_all_cookies(self) -> None:
        self._cookies.clear()

    def add_from_raw(self, text: str) -> None:
        """Add every ``name=value`` pair of a ``Cookie`` header value."""
        for pair in text.split(";"):
            pair = pair.strip()
            if not pair:
                continue
            name, sep, value = pair.partition("=")
            if not sep:
                raise CookieError(f"Invalid cookie, expected name=value: {pair!r}")
            self.add(Cookie(name.strip(), value.strip()))

    def get(self, name: str) -> Cookie:
        """The first cookie stored under ``name``."""
        values = self._cookies.get(name)
        if not values:
            raise CookieError(f"Could not find requested cookie: {name}")
        return next(iter(values.values()))

    def has(self, name: str) -> bool:
        return bool(self._cookies.get(name))

    def __iter__(self) -> Iterator[Cookie]:
        for values in self._cookies.values():
            yield from values.values()

    def __len__(self) -> int:
        return sum(len(values) for values in self._cookies.values())