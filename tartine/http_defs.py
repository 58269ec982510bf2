"""HTTP methods, status codes, versions, cache directives and dates."""

from __future__ import annotations

import enum
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union


class Method(enum.Enum):
    """HTTP request methods."""

    OPTIONS = "OPTIONS"
    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    def __str__(self) -> str:
        return self.value


class Code(enum.IntEnum):
    """HTTP status codes, each carrying its reason phrase."""

    def __new__(cls, value: int, reason: str) -> "Code":
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.reason = reason
        return obj

    def __str__(self) -> str:
        return str(self._value_)

    CONTINUE = 100, "Continue"
    SWITCHING_PROTOCOLS = 101, "Switching Protocols"
    PROCESSING = 102, "Processing"
    EARLY_HINTS = 103, "Early Hints"
    OK = 200, "OK"
    CREATED = 201, "Created"
    ACCEPTED = 202, "Accepted"
    NON_AUTHORITATIVE_INFORMATION = 203, "Non-Authoritative Information"
    NO_CONTENT = 204, "No Content"
    RESET_CONTENT = 205, "Reset Content"
    PARTIAL_CONTENT = 206, "Partial Content"
    MULTI_STATUS = 207, "Multi-Status"
    ALREADY_REPORTED = 208, "Already Reported"
    IM_USED = 226, "IM Used"
    MULTIPLE_CHOICES = 300, "Multiple Choices"
    MOVED_PERMANENTLY = 301, "Moved Permanently"
    FOUND = 302, "Found"
    SEE_OTHER = 303, "See Other"
    NOT_MODIFIED = 304, "Not Modified"
    USE_PROXY = 305, "Use Proxy"
    TEMPORARY_REDIRECT = 307, "Temporary Redirect"
    PERMANENT_REDIRECT = 308, "Permanent Redirect"
    BAD_REQUEST = 400, "Bad Request"
    UNAUTHORIZED = 401, "Unauthorized"
    PAYMENT_REQUIRED = 402, "Payment Required"
    FORBIDDEN = 403, "Forbidden"
    NOT_FOUND = 404, "Not Found"
    METHOD_NOT_ALLOWED = 405, "Method Not Allowed"
    NOT_ACCEPTABLE = 406, "Not Acceptable"
    PROXY_AUTHENTICATION_REQUIRED = 407, "Proxy Authentication Required"
    REQUEST_TIMEOUT = 408, "Request Timeout"
    CONFLICT = 409, "Conflict"
    GONE = 410, "Gone"
    LENGTH_REQUIRED = 411, "Length Required"
    PRECONDITION_FAILED = 412, "Precondition Failed"
    REQUEST_ENTITY_TOO_LARGE = 413, "Request Entity Too Large"
    REQUEST_URI_TOO_LONG = 414, "Request-URI Too Long"
    UNSUPPORTED_MEDIA_TYPE = 415, "Unsupported Media Type"
    REQUESTED_RANGE_NOT_SATISFIABLE = 416, "Requested Range Not Satisfiable"
    EXPECTATION_FAILED = 417, "Expectation Failed"
    I_M_A_TEAPOT = 418, "I'm a teapot"
    MISDIRECTED_REQUEST = 421, "Misdirected Request"
    UNPROCESSABLE_ENTITY = 422, "Unprocessable Entity"
    LOCKED = 423, "Locked"
    FAILED_DEPENDENCY = 424, "Failed Dependency"
    UPGRADE_REQUIRED = 426, "Upgrade Required"
    PRECONDITION_REQUIRED = 428, "Precondition Required"
    TOO_MANY_REQUESTS = 429, "Too Many Requests"
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431, "Request Header Fields Too Large"
    CONNECTION_CLOSED_WITHOUT_RESPONSE = 444, "Connection Closed Without Response"
    UNAVAILABLE_FOR_LEGAL_REASONS = 451, "Unavailable For Legal Reasons"
    CLIENT_CLOSED_REQUEST = 499, "Client Closed Request"
    INTERNAL_SERVER_ERROR = 500, "Internal Server Error"
    NOT_IMPLEMENTED = 501, "Not Implemented"
    BAD_GATEWAY = 502, "Bad Gateway"
    SERVICE_UNAVAILABLE = 503, "Service Unavailable"
    GATEWAY_TIMEOUT = 504, "Gateway Timeout"
    HTTP_VERSION_NOT_SUPPORTED = 505, "HTTP Version Not Supported"
    VARIANT_ALSO_NEGOTIATES = 506, "Variant Also Negotiates"
    INSUFFICIENT_STORAGE = 507, "Insufficient Storage"
    LOOP_DETECTED = 508, "Loop Detected"
    NOT_EXTENDED = 510, "Not Extended"
    NETWORK_AUTHENTICATION_REQUIRED = 511, "Network Authentication Required"
    NETWORK_CONNECT_TIMEOUT_ERROR = 599, "Network Connect Timeout Error"


class Charset(enum.Enum):
    """Character sets (RFC 2978)."""

    US_ASCII = "us-ascii"
    ISO_8859_1 = "iso-8859-1"
    ISO_8859_2 = "iso-8859-2"
    ISO_8859_3 = "iso-8859-3"
    ISO_8859_4 = "iso-8859-4"
    ISO_8859_5 = "iso-8859-5"
    ISO_8859_6 = "iso-8859-6"
    ISO_8859_7 = "iso-8859-7"
    ISO_8859_8 = "iso-8859-8"
    ISO_8859_9 = "iso-8859-9"
    ISO_8859_10 = "iso-8859-10"
    SHIFT_JIS = "shift_jis"
    UTF7 = "utf-7"
    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF16_BE = "utf-16be"
    UTF16_LE = "utf-16le"
    UTF32 = "utf-32"
    UTF32_BE = "utf-32be"
    UTF32_LE = "utf-32le"
    UNICODE_1_1 = "unicode-1-1"


class Version(enum.Enum):
    """HTTP protocol versions."""

    HTTP10 = "HTTP/1.0"
    HTTP11 = "HTTP/1.1"

    def __str__(self) -> str:
        return self.value


class ConnectionControl(enum.Enum):
    CLOSE = "close"
    KEEP_ALIVE = "keep-alive"
    EXT = "ext"


class Expectation(enum.Enum):
    CONTINUE = "100-continue"
    EXT = "ext"


class Directive(enum.Enum):
    """Cache-Control directives."""

    NO_CACHE = "no-cache"
    NO_STORE = "no-store"
    MAX_AGE = "max-age"
    MAX_STALE = "max-stale"
    MIN_FRESH = "min-fresh"
    NO_TRANSFORM = "no-transform"
    ONLY_IF_CACHED = "only-if-cached"
    PUBLIC = "public"
    PRIVATE = "private"
    MUST_REVALIDATE = "must-revalidate"
    PROXY_REVALIDATE = "proxy-revalidate"
    S_MAX_AGE = "s-maxage"
    EXT = "ext"


_DELTA_DIRECTIVES = frozenset(
    {Directive.MAX_AGE, Directive.S_MAX_AGE, Directive.MAX_STALE, Directive.MIN_FRESH}
)


class CacheDirective:
    """A Cache-Control directive, with a delta for the time-based ones."""

    __slots__ = ("directive", "_seconds")

    def __init__(
        self,
        directive: Directive = Directive.NO_CACHE,
        delta: Union[int, timedelta, None] = None,
    ) -> None:
        self.directive = Directive(directive)
        seconds = 0
        if delta is not None:
            seconds = int(delta.total_seconds()) if isinstance(delta, timedelta) else int(delta)
            if seconds < 0:
                raise ValueError("Cache directive delta must not be negative")
        self._seconds = seconds if self.directive in _DELTA_DIRECTIVES else 0

    def delta(self) -> timedelta:
        """The delta of a time-based directive."""
        if self.directive not in _DELTA_DIRECTIVES:
            raise ValueError("Invalid operation on cache directive")
        return timedelta(seconds=self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheDirective):
            return NotImplemented
        return self.directive == other.directive and self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash((self.directive, self._seconds))

    def __repr__(self) -> str:
        if self.directive in _DELTA_DIRECTIVES:
            return f"CacheDirective({self.directive.name}, {self._seconds})"
        return f"CacheDirective({self.directive.name})"


class DateFormat(enum.Enum):
    RFC1123 = "rfc1123"
    RFC850 = "rfc850"
    ASCTIME = "asctime"


_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_FULL_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DAY_RE = "|".join(_FULL_DAYS + _DAYS)
_MONTH_RE = "|".join(_MONTHS)
_TIME_RE = r"(\d{2}):(\d{2}):(\d{2})"

_RFC1123 = re.compile(
    rf"^(?:{_DAY_RE}), (\d{{1,2}}) ({_MONTH_RE}) (\d{{4}}) {_TIME_RE} GMT$"
)
_RFC850 = re.compile(
    rf"^(?:{_DAY_RE}), (\d{{1,2}})-({_MONTH_RE})-(\d{{2}}) {_TIME_RE} GMT$"
)
_ASCTIME = re.compile(
    rf"^(?:{_DAY_RE}) ({_MONTH_RE}) +(\d{{1,2}}) {_TIME_RE} (\d{{4}})$"
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class FullDate:
    """An HTTP full date, held as an aware UTC datetime."""

    __slots__ = ("date",)

    def __init__(self, date: Optional[datetime] = None) -> None:
        if date is None:
            date = _EPOCH
        elif date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        else:
            date = date.astimezone(timezone.utc)
        self.date = date

    def write(self, date_format: DateFormat = DateFormat.RFC1123) -> str:
        """Format the date in one of the HTTP date formats."""
        d = self.date
        clock = f"{d.hour:02d}:{d.minute:02d}:{d.second:02d}"
        month = _MONTHS[d.month - 1]
        if date_format is DateFormat.RFC1123:
            return f"{_DAYS[d.weekday()]}, {d.day:02d} {month} {d.year:04d} {clock} GMT"
        if date_format is DateFormat.RFC850:
            return f"{_FULL_DAYS[d.weekday()]}, {d.day:02d}-{month}-{d.year % 100:02d} {clock} GMT"
        if date_format is DateFormat.ASCTIME:
            return f"{_DAYS[d.weekday()]} {month} {d.day:2d} {clock} {d.year:04d}"
        raise ValueError(f"Unknown date format: {date_format!r}")

    @classmethod
    def from_string(cls, text: str) -> "FullDate":
        """Parse a date in RFC 1123, RFC 850 or asctime format."""
        text = text.strip()
        try:
            match = _RFC1123.match(text)
            if match:
                day, mon, year, hh, mm, ss = match.groups()
                return cls._build(int(year), mon, day, hh, mm, ss)
            match = _RFC850.match(text)
            if match:
                day, mon, yy, hh, mm, ss = match.groups()
                year = int(yy)
                year += 2000 if year < 70 else 1900
                return cls._build(year, mon, day, hh, mm, ss)
            match = _ASCTIME.match(text)
            if match:
                mon, day, hh, mm, ss, year = match.groups()
                return cls._build(int(year), mon, day, hh, mm, ss)
        except ValueError as exc:
            raise ValueError("Invalid Date format") from exc
        raise ValueError("Invalid Date format")

    @classmethod
    def _build(cls, year: int, mon: str, day: str, hh: str, mm: str, ss: str) -> "FullDate":
        return cls(
            datetime(
                year,
                _MONTHS.index(mon) + 1,
                int(day),
                int(hh),
                int(mm),
                int(ss),
                tzinfo=timezone.utc,
            )
        )

    def __str__(self) -> str:
        return self.write()

    def __repr__(self) -> str:
        return f"FullDate({self.date.isoformat()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FullDate):
            return NotImplemented
        return self.date == other.date

    def __hash__(self) -> int:
        return hash(self.date)


class HttpError(Exception):
    """An error that maps to an HTTP status code."""

    def __init__(self, code: Union[Code, int], reason: str) -> None:
        super().__init__(reason)
        self.code = int(code)
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


def method_string(method: Method) -> str:
    return Method(method).value


def version_string(version: Version) -> str:
    return Version(version).value


def code_string(code: Union[Code, int]) -> str:
    """The reason phrase of a status code."""
    return Code(code).reason