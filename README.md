# tartine

`tartine` is a pure-Python toolkit for the vocabulary of HTTP. It has no
runtime dependencies. It gives you:

- HTTP methods, status codes, versions, charsets, cache directives and full
  dates (`tartine.http_defs`)
- a header base class, header identity hashing and custom headers
  (`tartine.http_header`)
- cookie parsing, formatting and a cookie jar (`tartine.cookie`)
- ports, IP addresses and `host:port` address parsing (`tartine.net`)
- Base64 encoding and decoding (`tartine.base64`)
- a read-only byte view with a MurmurHash3 hash (`tartine.string_view`)
- bit flags over enumerations (`tartine.flags`)
- a level-filtered string logger (`tartine.string_logger`)
- shared default limits (`tartine.config`) and socket/server exceptions
  (`tartine.errors`)

## Installation

```
pip install tartine
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "tartine[test]"
pytest
```

## Status codes, methods and dates

```python
from tartine.http_defs import (
    CacheDirective, Code, DateFormat, Directive, FullDate, Method,
    code_string, method_string,
)

code_string(Code.NOT_FOUND)    # "Not Found"
method_string(Method.GET)      # "GET"
int(Code.OK)                   # 200

CacheDirective(Directive.MAX_AGE, 60).delta()   # timedelta(seconds=60)

date = FullDate.from_string("Wed, 09 Jun 2021 10:18:14 GMT")
date.write(DateFormat.RFC850)  # "Wednesday, 09-Jun-21 10:18:14 GMT"
```

`FullDate.from_string` accepts RFC 1123, RFC 850 and asctime dates and raises
`ValueError` for anything else. `HttpError(code, reason)` is an exception
carrying a status code.

## Cookies

```python
from tartine.cookie import Cookie, CookieJar

cookie = Cookie.from_string("session=token; Path=/; Secure")
cookie.name      # "session"
cookie.path      # "/"
cookie.secure    # True
str(cookie)      # "session=token; Path=/; Secure"

jar = CookieJar()
jar.add_from_raw("first=token; second=placeholder")
jar.get("second").value   # "placeholder"
jar.has("third")          # False
```

Attributes other than `Path`, `Domain`, `Expires`, `Max-Age`, `Secure` and
`HttpOnly` land in `cookie.ext`. A malformed cookie, or a lookup of a missing
name in a jar, raises `CookieError`; a non-numeric `Max-Age` raises
`ValueError`.

## Addresses and ports

```python
from tartine.net import Address, AddressParser, IP, Port

address = Address.parse("[::1]:8080")
address.host()     # "::1"
address.port()     # Port(8080)

Address("127.0.0.1").port()                  # Port(80)
Address(IP.loopback(), Port(9080)).host()    # "127.0.0.1"
Address(IP.v6(2, 0, 0, 0, 0, 0, 0, 1), Port(8080)).host()   # "2::1"
Port(80).is_reserved()                       # True

AddressParser("127.0.0.1:80").raw_port()     # "80"
```

`*` stands for `0.0.0.0`. Host names are resolved with the system resolver.
An address or port that cannot be parsed or resolved raises `NetError`.

## Headers

A header subclasses `Header`, sets `NAME`, and implements `parse` and
`write`. Each header class gets a 64-bit FNV-1a hash of its name, which
`header_cast` uses to check a header's type:

```python
from tartine.http_header import XProtocolVersion, custom_header, header_cast

version = XProtocolVersion()
version.parse("1.2")
version.write()                          # "1.2"
header_cast(version, XProtocolVersion)   # version

XRequestId = custom_header("X-Request-Id")
request_id = XRequestId("abc")
request_id.name      # "X-Request-Id"
str(request_id)      # "abc"
header_cast(request_id, XProtocolVersion)   # None
```

`Raw(name, value)` keeps a header unparsed, and `Encoding` lists the content
and transfer codings.

## Base64

```python
from tartine.base64 import Base64Decoder, Base64Encoder

Base64Encoder.encode_string("hello")       # "aGVsbG8="
Base64Decoder("aGVsbG8=").decode()         # b"hello"
```

Invalid characters, bad padding or a length that is not a multiple of four
raise `ValueError`.

## Byte views

```python
from tartine.string_view import StringView, murmur3_32

view = StringView(b"hello world")
view.find(b"world")          # 6
bytes(view.substr(0, 5))     # b"hello"
hash(view) == murmur3_32(b"hello world")   # True
```

## Flags

```python
import enum
from tartine.flags import Flags

class Notify(enum.Enum):
    NONE = 0
    READ = 1
    WRITE = 2

flags = Flags(Notify).set_flag(Notify.READ)
flags.has_flag(Notify.WRITE)   # False
(flags | Notify.WRITE).bit_string(4)   # "0011"
```

## Logging

```python
import io
from tartine.string_logger import Level, StringToStreamLogger

out = io.StringIO()
logger = StringToStreamLogger(Level.WARN, out)
logger.log(Level.ERROR, "shown")
logger.log(Level.DEBUG, "dropped")
out.getvalue()   # "shown\n"
```

Without a stream the logger writes to standard error.

## What tartine does not do

`tartine` is a library of HTTP definitions and value types. It has no HTTP
server, client, router or command-line tool, does not open listening
sockets, and has no media-type (MIME) parser or typed standard headers such
as `Content-Type`; beyond `XProtocolVersion` and `custom_header`, headers are
yours to define.