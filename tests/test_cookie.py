from datetime import datetime, timezone

import pytest

from tartine.cookie import Cookie, CookieError, CookieJar
from tartine.http_defs import FullDate


def test_basic():
    c = Cookie.from_string("SID=31d4d96e407aad42")
    assert c.name == "SID"
    assert c.value == "31d4d96e407aad42"


def test_attributes_path():
    c = Cookie.from_string("SID=31d4d96e407aad42; Path=/")
    assert c.name == "SID"
    assert c.value == "31d4d96e407aad42"
    assert c.path == "/"


def test_attributes_path_domain():
    c = Cookie.from_string("SID=31d4d96e407aad42; Path=/; Domain=example.com")
    assert c.path == "/"
    assert c.domain == "example.com"


def test_attributes_max_age():
    c = Cookie.from_string("lang=en-US; Path=/; Domain=example.com; Max-Age=10")
    assert c.name == "lang"
    assert c.value == "en-US"
    assert c.path == "/"
    assert c.domain == "example.com"
    assert c.max_age == 10


def test_attributes_expires():
    c = Cookie.from_string("lang=en-US; Expires=Wed, 09 Jun 2021 10:18:14 GMT")
    assert c.name == "lang"
    assert c.value == "en-US"
    assert c.expires.date == datetime(2021, 6, 9, 10, 18, 14, tzinfo=timezone.utc)


def test_attributes_trailing_semicolon():
    c = Cookie.from_string("lang=en-US; Path=/; Domain=example.com;")
    assert c.name == "lang"
    assert c.value == "en-US"
    assert c.domain == "example.com"


def test_bool_secure():
    c = Cookie.from_string("SID=31d4d96e407aad42; Path=/; Secure")
    assert c.name == "SID"
    assert c.value == "31d4d96e407aad42"
    assert c.path == "/"
    assert c.secure
    assert not c.http_only


def test_bool_secure_http_only():
    c = Cookie.from_string("SID=31d4d96e407aad42; Path=/; Secure; HttpOnly")
    assert c.path == "/"
    assert c.secure
    assert c.http_only


def test_ext():
    c = Cookie.from_string("lang=en-US; Path=/; Scope=Private")
    assert c.name == "lang"
    assert c.value == "en-US"
    assert c.path == "/"
    assert c.ext["Scope"] == "Private"


def test_write():
    c1 = Cookie("lang", "fr-FR")
    c1.path = "/"
    c1.domain = "example.com"
    assert str(c1) == "lang=fr-FR; Path=/; Domain=example.com"

    c3 = Cookie("lang", "en-US")
    c3.secure = True
    c3.ext["Scope"] = "Private"
    assert str(c3) == "lang=en-US; Secure; Scope=Private"


def test_write_round_trip_with_expires():
    c2 = Cookie("lang", "en-US")
    c2.path = "/"
    c2.expires = FullDate(datetime(2018, 2, 16, 17, tzinfo=timezone.utc))
    c2.max_age = 30
    c2.http_only = True
    assert Cookie.from_string(str(c2)) == c2


@pytest.mark.parametrize(
    "text",
    ["lang", "lang=en-US; Expires", "lang=en-US; Path=/; Domain"],
)
def test_invalid(text):
    with pytest.raises(CookieError):
        Cookie.from_string(text)


def test_invalid_max_age():
    with pytest.raises(ValueError):
        Cookie.from_string("lang=en-US; Max-Age=12ab")


def test_cookiejar_single():
    jar = CookieJar()
    jar.add_from_raw("key1=value1")
    assert jar.get("key1").value == "value1"


def test_cookiejar_multiple():
    jar = CookieJar()
    jar.add_from_raw("key2=value2; key3=value3; key4=; key5=foo=bar")
    assert jar.get("key2").value == "value2"
    assert jar.get("key3").value == "value3"
    assert jar.get("key4").value == ""
    assert jar.get("key5").value == "foo=bar"
    with pytest.raises(CookieError):
        jar.get("key6")


def test_cookiejar_invalid_raw():
    jar = CookieJar()
    with pytest.raises(CookieError):
        jar.add_from_raw("key4")


def test_cookiejar_remove_all():
    jar = CookieJar()
    jar.add(Cookie("k1", "v1"))
    jar.add(Cookie("k2", "v2"))
    assert jar.has("k1")
    assert jar.has("k2")
    jar.remove_all_cookies()
    assert not jar.has("k1")
    assert not jar.has("k2")


def test_cookiejar_iteration():
    jar = CookieJar()
    jar.add(Cookie("k1", "v1"))
    jar.add(Cookie("k1", "v2"))
    jar.add(Cookie("k2", "v3"))
    pairs = sorted((c.name, c.value) for c in jar)
    assert pairs == [("k1", "v1"), ("k1", "v2"), ("k2", "v3")]
    assert len(jar) == 3