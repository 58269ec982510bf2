from datetime import datetime, timedelta, timezone

import pytest

from tartine.http_defs import (
    CacheDirective,
    Code,
    DateFormat,
    Directive,
    FullDate,
    HttpError,
    Method,
    Version,
    code_string,
    method_string,
    version_string,
)

SAMPLE = datetime(2021, 6, 9, 10, 18, 14, tzinfo=timezone.utc)


def test_method_string():
    assert method_string(Method.GET) == "GET"
    assert str(Method.POST) == "POST"
    assert all(method_string(m) == m.name for m in Method)


def test_version_string():
    assert version_string(Version.HTTP11) == "HTTP/1.1"
    assert version_string(Version.HTTP10) == "HTTP/1.0"


def test_code_string_and_values():
    assert code_string(Code.NOT_FOUND) == "Not Found"
    assert code_string(404) == "Not Found"
    assert int(Code.NOT_FOUND) == 404
    assert str(Code.NOT_FOUND) == "404"


def test_codes_round_trip_through_int():
    for code in Code:
        assert Code(int(code)) is code
        assert 100 <= int(code) < 600
        assert code_string(int(code)) == code.reason


def test_unknown_code_rejected():
    with pytest.raises(ValueError):
        code_string(999)


def test_cache_directive_delta():
    directive = CacheDirective(Directive.MAX_AGE, 3600)
    assert directive.delta() == timedelta(seconds=3600)
    assert CacheDirective(Directive.MIN_FRESH, timedelta(seconds=5)).delta() == timedelta(seconds=5)


def test_cache_directive_without_delta():
    directive = CacheDirective(Directive.NO_CACHE)
    assert directive.directive is Directive.NO_CACHE
    with pytest.raises(ValueError):
        directive.delta()


def test_cache_directive_equality():
    assert CacheDirective(Directive.S_MAX_AGE, 10) == CacheDirective(Directive.S_MAX_AGE, 10)
    assert not CacheDirective(Directive.S_MAX_AGE, 10) == CacheDirective(Directive.S_MAX_AGE, 11)


def test_full_date_rfc1123():
    assert FullDate(SAMPLE).write() == "Wed, 09 Jun 2021 10:18:14 GMT"
    assert str(FullDate(SAMPLE)) == "Wed, 09 Jun 2021 10:18:14 GMT"


def test_full_date_parse_rfc1123():
    parsed = FullDate.from_string("Wed, 09 Jun 2021 10:18:14 GMT")
    assert parsed.date == SAMPLE


@pytest.mark.parametrize("date_format", list(DateFormat))
def test_full_date_round_trip(date_format):
    original = FullDate(SAMPLE)
    assert FullDate.from_string(original.write(date_format)) == original


def test_full_date_naive_is_utc():
    naive = datetime(2021, 6, 9, 10, 18, 14)
    assert FullDate(naive) == FullDate(SAMPLE)


@pytest.mark.parametrize(
    "text",
    ["garbage", "Wed, 09 Foo 2021 10:18:14 GMT", "Wed, 32 Jun 2021 10:18:14 GMT", ""],
)
def test_full_date_invalid(text):
    with pytest.raises(ValueError):
        FullDate.from_string(text)


def test_http_error():
    err = HttpError(Code.REQUEST_TIMEOUT, "Timeout")
    assert err.code == int(Code.REQUEST_TIMEOUT)
    assert err.reason == "Timeout"
    assert str(err) == "Timeout"
    with pytest.raises(HttpError) as info:
        raise HttpError(404, "Not Found")
    assert info.value.code == 404