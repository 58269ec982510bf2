import pytest

from tartine.string_view import StringView, murmur3_32


def test_length_and_bytes():
    view = StringView(b"hello world", 6)
    assert len(view) == 5
    assert bytes(view) == b"world"


def test_substr():
    view = StringView(b"hello world")
    assert bytes(view.substr(6)) == b"world"
    assert bytes(view.substr(0, 5)) == b"hello"
    assert bytes(view.substr(6, 100)) == b"world"
    assert len(view.substr(11)) == 0


def test_substr_out_of_range():
    with pytest.raises(IndexError):
        StringView(b"abc").substr(4)


def test_find():
    view = StringView(b"abcabc")
    assert view.find(b"bc") == 1
    assert view.find(b"bc", 2) == 4
    assert view.find("c") == 2
    assert view.find(ord("a"), 1) == 3
    assert view.find(b"zz") == -1
    assert view.find(b"abc", 10) == -1


def test_find_in_sub_view_is_relative():
    view = StringView(b"xxabcabc", 2)
    assert view.find(b"abc") == 0
    assert view.find(b"abc", 1) == 3


def test_rfind():
    view = StringView(b"abcabc")
    assert view.rfind(b"abc") == 3
    assert view.rfind(b"abc", 2) == 0
    assert view.rfind(b"zz") == -1
    assert view.rfind(b"abcabcabc") == -1


def test_find_and_rfind_agree_with_bytes():
    data = b"the cat sat on the mat"
    view = StringView(data)
    for needle in (b"at", b"the", b" ", b"mat", b"dog"):
        assert view.find(needle) == data.find(needle)
        assert view.rfind(needle) == data.rfind(needle)


def test_indexing():
    view = StringView(b"hello", 1)
    assert view[0] == ord("e")
    assert view[-1] == ord("o")


def test_equality_and_hash():
    a = StringView(b"xxhello", 2)
    b = StringView(b"hello")
    assert a == b
    assert a == b"hello"
    assert hash(a) == hash(b)
    assert a != StringView(b"hellO")


def test_hash_is_murmur():
    view = StringView(b"payload")
    assert hash(view) == murmur3_32(b"payload")


def test_murmur_empty():
    assert murmur3_32(b"") == 0


def test_murmur_known_value():
    data = b"The quick brown fox jumps over the lazy dog"
    assert murmur3_32(data) == 0x2E4FF723


def test_murmur_depends_on_seed():
    assert murmur3_32(b"abc", 0) != murmur3_32(b"abc", 1)
    assert 0 <= murmur3_32(b"abcdefg", 7) <= 0xFFFFFFFF