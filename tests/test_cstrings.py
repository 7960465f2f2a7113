import pytest

from libft.cstrings import (
    strcat,
    strchr,
    strcmp,
    strcpy,
    strdup,
    strequ,
    strlcat,
    strlen,
    strncat,
    strncmp,
    strncpy,
    strnequ,
    strnstr,
    strrchr,
    strstr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0


def test_strlen_stops_at_terminator():
    assert strlen("ab\0cd") == strlen("ab")


def test_strchr_finds_first():
    assert strchr("hello", "l") == "hello".index("l")
    assert strchr("hello", ord("o")) == "hello".index("o")


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == "hello".rindex("l")
    assert strrchr("abc", "a") == 0


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "z") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strcmp_equal_and_order():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


def test_strcmp_antisymmetric():
    for a, b in [("abc", "abd"), ("ab", "abc"), ("z", "a")]:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strcmp_prefix_uses_terminator():
    assert strcmp("ab", "abc") == -ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcx", "abcy", 0) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) < 0
    assert strncmp("ab", "ab", 10) == 0


def test_strstr():
    assert strstr("hello world", "world") == "hello world".find("world")
    assert strstr("hello", "") == 0
    assert strstr("hello", "xyz") is None


def test_strnstr_respects_length():
    hay = "lorem ipsum"
    assert strnstr(hay, "ipsum", len(hay)) == hay.find("ipsum")
    assert strnstr(hay, "ipsum", len(hay) - 1) is None
    assert strnstr(hay, "ipsum", 0) is None
    assert strnstr(hay, "", 0) == 0


def test_strnstr_needle_longer_than_length():
    assert strnstr("abcdef", "abc", 2) is None
    assert strnstr("abcdef", "abc", 3) == 0


def test_strequ():
    assert strequ("abc", "abc") is True
    assert strequ("abc", "abd") is False
    assert strequ(None, "abc") is False


def test_strnequ():
    assert strnequ("abcx", "abcy", 3) is True
    assert strnequ("abcx", "abcy", 4) is False
    assert strnequ("ab", "abc", 3) is False
    assert strnequ("abc", None, 1) is False


def test_strcpy_gives_source():
    assert strcpy("xxxxxx", "ab") == "ab"
    assert strlen(strcpy("", "hello")) == len("hello")


def test_strncpy_pads_and_keeps_tail():
    assert strncpy("xxxxx", "ab", 4) == "ab\0\0x"
    assert strncpy("xxxxx", "abcdef", 3) == "abcxx"
    assert strlen(strncpy("xxxxx", "ab", 4)) == len("ab")


def test_strncpy_negative_count():
    with pytest.raises(ValueError):
        strncpy("abc", "d", -1)


def test_strcat_and_strncat():
    assert strcat("foo", "bar") == "foobar"
    assert strncat("foo", "bar", 2) == "fooba"
    assert strncat("foo", "bar", 10) == strcat("foo", "bar")


def test_strlcat_fits():
    assert strlcat("abc", "def", 10) == ("abcdef", len("abcdef"))


def test_strlcat_truncates():
    result, total = strlcat("abc", "def", 5)
    assert result == "abcd"
    assert len(result) == 5 - 1
    assert total == len("abcdef")


def test_strlcat_dest_fills_buffer():
    assert strlcat("abc", "def", 2) == ("abc", 2 + len("def"))


def test_strdup():
    assert strdup("hello") == "hello"
    assert strdup("ab\0cd") == "ab"
    assert strdup(None) is None