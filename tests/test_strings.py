import pytest

from solong.strings import (
    copy_or_blank,
    strchr,
    strlcat,
    strlcpy,
    streq,
    strncmp,
    strnstr,
    strrchr,
)


def test_strchr_finds_first_occurrence():
    text = "hello world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_accepts_int_code():
    text = "abcabc"
    index = strchr(text, ord("c"))
    assert text[index] == "c"
    assert "c" not in text[:index]


def test_strchr_missing_returns_none():
    assert strchr("abc", "z") is None


def test_strchr_nul_finds_end():
    text = "abcdef"
    assert strchr(text, 0) == len(text)


def test_strrchr_finds_last_occurrence():
    text = "hello world"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    text = "xyz"
    assert strrchr(text, "a") is None
    assert strrchr(text, "\0") == len(text)


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_zero_length():
    assert strncmp("same", "same", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ordering_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_stops_at_n():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) < 0


def test_strncmp_prefix_sorts_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_needle():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"


def test_strnstr_respects_length():
    haystack = "foo bar baz"
    assert strnstr(haystack, "bar", 6) is None
    assert strnstr(haystack, "bar", 7) is not None
    assert haystack[strnstr(haystack, "bar", 7):7] == "bar"


def test_strnstr_empty_needle_and_missing():
    assert strnstr("anything", "", 3) == 0
    assert strnstr(None, None, 0) is None
    assert strnstr("abc", "zz", 3) is None


def test_strlcpy_truncates():
    src = "hello"
    copy, total = strlcpy(src, 3)
    assert len(copy) == 2
    assert src.startswith(copy)
    assert total == len(src)


def test_strlcpy_fits_and_zero():
    src = "hello"
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_appends():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert len(result) == 4
    assert ("foo" + "bar").startswith(result)
    assert total == len("foo") + len("bar")


def test_strlcat_size_smaller_than_dest():
    result, total = strlcat("hello", "ab", 3)
    assert result == "hello"
    assert total == len("ab") + 3


def test_strlcat_zero_size():
    result, total = strlcat("abc", "de", 0)
    assert result == "abc"
    assert total == len("de")


def test_streq():
    assert streq("abc", "abc") is True
    assert streq("abc", "abd") is False
    assert streq("abc", "ab") is False
    assert streq("abc", None) is False
    assert streq(None, "abc") is False


def test_copy_or_blank():
    assert copy_or_blank(None) == " "
    assert copy_or_blank("abc") == "abc"
    assert copy_or_blank("") == ""