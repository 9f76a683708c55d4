"""Tests for tokenizing and option shape helpers."""

from compfilter.tokens import contains, is_long_option, is_short_option, normalize_newlines, split_tokens


def test_split_tokens_string():
    assert split_tokens("  -v   --verbose\t-o\n") == ["-v", "--verbose", "-o"]


def test_split_tokens_iterable():
    assert split_tokens(["-v --verbose", "-o"]) == ["-v", "--verbose", "-o"]


def test_split_tokens_empty():
    assert split_tokens("") == []
    assert split_tokens("   ") == []
    assert split_tokens(None) == []
    assert split_tokens([]) == []


def test_split_tokens_keeps_duplicates():
    assert split_tokens("a a b") == ["a", "a", "b"]


def test_normalize_newlines():
    assert normalize_newlines("-v\n--verbose\r\n-o\n") == ["-v", "--verbose", "-o"]
    assert normalize_newlines("") == []


def test_contains_whole_word():
    assert contains("test test2", "no nope test") is True
    assert contains(["test", "test2"], ["no", "nope", "test"]) is True


def test_contains_no_substring_match():
    assert contains("testing", "test") is False
    assert contains("test", "testing") is False


def test_contains_empty_needles():
    assert contains("a b c", "") is False
    assert contains("a b c", []) is False
    assert contains("", "a") is False


def test_short_option_shape():
    assert is_short_option("-v")
    assert is_short_option("-vx")
    assert is_short_option("-1")
    assert not is_short_option("--verbose")
    assert not is_short_option("-")
    assert not is_short_option("v")
    assert not is_short_option("-a=b")


def test_long_option_shape():
    assert is_long_option("--verbose")
    assert is_long_option("--out-file")
    assert not is_long_option("--")
    assert not is_long_option("-v")
    assert not is_long_option("--a b")
