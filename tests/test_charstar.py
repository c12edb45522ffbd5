import pytest

from microprints.charstar import (
    balanced_parens,
    binsearch,
    char_is_alpha,
    char_is_digit,
    chomp,
    column,
    copy_range_prefixs,
    digit_sequence_prefix,
    eq,
    get_between,
    is_whitespace,
    is_word,
    postfix,
    prefix,
    prefixs,
    skip_spaces,
    substr_naive,
    substr_naive_likely,
    super_chomp,
    word_sequence_prefix,
)


def test_eq():
    assert eq("abc", "abc") is True
    assert eq("abc", "abd") is False
    assert eq("abc", "ab") is False
    assert eq("", "") is True


@pytest.mark.parametrize(
    "text, expected",
    [("hello", True), ("HeLLo", True), ("", False), ("he llo", False), ("abc1", False)],
)
def test_is_word(text, expected):
    assert is_word(text) is expected


def test_balanced_parens():
    assert balanced_parens("(a(b)c)") is True
    assert balanced_parens("((a)") is False
    assert balanced_parens("") is True
    # only counts are compared, not ordering
    assert balanced_parens(")(") is True


def test_postfix_and_prefix():
    assert postfix("filename.txt", ".txt") is True
    assert postfix("txt", "filename.txt") is False
    assert prefix("filename.txt", "file") is True
    assert prefix("fi", "file") is False
    assert prefix("anything", "") is True


@pytest.mark.parametrize(
    "text, sub",
    [("hello world", "world"), ("aaab", "ab"), ("abcabc", "cab"), ("xyz", "")],
)
def test_substr_finds_occurrence(text, sub):
    for fn in (substr_naive, substr_naive_likely):
        i = fn(text, sub)
        assert text[i:i + len(sub)] == sub
        assert sub not in text[: i + len(sub) - 1] or i == 0 or sub == ""


def test_substr_missing():
    assert substr_naive("short", "longer string") == -1
    assert substr_naive("hello", "xyz") == -1
    assert substr_naive_likely("hello", "xyz") == -1
    assert substr_naive_likely("hello", "hel") == 0


def test_prefixs_common_prefix():
    assert prefixs("foobar", "foo") == len("foo")
    assert prefixs("foobar", "bar") == 0


def test_prefixs_wildcard():
    text = "xxabc"
    i = prefixs(text, "*abc")
    assert text[i:].startswith("abc")
    assert prefixs("xyz", "*q") == len("xyz")


def test_get_between():
    assert get_between("<a>hello</a>", "<a>", "</a>") == "hello"
    assert get_between("</a>hello<a>", "<a>", "</a>") is None
    assert get_between("<a>hello</a>", "<a>", "</a>", limit=len("hello")) is None
    assert get_between("<a>hello", "<a>", "</a>") is None


def test_chomp_variants():
    assert chomp("line\r\n") == "line"
    assert chomp("line \n") == "line "
    assert super_chomp("line \t\r\n") == "line"
    assert chomp("\n\n") == ""


def test_is_whitespace_and_skip():
    assert is_whitespace(" ") is True
    assert is_whitespace("\n") is True
    assert is_whitespace("\t") is False
    src = "ab   cd"
    off = skip_spaces(src, 2)
    assert src[off] == "c"
    assert skip_spaces(src, 0) == 0
    assert skip_spaces("a  ", 1) == len("a  ")


def test_digit_and_alpha():
    assert char_is_digit("7") is True
    assert char_is_digit("x") is False
    assert char_is_alpha("q") is True
    assert char_is_alpha("Q") is False
    assert digit_sequence_prefix("123abc") == len("123")
    assert word_sequence_prefix("abc123") == len("abc")
    assert word_sequence_prefix("ABC") == 0


def test_copy_range_prefixs():
    src = "abcdefgh"
    assert copy_range_prefixs(src, 5, 2) == src[2:5]
    assert copy_range_prefixs(src, 2, 5) == ""
    assert copy_range_prefixs(src, 100, 3) == src[3:]


@pytest.mark.parametrize("col, expected", [(0, "alpha"), (1, "beta"), (2, "gamma")])
def test_column(col, expected):
    assert column("alpha beta gamma\r\n", col) == expected


def test_column_past_end():
    assert column("one two", 5) == ""


def test_binsearch_found():
    data = ["a", "b", "c", "d", "e"]
    for item in ("a", "b", "c"):
        idx = binsearch(data, item, len(data) - 1)
        assert data[idx] == item


def test_binsearch_missing_and_quirk():
    data = ["a", "b", "c", "d", "e"]
    assert binsearch(data, "zz", len(data) - 1) == -1
    assert binsearch(data, "e", len(data) - 1) == -1
    assert binsearch([], "a", 0) == -1