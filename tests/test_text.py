import pytest

from fdf.text import find, find_unquoted, split_words


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_of_blank_text_is_empty():
    assert split_words(" \t  ") == []
    assert split_words("") == []


def test_split_words_xpm_header():
    assert split_words("42 42 2 1") == ["42", "42", "2", "1"]


@pytest.mark.parametrize(
    "text, needle",
    [
        ("abcabc", "ca"),
        ("abc", "abc"),
        ("abc", "d"),
        ('x = "a"', '"'),
        ("ab", "abc"),
    ],
)
def test_find_matches_first_occurrence(text, needle):
    assert find(text, needle) == text.find(needle)


def test_find_missing_returns_minus_one():
    assert find("hello", "xyz") == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "")


def test_find_unquoted_skips_quoted_occurrence():
    text = '"/*" /* x'
    pos = find_unquoted(text, "/*")
    assert text[pos : pos + 2] == "/*"
    assert pos > text.index('"', 1)


def test_find_unquoted_only_quoted_gives_minus_one():
    assert find_unquoted('"a /* b"', "/*") == -1


def test_find_unquoted_without_quotes_agrees_with_find():
    text = "static char *x = 1; // note"
    assert find_unquoted(text, "//") == find(text, "//")


def test_find_unquoted_needle_longer_than_text():
    assert find_unquoted("ab", "abc") == -1


def test_find_unquoted_rejects_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")