import pytest

from raycube.wordtab import str_str, str_str_quoted, to_wordtab


def test_to_wordtab_splits_on_spaces_and_tabs():
    assert to_wordtab("  a\tbb  c ") == ["a", "bb", "c"]


def test_to_wordtab_empty_and_blank():
    assert to_wordtab("") == []
    assert to_wordtab(" \t  ") == []


def test_to_wordtab_keeps_other_whitespace():
    assert to_wordtab("a\nb c") == ["a\nb", "c"]


def test_to_wordtab_stops_at_nul():
    assert to_wordtab("one two\0three") == ["one", "two"]


def test_to_wordtab_words_rejoin():
    text = "16 16 4 1"
    assert " ".join(to_wordtab(text)) == text


def test_str_str_finds_first():
    text = 'abc "x" "y"'
    idx = str_str(text, '"', len(text))
    assert idx == text.index('"')


def test_str_str_not_found():
    assert str_str("abcdef", "zz", 6) is None


def test_str_str_find_longer_than_length():
    assert str_str("abcdef", "cd", 1) is None


def test_str_str_ignores_after_nul():
    assert str_str("ab\0cd", "cd", 5) is None


def test_str_str_empty_find_rejected():
    with pytest.raises(ValueError):
        str_str("abc", "", 3)


def test_str_str_quoted_skips_quoted_match():
    text = '"/*"  /* c */'
    assert str_str(text, "/*", len(text)) == text.index("/*")
    assert str_str_quoted(text, "/*", len(text)) == text.rindex("/*")


def test_str_str_quoted_finds_closing_quote():
    text = 'ab"cd"'
    assert str_str_quoted(text, '"', len(text)) == text.rindex('"')


def test_str_str_quoted_not_found_when_all_quoted():
    text = 'x "//" y'
    assert str_str_quoted(text, "//", len(text)) is None
    assert str_str(text, "//", len(text)) == text.index("//")