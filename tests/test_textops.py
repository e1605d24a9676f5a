import pytest

from raycube.textops import split, strlcat, strlcpy, striteri, strmapi


def _upper_even(index, char):
    return char.upper() if index % 2 == 0 else char


def test_split_drops_empty_pieces():
    assert split("  sp l it de merde", " ") == ["sp", "l", "it", "de", "merde"]


def test_split_repeated_and_trailing_separators():
    assert split(",a,,b,", ",") == ["a", "b"]


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_pieces_never_contain_separator():
    pieces = split("1,2,,30,,,4", ",")
    assert all("," not in piece and piece for piece in pieces)
    assert "".join(pieces) == "1,2,,30,,,4".replace(",", "")


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_strmapi_upper_even_positions():
    assert strmapi("anais", _upper_even) == "AnAiS"


def test_strmapi_receives_indices():
    assert strmapi("abc", lambda index, char: str(index)) == "012"


def test_strmapi_empty():
    assert strmapi("", _upper_even) == ""


def test_striteri_changes_in_place_like_strmapi():
    chars = list("anais")
    assert striteri(chars, _upper_even) is None
    assert "".join(chars) == strmapi("anais", _upper_even)


def test_striteri_none_keeps_character():
    chars = list("keep")
    striteri(chars, lambda index, char: None)
    assert chars == list("keep")


def test_strlcpy_whole_source_fits():
    text, length = strlcpy("xxxx", "anabanana", 10)
    assert text == "anabanana"
    assert length == len("anabanana")


def test_strlcpy_truncates_to_size_minus_one():
    text, length = strlcpy("", "anabanana", 4)
    assert len(text) == 3
    assert "anabanana".startswith(text)
    assert length == len("anabanana")


def test_strlcpy_zero_size_leaves_dest():
    text, length = strlcpy("dest", "anabanana", 0)
    assert text == "dest"
    assert length == len("anabanana")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("", "abc", -1)


def test_strlcat_room_enough():
    text, total = strlcat("ana", "ana", 8)
    assert text == "anaana"
    assert total == len("ana") + len("ana")


def test_strlcat_truncates():
    text, total = strlcat("ab", "cdef", 5)
    assert len(text) == 4
    assert text.startswith("ab") and "abcdef".startswith(text)
    assert total == len("ab") + len("cdef")


def test_strlcat_dest_fills_buffer():
    text, total = strlcat("hello", "xy", 3)
    assert text == "hello"
    assert total == 5