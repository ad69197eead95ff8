import pytest
from hypothesis import given, strategies as st

from pushswap.words import (
    count_whitespace_words,
    count_words,
    split,
    split_whitespace,
)

_plain_words = st.lists(
    st.text(alphabet="abcxyz0123456789-+", min_size=1, max_size=6), max_size=8
)


def test_split_on_character():
    assert split("hello world", " ") == ["hello", "world"]


def test_split_drops_empty_runs():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert count_words(",,a,,b,", ",") == 2


def test_split_empty_string():
    assert split("", "z") == []
    assert count_words("", "z") == 0


def test_split_on_nul_keeps_whole_text():
    assert split("abc", "\0") == ["abc"]


def test_split_text_ends_at_nul():
    assert split("a b\0c d", " ") == ["a", "b"]


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("abc", sep)


@given(_plain_words, st.sampled_from([" ", ",", ";"]))
def test_split_round_trip(words, sep):
    assert split(sep.join(words), sep) == words
    assert count_words(sep.join(words), sep) == len(words)


def test_split_whitespace_basic():
    assert split_whitespace("  12  -3 ") == ["12", "-3"]
    assert count_whitespace_words("  12  -3 ") == 2


def test_split_whitespace_mixed_separators():
    assert split_whitespace("1\n2\v3\f4") == ["1", "2", "3", "4"]


def test_split_whitespace_empty():
    assert split_whitespace("") == []
    assert count_whitespace_words("") == 0


def test_lone_tab_counts_as_an_empty_word():
    assert count_whitespace_words("\t") == 1
    assert split_whitespace("\t") == [""]


def test_tab_stays_inside_a_word():
    assert split_whitespace("1\t2") == ["1\t2", ""]


@given(_plain_words, st.sampled_from([" ", "\n", "  ", " \n "]))
def test_split_whitespace_round_trip(words, sep):
    text = sep + sep.join(words) + sep
    assert split_whitespace(text) == words


@given(st.text(alphabet=" \t\n\v\f\rab1", max_size=20))
def test_result_length_matches_count(text):
    assert len(split_whitespace(text)) == count_whitespace_words(text)