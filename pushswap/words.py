"""Splitting text into words, either on one separator character or on
whitespace the way the program's argument parser does."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, List

_NUL = "\0"
_SPACE = " "
# Characters skipped before a word starts.
_SKIPPED = frozenset(" \t\n\v\f\r")
# Characters that end a word once it has started; tab and carriage
# return are not among them, so they stay inside a word.
_BREAKING = frozenset(" \n\v\f")
_TAB = "\t"
_CARRIAGE_RETURN = "\r"


def _terminated(text: str) -> str:
    nul = text.find(_NUL)
    return text if nul == -1 else text[:nul]


def count_words(text: str, sep: str) -> int:
    """Count the runs of characters other than ``sep`` in ``text``."""
    return len(split(text, sep))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _terminated(text)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def _starts_word(char: str) -> bool:
    return char != _SPACE and (char not in _SKIPPED or char in (_TAB, _CARRIAGE_RETURN))


def count_whitespace_words(text: str) -> int:
    """Count the words of ``text`` as the argument parser sees them.

    A word starts at any character other than a space, line feed,
    vertical tab or form feed when no word is open; a tab or carriage
    return closes an open word but opens one when none is open.
    """
    count = 0
    in_word = False
    for char in _terminated(text):
        if _starts_word(char) and not in_word:
            in_word = True
            count += 1
        elif char in _SKIPPED:
            in_word = False
    return count


def _scan_words(text: str) -> Iterator[str]:
    """Yield successive words for ever, empty strings once text runs out."""
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos] in _SKIPPED:
            pos += 1
        start = pos
        while pos < end and text[pos] not in _BREAKING:
            pos += 1
        yield text[start:pos]


def split_whitespace(text: str) -> List[str]:
    """Split ``text`` into as many words as :func:`count_whitespace_words`
    counts.

    Leading whitespace of every kind is skipped before each word, and a
    word runs until a space, line feed, vertical tab or form feed. Where
    the count exceeds the words present, the result is padded with empty
    strings. Empty text gives an empty list.
    """
    text = _terminated(text)
    return list(islice(_scan_words(text), count_whitespace_words(text)))