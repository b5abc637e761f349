"""Small text helpers used by the XPM reader."""

from __future__ import annotations

import re

__all__ = ["split_words", "find", "find_unquoted"]

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs.

    Only spaces and tabs separate words; any other character, a newline
    included, is part of a word.
    """
    return [word for word in _BLANKS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("cannot search for an empty string")


def find(text: str, needle: str) -> int:
    """Return the index of the first occurrence of needle in text, or -1."""
    _check_needle(needle)
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first occurrence of needle outside double quotes.

    A double quote toggles the quoted state; occurrences that start inside
    a quoted section are skipped. Returns -1 when there is none.
    """
    _check_needle(needle)
    inside = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text[: last_start + 1]):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1