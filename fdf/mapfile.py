"""Reading height maps: lines of whitespace-separated integers."""

from __future__ import annotations

import re
from os import PathLike

__all__ = ["MapError", "row_length", "parse_map", "read_map"]

_NUMBER = re.compile(r"[0-9-]+")
_LEADING_INT = re.compile(r"[+-]?\d+")


class MapError(ValueError):
    """Raised when a map cannot be read or its rows differ in length."""


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _words(line: str) -> list[str]:
    return [word for word in re.split(r"[ \t]+", line) if word]


def row_length(text: str) -> int:
    """Return the number of values on each line of a map.

    Raises MapError when the lines hold different numbers of values.
    An empty map has length 0.
    """
    counts = {len(_words(line)) for line in _lines(text)}
    if len(counts) > 1:
        raise MapError("map rows differ in length")
    return counts.pop() if counts else 0


def _to_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else 0


def parse_map(text: str) -> list[list[int]]:
    """Parse map text into rows of heights.

    Values are read in order through the whole text and laid out in as many
    rows as there are lines, each as long as the first; missing values are 0.
    """
    width = len(_lines(text))
    length = row_length(text)
    values = iter([_to_int(token) for token in _NUMBER.findall(text)])
    return [[next(values, 0) for _ in range(length)] for _ in range(width)]


def read_map(path: str | PathLike[str]) -> list[list[int]]:
    """Read and parse a map file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as error:
        raise MapError(f"cannot read map {path}: {error}") from error
    return parse_map(text)