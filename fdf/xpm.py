"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colors import lookup_color
from .image import Image, color_value
from .text import find_unquoted, split_words

__all__ = [
    "XpmError",
    "strip_comments",
    "quoted_lines",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

_TRANSPARENT = -1
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _leading_int(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group()) if match else 0


def _leading_hex(word: str) -> int:
    match = _HEX_PREFIX.match(word)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def strip_comments(text: str) -> str:
    """Blank out C-style comments that lie outside double quotes.

    Comments are replaced by spaces so that the text keeps its length.
    A line comment is blanked together with the newline that ends it.
    """
    while (start := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:start] + " " * (stop - start) + text[stop:]
    while (start := find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _text_rgb(name: str, rest: str | None) -> int:
    if name.startswith("#"):
        return _leading_hex(name[1:])
    if rest is not None:
        name = f"{name} {rest}"
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _color_definition(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    rest = words[index + 1] if index + 1 < len(words) else None
    rgb = _text_rgb(words[index], rest)
    return color_value(rgb) if rgb >= 0 else rgb


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    The first string holds width, height, number of colours and characters
    per pixel; colour definitions and pixel rows follow. Transparent pixels
    (colour "None") are left at zero.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError(f"incomplete XPM header: {header!r}")
    width, height, ncolors, cpp = (_leading_int(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"invalid XPM header: {header!r}")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"negative value in XPM header: {header!r}")

    # Short keys are overwritten by later definitions, long ones keep the first.
    later_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definitions")
        key = line[:cpp]
        value = _color_definition(line, cpp)
        if later_wins:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = colors.get(line[x * cpp : (x + 1) * cpp], 0)
            if color != _TRANSPARENT:
                image.put_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))