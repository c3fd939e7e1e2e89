"""Reading of XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .colors import parse_color

TRANSPARENT = 0xFF000000
"""Pixel value given to pixels whose colour is ``None``."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_BLOCK_COMMENTS = re.compile(r'"[^"]*(?:"|\Z)|(/\*.*?(?:\*/|\Z))', re.DOTALL)
_LINE_COMMENTS = re.compile(r'"[^"]*(?:"|\Z)|(//[^\n]*\n?)')
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: ``pixels[y][x]`` holds a 0xRRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(match: re.Match[str]) -> str:
    comment = match.group(1)
    if comment is None:
        return match.group(0)
    return " " * len(comment)


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are blanked first, then line comments together with
    the newline that ends them. The length of the text is unchanged.
    """
    text = _BLOCK_COMMENTS.sub(_blank, text)
    return _LINE_COMMENTS.sub(_blank, text)


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        position = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
    if position >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix = words[position + 1] if position + 1 < len(words) else None
    return line[:cpp], parse_color(words[position], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of strings."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    width, height, ncolors, cpp = _read_header(next_line("header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _read_color(next_line("colour table"), cpp)
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = next_line("pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_strings(strip_comments(text)))