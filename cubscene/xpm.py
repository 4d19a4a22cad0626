"""Reading of XPM pixmaps into :class:`~cubscene.image.Image` objects."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from .colors import lookup_color
from .image import Image, new_image
from .textscan import split_words, strip_comments

__all__ = [
    "TRANSPARENT",
    "XpmError",
    "extract_strings",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

# Pixel value stored for the colour "None".
TRANSPARENT = 0xFF000000

# Colour codes up to this many characters use a table where the last
# definition of a code wins; longer codes keep their first definition.
_DIRECT_CODE_LIMIT = 2

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def extract_strings(text: str) -> list[str]:
    """Return the contents of successive double-quoted strings in ``text``.

    An opening quote without a matching closing quote ends the scan.
    """
    strings: list[str] = []
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            break
        strings.append(text[start + 1:end])
        pos = end + 1
    return strings


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(rows: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(
            f"invalid XPM header values: {width} {height} {ncolors} {cpp}"
        )
    return width, height, ncolors, cpp


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    last_wins = cpp <= _DIRECT_CODE_LIMIT
    for _ in range(ncolors):
        line = _next_line(rows, "colour definitions")
        code = line[:cpp]
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        suffix = words[at + 1] if at + 1 < len(words) else None
        color = lookup_color(words[at], suffix)
        if last_wins:
            palette[code] = color
        else:
            palette.setdefault(code, color)
    return palette


def parse_xpm(lines: Iterable[str]) -> list[list[int]]:
    """Decode XPM string data into rows of 0xRRGGBB pixel values.

    ``lines`` holds the header, the colour definitions and the pixel rows,
    one string each.  Undefined colour codes give 0 and the colour ``None``
    gives :data:`TRANSPARENT`.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    palette = _read_palette(rows, ncolors, cpp)
    span = width * cpp
    pixels: list[list[int]] = []
    for _ in range(height):
        line = _next_line(rows, "pixel rows")
        if len(line) < span:
            raise XpmError(f"pixel row shorter than {span} characters: {line!r}")
        codes = (line[start:start + cpp] for start in range(0, span, cpp))
        row = [palette.get(code, 0) for code in codes]
        pixels.append([TRANSPARENT if color == -1 else color for color in row])
    return pixels


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM string data."""
    pixels = parse_xpm(lines)
    image = new_image(len(pixels[0]), len(pixels))
    for y, row in enumerate(pixels):
        for x, color in enumerate(row):
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file, ignoring C comments, and build an image from it."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return xpm_to_image(extract_strings(strip_comments(text)))