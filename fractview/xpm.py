"""Reading of XPM pixmaps into 32-bit pixel images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from fractview.colornames import NO_COLOR, lookup_color
from fractview.fractal import PixelImage
from fractview.numparse import atoi

TRANSPARENT = 0xFF000000
_MAX_NAME_LENGTH = 63
_SEPARATORS = re.compile(r"[ \t]+")
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """An image decoded from XPM data."""

    width: int
    height: int
    image: PixelImage


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _SEPARATORS.split(text) if word]


def str_str(text: str, find: str) -> int:
    """Return the position of the first ``find`` in ``text``, or -1."""
    if len(find) > len(text):
        return -1
    return text.find(find)


def str_str_quoted(text: str, find: str) -> int:
    """Return the position of the first ``find`` outside double quotes, or -1."""
    inside = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``.
    """
    while (begin := str_str_quoted(text, "/*")) != -1:
        end = str_str(text[begin + 2:], "*/")
        if end == -1:
            raise XpmError("unterminated comment")
        text = _blank(text, begin, begin + end + 4)
    while (begin := str_str_quoted(text, "//")) != -1:
        end = str_str(text[begin + 2:], "\n")
        stop = len(text) if end == -1 else begin + end + 3
        text = _blank(text, begin, stop)
    return text


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Return the colour given by ``#RRGGBB`` or a colour name.

    A second word ``end`` is joined to the name with a space, so that names
    such as ``ghost white`` can be written as two words. Unknown names give 0;
    ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        digits = match.group(2) if match else ""
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_MAX_NAME_LENGTH]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(rows: Iterator[str]) -> tuple[int, int, int, int]:
    words = str_to_wordtab(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header {' '.join(words[:4])!r}")
    return width, height, ncolors, cpp


def _read_colors(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    # Short keys keep the last definition of a duplicate, long keys the first.
    keep_last = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition {line!r} is too short")
        key = line[:cpp]
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour in definition {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour in definition {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        if keep_last or key not in colors:
            colors[key] = rgb
    return colors


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM strings: a header, colour definitions, then pixel rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    colors = _read_colors(rows, ncolors, cpp)
    image = PixelImage(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            colour = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if colour == NO_COLOR:
                colour = TRANSPARENT
            image.put_pixel(x, y, colour)
    return XpmImage(width, height, image)


def xpm_to_image(xpm_data: Iterable[str]) -> XpmImage:
    """Decode XPM data given as the strings of an XPM array."""
    return parse_xpm(xpm_data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def xpm_file_to_image(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(_quoted_strings(strip_comments(text)))