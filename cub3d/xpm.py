"""Reading XPM images: header, colour table and pixel rows."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from cub3d.colornames import lookup_color

TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 63
_WORD_SPLIT = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+)")


class XpmError(Exception):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; each pixel is a 32-bit 0xAARRGGBB value."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    """Return the first position of ``token`` outside double quotes, or -1."""
    quoted = False
    for i, c in enumerate(text):
        if c == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, i):
            return i
    return -1


def _blank(text: str, start: int, span: int) -> str:
    span = min(span, len(text) - start)
    return text[:start] + " " * span + text[start + span:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    Block comments are blanked first, then line comments together with
    their terminating newline. The length of the text is preserved.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        span = end - begin + 2 if end != -1 else 3
        text = _blank(text, begin, span)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        span = end - begin + 1 if end != -1 else 2
        text = _blank(text, begin, span)
    return text


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Return the colour for an XPM colour value.

    ``#``-prefixed values are read as hexadecimal; otherwise ``name`` (joined
    with ``end`` when given) is looked up among the colour names. An unknown
    name or unreadable number gives 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        return int(match.group(1), 16) if match else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def parse_xpm(lines: Sequence[str]) -> XpmImage:
    """Decode XPM data given as its list of strings (header, colours, rows)."""
    source: Iterator[str] = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("incomplete header")
    width, height, n_colors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and n_colors and cpp):
        raise XpmError("invalid header")

    last_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(n_colors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if last_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        row = []
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            row.append(color & 0xFFFFFFFF)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, rows=tuple(rows))


def read_xpm_file(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as err:
        raise XpmError(f"cannot read {os.fspath(path)}") from err
    strings = [m.group(1) for m in _QUOTED.finditer(strip_comments(text))]
    return parse_xpm(strings)


def load_sprite(path: str | os.PathLike[str]) -> XpmImage:
    """Load a sprite image from an XPM file."""
    return read_xpm_file(path)