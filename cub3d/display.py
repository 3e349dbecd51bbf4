"""Coloured terminal output of map grids and messages."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from enum import Enum
from typing import TextIO

from cub3d.util import is_player_char


class Color(str, Enum):
    """ANSI colour escape sequences used for terminal output."""

    NCL = "\033[0;39m"
    RED = "\033[0;91m"
    GRN = "\033[0;92m"
    YLW = "\033[0;93m"
    BLU = "\033[0;94m"
    PUR = "\033[0;95m"
    CYN = "\033[0;96m"


def _code(color: Color | str) -> str:
    return color.value if isinstance(color, Color) else color


def color_for_char(c: str) -> Color:
    """Return the colour a map tile is drawn with."""
    if c == "1":
        return Color.RED
    if is_player_char(c):
        return Color.PUR
    if c == "0":
        return Color.NCL
    return Color.PUR


def format_grid(grid: Iterable[str]) -> str:
    """Render grid rows as coloured text, one line per row, ending in a reset."""
    parts: list[str] = []
    for row in grid:
        for c in row:
            parts.append(color_for_char(c).value)
            parts.append(c)
        parts.append("\n")
    parts.append(Color.NCL.value)
    return "".join(parts)


def write_grid(grid: Iterable[str], stream: TextIO | None = None) -> None:
    """Write the coloured grid to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(format_grid(grid))


def write_color(msg: str, color: Color | str, stream: TextIO | None = None) -> None:
    """Write ``msg`` in ``color``, then reset the terminal colour."""
    out = sys.stdout if stream is None else stream
    out.write(_code(color) + msg + Color.NCL.value)