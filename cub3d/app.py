"""Command-line entry: load a .cub map, validate it and show it."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from cub3d.display import Color, write_color, write_grid
from cub3d.floodfill import fill_map
from cub3d.gamemap import GameMap, MapError
from cub3d.util import strrncmp


def check_filename(path: str | os.PathLike[str]) -> None:
    """Reject names without a .cub extension and hidden files."""
    name = os.fspath(path)
    if strrncmp(name, ".cub", 4):
        raise MapError("ERROR! only .cub file is allowed")
    if strrncmp(name, "/.cub", 5) == 0 or name.startswith("."):
        raise MapError("ERROR! hidden file not allowed")


def _read_lines(handle) -> list[str]:
    return [raw.decode("utf-8", errors="replace") for raw in handle]


def load_map(path: str | os.PathLike[str], stream: TextIO | None = None) -> GameMap:
    """Read, validate and flood fill the map at ``path``, printing both grids."""
    out = sys.stdout if stream is None else stream
    try:
        handle = open(path, "rb")
    except OSError as err:
        raise MapError("ERROR! fd error") from err
    with handle:
        check_filename(path)
        lines = _read_lines(handle)
    game_map = GameMap.from_lines(lines)
    filled = fill_map(game_map)
    write_color("Map is valid (flood_filled)\n", Color.PUR, out)
    write_grid(filled, out)
    write_color("Initial map\n", Color.GRN, out)
    write_grid(game_map.grid, out)
    return game_map


def _report(err: MapError, out: TextIO) -> None:
    if err.grid:
        write_grid(err.grid, out)
    message = f"{err.message}\n" if err.message else "Error\n"
    write_color(message, Color.YLW, out)


def main(argv: list[str] | None = None) -> int:
    """Run the program on one map file given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if len(args) != 1:
        _report(MapError("ERROR! Input arguments not equal 2"), out)
        return 0
    try:
        load_map(args[0], out)
    except MapError as err:
        _report(err, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())