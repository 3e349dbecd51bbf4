"""Reading, validating and holding the map grid of a .cub file."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from cub3d.util import is_player_char, is_valid_char


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map.

    ``grid`` holds the rows read so far when the error was found, if any.
    """

    def __init__(self, message: str, grid: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.grid = grid


@dataclass(frozen=True)
class Player:
    """Start position of the player on the grid."""

    x: int
    y: int


def _content(line: str) -> str:
    """Return the part of a row before its first newline."""
    return line.split("\n", 1)[0]


def _width(rows: Sequence[str]) -> int:
    """Return the width of the first row with any content, newline excluded."""
    for row in rows:
        width = len(row) - (1 if row.endswith("\n") else 0)
        if width:
            return width
    return 0


def read_rows(lines: Iterable[str]) -> list[str]:
    """Collect raw map rows, keeping their newlines."""
    rows = list(lines)
    if not rows:
        raise MapError("ERROR! Empty file")
    return rows


def check_last_line(rows: Sequence[str]) -> None:
    """Reject a map whose last row ends in a newline."""
    if "\n" in rows[-1]:
        raise MapError("ERROR! Last line has newline")


def check_lines(grid: Sequence[str], n_col: int) -> None:
    """Reject empty rows, rows of the wrong width and unknown characters."""
    for line in grid:
        if not line or line[0] == "\n":
            raise MapError("ERROR! Empty line found")
        if len(line) != n_col:
            raise MapError("ERROR! Uneven length of lines")
        if not all(is_valid_char(c) for c in line):
            raise MapError("ERROR! Invalid char")


def check_map_size(n_row: int, n_col: int) -> None:
    """Reject maps too small to hold anything inside their walls."""
    if n_row == 1:
        raise MapError("ERROR! Only 1 row")
    if n_row == 2:
        raise MapError("ERROR! Only 2 rows")
    if n_col == 1:
        raise MapError("ERROR! Only 1 column")
    if n_col == 2:
        raise MapError("ERROR! Only 2 columns")


def check_enclosed_walls(grid: Sequence[str]) -> None:
    """Reject a map whose border is not made of walls."""
    y = len(grid) - 1
    x = len(grid[0]) - 1
    corners = (grid[0][0], grid[y][x], grid[y][0], grid[0][x])
    if any(c != "1" for c in corners):
        raise MapError("ERROR! Unenclosed walls")
    for i in range(2, x + 1):
        if grid[0][i] != "1" or grid[y][i] != "1":
            raise MapError("ERROR! Unenclosed walls")
    for i in range(2, y + 1):
        if grid[i][0] != "1" or grid[i][x] != "1":
            raise MapError("ERROR! Unenclosed walls")


def find_player(grid: Sequence[str]) -> Player:
    """Return the position of the first player character in the grid."""
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if is_player_char(c):
                return Player(x, y)
    raise MapError("ERROR! No player found")


@dataclass
class GameMap:
    """A validated map grid with its size and the player's start."""

    grid: list[str]
    n_row: int
    n_col: int
    player: Player

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from file lines (newlines kept), validating it."""
        rows = read_rows(lines)
        n_col = _width(rows)
        grid = [_content(row) for row in rows]
        try:
            check_last_line(rows)
            check_lines(grid, n_col)
            check_map_size(len(grid), n_col)
            check_enclosed_walls(grid)
            player = find_player(grid)
        except MapError as err:
            err.grid = grid
            raise
        return cls(grid=grid, n_row=len(grid), n_col=n_col, player=player)

    def copy_grid(self) -> list[str]:
        """Return a copy of the grid rows."""
        return list(self.grid)