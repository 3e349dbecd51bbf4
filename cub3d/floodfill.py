"""Flood fill of the walkable area reachable from the player."""

from __future__ import annotations

from collections.abc import Sequence

from cub3d.gamemap import GameMap
from cub3d.util import is_walkable

PAINT = "P"


def flood_fill(grid: Sequence[str], x: int, y: int) -> list[str]:
    """Return a copy of ``grid`` with tiles reachable from (x, y) painted.

    Walkable neighbours of painted tiles are marked with ``P``; the start
    tile itself is painted only when it is reached from a neighbour.
    """
    cells = [list(row) for row in grid]
    stack = [(y, x)]
    while stack:
        cy, cx = stack.pop()
        for ny, nx in ((cy + 1, cx), (cy - 1, cx), (cy, cx + 1), (cy, cx - 1)):
            if not (0 <= ny < len(cells) and 0 <= nx < len(cells[ny])):
                continue
            if is_walkable(cells[ny][nx]):
                cells[ny][nx] = PAINT
                stack.append((ny, nx))
    return ["".join(row) for row in cells]


def fill_map(game_map: GameMap) -> list[str]:
    """Flood fill a copy of the map's grid from the player's start."""
    return flood_fill(game_map.copy_grid(), game_map.player.x, game_map.player.y)