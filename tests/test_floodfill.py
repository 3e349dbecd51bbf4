from cub3d.floodfill import fill_map, flood_fill
from cub3d.gamemap import GameMap
from cub3d.util import is_walkable

VALID = ["1111\n", "1N01\n", "1001\n", "1111"]


def test_flood_fill_paints_all_reachable():
    grid = ["11111", "1N001", "10001", "11111"]
    result = flood_fill(grid, 1, 1)
    assert not any(is_walkable(c) for row in result for c in row)
    for before, after in zip(grid, result):
        for a, b in zip(before, after):
            if a == "1":
                assert b == "1"


def test_flood_fill_does_not_mutate_input():
    grid = ["1111", "1N01", "1111"]
    snapshot = list(grid)
    flood_fill(grid, 1, 1)
    assert grid == snapshot


def test_flood_fill_start_painted_via_neighbour():
    assert flood_fill(["00"], 0, 0) == ["PP"]


def test_flood_fill_isolated_start_stays():
    assert flood_fill(["0"], 0, 0) == ["0"]


def test_fill_map_keeps_shape():
    game_map = GameMap.from_lines(VALID)
    filled = fill_map(game_map)
    assert len(filled) == game_map.n_row
    assert all(len(row) == game_map.n_col for row in filled)
    assert filled[game_map.player.y][game_map.player.x] == "P"
    assert game_map.grid[game_map.player.y][game_map.player.x] == "N"