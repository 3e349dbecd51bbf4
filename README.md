# cub3d

Reads a `.cub` map file and checks that it is a valid grid map. It then
flood-fills the walkable area from the player's start position and prints
the map in colour on the terminal. The package also holds an XPM image
reader for sprites.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
cub3d maps/level.cub
```

The command takes exactly one argument, the path to a `.cub` file.

- The path must end in `.cub`.
- A path that starts with `.` is refused as hidden. That includes `./level.cub`.
- A file named just `.cub` in some directory is also refused as hidden.

If the map is valid, the command prints two grids in colour: first the
flood-filled grid, with reachable floor tiles shown as `P`, then the
starting map. Walls are red, player and painted tiles purple, floor in the
default colour.

If something is wrong, the command prints the rows it read, if there are
any, and then the reason in yellow. The reasons are:

- `ERROR! Input arguments not equal 2`: the wrong number of arguments was given
- `ERROR! fd error`: the file cannot be opened
- `ERROR! only .cub file is allowed`
- `ERROR! hidden file not allowed`
- `ERROR! Empty file`
- `ERROR! Last line has newline`
- `ERROR! Empty line found`
- `ERROR! Uneven length of lines`
- `ERROR! Invalid char`
- `ERROR! Only 1 row`, `ERROR! Only 2 rows`, `ERROR! Only 1 column`, `ERROR! Only 2 columns`
- `ERROR! Unenclosed walls`
- `ERROR! No player found`

The exit status is 0 in every case.

## Map format

A map is a rectangle of these characters:

| char | meaning |
|------|---------|
| `1` | wall |
| `0` | floor |
| `N`, `S`, `E`, `W` | the player's start and facing |

The map must meet these rules:

- Every row has the same length. The width is taken from the first non-empty row.
- The map is at least 3 by 3.
- The outer border is all walls.
- The last line does not end with a newline.

The first player character, read row by row, is the start position.

```
11111
1N001
10001
11111
```

## Library use

```python
from cub3d.gamemap import GameMap, MapError
from cub3d.floodfill import fill_map
from cub3d.display import format_grid

with open("level.cub") as fh:
    game_map = GameMap.from_lines(fh)

filled = fill_map(game_map)
print(format_grid(filled))
```

### Map loading and checks: `cub3d.gamemap`

`GameMap.from_lines` raises `MapError` when a map is not valid. Its
`message` holds the reason, and its `grid` holds the rows that were read, if
any.

A `GameMap` has these fields:

- `grid`
- `n_row`
- `n_col`
- `player`, a `Player` with `x` and `y`

The separate checks are also available: `read_rows`, `check_last_line`,
`check_lines`, `check_map_size`, `check_enclosed_walls` and `find_player`.

### Flood fill: `cub3d.floodfill`

`flood_fill(grid, x, y)` returns a painted copy of any grid.

### Command pieces: `cub3d.app`

- `check_filename(path)` applies the name rules of the command.
- `load_map(path, stream)` reads, checks and fills a map. It writes both grids to `stream` and returns the `GameMap`.

### Terminal output: `cub3d.display`

This module has the `Color` enum of ANSI codes and these functions:

- `color_for_char`
- `format_grid`
- `write_grid(grid, stream)`
- `write_color(msg, color, stream)`

### Helpers: `cub3d.util`

This module has `is_player_char`, `is_valid_char`, `is_walkable`, and
`strrncmp`, which compares two strings from the end.

### XPM images: `cub3d.xpm`

```python
from cub3d.xpm import load_sprite

image = load_sprite("wall.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
```

`read_xpm_file` (and `load_sprite`, which calls it) works in three steps:

1. It blanks out `/* */` and `//` comments outside quoted strings.
2. It takes the quoted strings of the file.
3. It decodes them with `parse_xpm`.

`parse_xpm(lines)` takes the XPM strings directly: the header, then the
colour lines, then the pixel rows. It returns an `XpmImage` with `width`,
`height` and `rows`. Each pixel is a 32-bit `0xAARRGGBB` value, read with
`XpmImage.pixel(x, y)`.

Colours are handled this way:

- Only the `c` key of a colour line is used.
- A `#` value is read as hexadecimal.
- Any other value is looked up by `cub3d.colornames.lookup_color`, which ignores case. A two-word name such as `light blue` works.
- Unknown names become 0 (black).
- `None` becomes `0xFF000000`.

Missing or malformed data raises `XpmError`. `split_words`,
`strip_comments` and `text_to_rgb` are also available.

## What it does not do

The package checks and prints maps only. It has these limits:

- It opens no window and draws no 3D view.
- It does not read texture paths or floor and ceiling colour lines from `.cub` files.
- It does not use the XPM sprites it can load for any drawing.