import io

import pytest

from cub3d.app import check_filename, load_map, main
from cub3d.gamemap import MapError

VALID = "1111\n1N01\n1001\n1111"


@pytest.fixture
def valid_file(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(VALID)
    return path


def test_check_filename_wrong_extension():
    with pytest.raises(MapError, match="only .cub file is allowed"):
        check_filename("maps/level.txt")


@pytest.mark.parametrize("name", ["maps/.cub", ".hidden.cub", "./level.cub"])
def test_check_filename_hidden(name):
    with pytest.raises(MapError, match="hidden file not allowed"):
        check_filename(name)


def test_load_map_valid(valid_file):
    out = io.StringIO()
    game_map = load_map(valid_file, out)
    assert game_map.grid == VALID.split("\n")
    text = out.getvalue()
    assert "Map is valid (flood_filled)" in text
    assert "Initial map" in text
    assert text.index("Map is valid") < text.index("Initial map")


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="fd error"):
        load_map(tmp_path / "absent.cub", io.StringIO())


def test_load_map_wrong_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID)
    with pytest.raises(MapError, match="only .cub file is allowed"):
        load_map(path, io.StringIO())


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    with pytest.raises(MapError, match="Empty file"):
        load_map(path, io.StringIO())


def test_main_wrong_argument_count(capsys):
    assert main([]) == 0
    assert "ERROR! Input arguments not equal 2" in capsys.readouterr().out


def test_main_valid_map(valid_file, capsys):
    assert main([str(valid_file)]) == 0
    out = capsys.readouterr().out
    assert "Initial map" in out
    assert "ERROR!" not in out


def test_main_invalid_map_prints_grid_and_error(tmp_path, capsys):
    path = tmp_path / "bad.cub"
    path.write_text("1111\n1N0\n1111")
    main([str(path)])
    out = capsys.readouterr().out
    assert "ERROR! Uneven length of lines" in out
    assert "N" in out