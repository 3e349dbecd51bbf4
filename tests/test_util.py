import pytest

from cub3d.util import is_player_char, is_valid_char, is_walkable, strrncmp


@pytest.mark.parametrize("c", ["N", "S", "E", "W"])
def test_player_chars(c):
    assert is_player_char(c) is True
    assert is_walkable(c) is True
    assert is_valid_char(c) is True


@pytest.mark.parametrize("c", ["0", "1", "P", " ", "n", "\n", "x"])
def test_non_player_chars(c):
    assert is_player_char(c) is False


@pytest.mark.parametrize("c", ["0", "1", "\n"])
def test_valid_map_chars(c):
    assert is_valid_char(c) is True


@pytest.mark.parametrize("c", [" ", "2", "P", "a", "\t"])
def test_invalid_map_chars(c):
    assert is_valid_char(c) is False


def test_walls_are_not_walkable():
    assert is_walkable("1") is False
    assert is_walkable("0") is True
    assert is_walkable("P") is False
    assert is_walkable("\n") is False


def test_strrncmp_matching_suffix():
    assert strrncmp("maps/level.cub", ".cub", 4) == 0


def test_strrncmp_hidden_file_suffix():
    assert strrncmp("maps/.cub", "/.cub", 5) == 0
    assert strrncmp("maps/a.cub", "/.cub", 5) != 0


def test_strrncmp_mismatch_sign():
    assert strrncmp("map.cuc", ".cub", 4) > 0
    assert strrncmp("map.cua", ".cub", 4) < 0


def test_strrncmp_returns_code_point_difference():
    assert strrncmp("x.b", "y.a", 1) == ord("b") - ord("a")


def test_strrncmp_is_antisymmetric():
    a, b = "level.txt", ".cub"
    assert strrncmp(a, b, 4) == -strrncmp(b, a, 4)


def test_strrncmp_zero_length_always_equal():
    assert strrncmp("abc", "xyz", 0) == 0


def test_strrncmp_only_looks_at_tail():
    assert strrncmp("abcdef", "zzzdef", 3) == 0
    assert strrncmp("abcdef", "zzzdef", 4) < 0


def test_strrncmp_shorter_string():
    assert strrncmp("cub", ".cub", 4) < 0
    assert strrncmp(".cub", "cub", 4) > 0