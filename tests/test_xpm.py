import pytest

from cub3d.xpm import (
    TRANSPARENT_PIXEL,
    XpmError,
    XpmImage,
    load_sprite,
    parse_xpm,
    read_xpm_file,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = ["2 2 2 1", "a c #ff0000", "b c None", "ab", "ba"]

FILE_TEXT = (
    "/* XPM */\n"
    "static char *img[] = {\n"
    "/* columns rows colors chars-per-pixel */\n"
    '"2 1 2 1",\n'
    '"a c #00ff00",\n'
    '"b c black", // second colour\n'
    '"ab"\n'
    "};\n"
)


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_keeps_newline_inside_word():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_preserves_length():
    text = "x /* hi */ y // rest\nz"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hi" not in result and "rest" not in result
    assert result.split() == ["x", "y", "z"]


def test_strip_comments_ignores_quoted():
    text = '"a /* b */ c" "d // e"'
    assert strip_comments(text) == text


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff0000", None) == 0xff0000


def test_text_to_rgb_bad_hex_gives_zero():
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_names():
    assert text_to_rgb("red", None) == 0xff0000
    assert text_to_rgb("RED", None) == 0xff0000
    assert text_to_rgb("ghost", "white") == 0xf8f8ff


def test_text_to_rgb_none_is_transparent():
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_gives_zero():
    assert text_to_rgb("red", "m") == 0
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xff0000
    assert image.pixel(1, 0) == TRANSPARENT_PIXEL
    assert image.pixel(0, 1) == TRANSPARENT_PIXEL
    assert image.pixel(1, 1) == 0xff0000


def test_transparent_colour_becomes_fixed_pixel_value():
    image = parse_xpm(["1 1 1 1", "a c None", "a"])
    assert image.pixel(0, 0) == 0xFF000000


def test_parse_xpm_unknown_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c #ff0000", "z"])
    assert image.rows == ((0,),)


def test_parse_xpm_single_char_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #ff0000", "a c black", "a"])
    assert image.pixel(0, 0) == 0


def test_parse_xpm_multi_char_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #ff0000", "abc c black", "abc"])
    assert image.pixel(0, 0) == 0xff0000


def test_parse_xpm_zero_width():
    with pytest.raises(XpmError):
        parse_xpm(["0 1 1 1", "a c red", "a"])


def test_parse_xpm_short_header():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1"])


def test_parse_xpm_missing_c_key():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a m red", "a"])


def test_parse_xpm_missing_colour_value():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a c", "a"])


def test_parse_xpm_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm(SAMPLE[:4])


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_image_rows_shape():
    image = parse_xpm(SAMPLE)
    assert isinstance(image, XpmImage)
    assert len(image.rows) == image.height
    assert all(len(row) == image.width for row in image.rows)


def test_read_xpm_file(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(FILE_TEXT)
    image = read_xpm_file(path)
    assert (image.width, image.height) == (2, 1)
    assert image.rows == ((0xff00, 0),)


def test_read_xpm_file_missing(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "absent.xpm")


def test_load_sprite_matches_file_read(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(FILE_TEXT)
    assert load_sprite(path) == read_xpm_file(path)