import pytest

from fractview.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    str_str,
    str_str_quoted,
    str_to_wordtab,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  one\ttwo   three ") == ["one", "two", "three"]


def test_wordtab_keeps_newlines_inside_words():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_wordtab_empty():
    assert str_to_wordtab(" \t ") == []


def test_str_str_finds_first():
    text = "hello hello"
    assert str_str(text, "ll") == text.index("ll")


def test_str_str_missing_and_too_long():
    assert str_str("abc", "x") == -1
    assert str_str("ab", "abc") == -1


def test_str_str_quoted_skips_quoted_text():
    text = '"a//b" //c'
    pos = str_str_quoted(text, "//")
    assert pos > text.index('"', 1)
    assert text[pos:pos + 2] == "//"


def test_str_str_quoted_all_inside_quotes():
    assert str_str_quoted('"/* x */"', "/*") == -1


def test_strip_block_comment():
    text = "a /* hidden */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hidden" not in result
    assert result.startswith("a ") and result.endswith(" b")


def test_strip_line_comment():
    text = '"keep"// drop\n"next"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "drop" not in result
    assert '"keep"' in result and '"next"' in result


def test_strip_keeps_quoted_markers():
    text = '"/*" "//"'
    assert strip_comments(text) == text


def test_strip_unterminated_comment():
    with pytest.raises(XpmError):
        strip_comments("a /* b")


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_names():
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("ghost", "white") == 0xF8F8FF
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_sample():
    img = parse_xpm(SAMPLE)
    assert (img.width, img.height) == (2, 2)
    assert img.image.get_pixel(0, 0) == 0xFF0000
    assert img.image.get_pixel(1, 0) == TRANSPARENT
    assert img.image.get_pixel(0, 1) == TRANSPARENT
    assert img.image.get_pixel(1, 1) == 0xFF0000


def test_none_colour_becomes_transparent_pixel():
    img = parse_xpm(["1 1 1 1", "a c None", "a"])
    assert img.image.get_pixel(0, 0) == 0xFF000000


def test_short_keys_keep_last_definition():
    img = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.image.get_pixel(0, 0) == text_to_rgb("blue")


def test_long_keys_keep_first_definition():
    img = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert img.image.get_pixel(0, 0) == text_to_rgb("red")


def test_undefined_key_is_black():
    img = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert img.image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_invalid_data(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE) == parse_xpm(SAMPLE)


def test_file_to_image(tmp_path):
    path = tmp_path / "pic.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars */\n"
        '"2 1 2 1",\n'
        '"a c blue",\n'
        '"b c #00FF00",\n'
        "// row\n"
        '"ab"\n'
        "};\n"
    )
    img = xpm_file_to_image(path)
    assert (img.width, img.height) == (2, 1)
    assert img.image.get_pixel(0, 0) == text_to_rgb("blue")
    assert img.image.get_pixel(1, 0) == text_to_rgb("#00FF00")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")