import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    quoted_strings,
    split_words,
    strip_comments,
)

OPEN_XPM = """/* XPM */
static char *open_xpm[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1",
"  c None",
". c #00FF00",
// the pixels follow
" . ",
"...",
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  3 \t2  2 1 ") == ["3", "2", "2", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a /* note */ "b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert '"b"' in result


def test_strip_comments_ignores_comment_markers_in_quotes():
    text = '"/* not a comment */" // gone\n"x"'
    result = strip_comments(text)
    assert list(quoted_strings(result)) == ["/* not a comment */", "x"]
    assert "gone" not in result


def test_quoted_strings_extracts_in_order():
    assert list(quoted_strings('x "one", "two" y')) == ["one", "two"]


def test_parse_xpm_hex_and_named_colors():
    image = parse_xpm(["2 1 2 1", "r c red", "g c #00ff00", "rg"])
    assert image == XpmImage(2, 1, ((0xFF0000, 0x00FF00),))


def test_parse_xpm_none_is_transparent():
    image = parse_xpm(["1 1 1 1", "x c None", "x"])
    assert image.pixels == ((TRANSPARENT,),)


def test_parse_xpm_unknown_key_gives_black():
    image = parse_xpm(["2 1 1 1", "a c #123456", "ab"])
    assert image.pixels == ((0x123456, 0),)


def test_parse_xpm_two_char_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 2", "aa c #000001", "aa c #000002", "aa"])
    assert image.pixels == ((0x000002,),)


def test_parse_xpm_wide_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.pixels == ((0x000001,),)


def test_parse_xpm_missing_c_entry():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "x m white", "x"])


def test_parse_xpm_zero_width():
    with pytest.raises(XpmError):
        parse_xpm(["0 1 1 1", "x c red", "x"])


def test_parse_xpm_short_header():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1"])


def test_parse_xpm_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "x c red", "x"])


def test_parse_xpm_short_row():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", "x c red", "xx"])


def test_load_xpm_file(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(OPEN_XPM)
    image = load_xpm(path)
    assert (image.width, image.height) == (3, 2)
    assert image.pixels == (
        (TRANSPARENT, 0x00FF00, TRANSPARENT),
        (0x00FF00, 0x00FF00, 0x00FF00),
    )


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")