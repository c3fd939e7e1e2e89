import pytest

from solong.colors import convert_color, parse_color

RGB565 = (11, 5, 5, 6, 0, 5)


def test_hex_spec_is_read_as_hexadecimal():
    assert parse_color("#ff0000", None) == 0xFF0000
    assert parse_color("#00FF00", None) == 0x00FF00


def test_hex_spec_stops_at_first_non_digit():
    assert parse_color("#ffzz", None) == 0xFF
    assert parse_color("#zz", None) == 0


def test_hex_spec_ignores_suffix():
    assert parse_color("#0000ff", "blue") == 0x0000FF


def test_named_colours_from_table():
    assert parse_color("red", None) == 0xFF0000
    assert parse_color("white", None) == 0xFFFFFF
    assert parse_color("black", None) == 0x0
    assert parse_color("gray50", None) == 0x7F7F7F


def test_lookup_ignores_case():
    assert parse_color("ReD", None) == parse_color("red", None)
    assert parse_color("NAVYBLUE", None) == 0x80


def test_suffix_joins_with_space():
    assert parse_color("navy", "blue") == parse_color("navy blue", None)
    assert parse_color("navy", "blue") == parse_color("navyblue", None)


def test_repeated_name_uses_first_entry():
    assert parse_color("dark", "slate") == 0x2F4F4F
    assert parse_color("light", "slate") == 0x778899


def test_none_is_transparent_marker():
    assert parse_color("None", None) == -1


def test_unknown_name_gives_zero():
    assert parse_color("not a colour", None) == 0
    assert parse_color("red", "extra") == 0


def test_deep_visual_keeps_colour():
    for color in (0x0, 0xFF99FF, 0x00FFFF, 0x123456):
        assert convert_color(color, 24, RGB565) == color
        assert convert_color(color, 32, (0, 0, 0, 0, 0, 0)) == color


def test_rgb565_primary_colours():
    assert convert_color(0xFF0000, 16, RGB565) == 0xF800
    assert convert_color(0x0000FF, 16, RGB565) == 0x1F
    assert convert_color(0xFFFFFF, 16, RGB565) == 0xFFFF
    assert convert_color(0x000000, 16, RGB565) == 0


def test_channels_combine_additively():
    combined = convert_color(0xFFFFFF, 16, RGB565)
    parts = sum(convert_color(c, 16, RGB565) for c in (0xFF0000, 0x00FF00, 0x0000FF))
    assert combined == parts


def test_channels_do_not_overlap():
    red = convert_color(0xFF0000, 16, RGB565)
    green = convert_color(0x00FF00, 16, RGB565)
    blue = convert_color(0x0000FF, 16, RGB565)
    assert red & green == 0
    assert green & blue == 0
    assert red & blue == 0


def test_shallow_visual_is_monotonic_per_channel():
    values = [convert_color(level << 16, 16, RGB565) for level in range(0, 256, 8)]
    assert values == sorted(values)


def test_wrong_shift_count_raises():
    with pytest.raises(ValueError):
        convert_color(0xFF0000, 16, (11, 5, 5))