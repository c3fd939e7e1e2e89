import pytest

from solong.maps import MapCounts, MapError, count_tiles, parse_map, read_map, validate_map

VALID = ["11111", "1PCE1", "11111"]


def test_parse_map_splits_rows():
    assert parse_map("111\n1P1\n") == ["111", "1P1"]


def test_parse_map_drops_empty_lines():
    assert parse_map("\n11\n\n\n11") == ["11", "11"]


def test_parse_map_empty_text():
    assert parse_map("") == []


def test_read_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert read_map(path) == VALID


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "missing.ber")


def test_count_tiles():
    assert count_tiles(["1P1", "CEC"]) == MapCounts(players=1, exits=1, collectibles=2)


def test_validate_map_returns_counts():
    assert validate_map(VALID) == count_tiles(VALID)
    assert validate_map(VALID).players == 1


@pytest.mark.parametrize(
    "grid",
    [
        [],
        ["11111"],
        ["11111", "1PCE1", "1111"],
        ["11011", "1PCE1", "11111"],
        ["11111", "0PCE1", "11111"],
        ["11111", "1PCE0", "11111"],
        ["11111", "1PCE1", "11101"],
        ["111111", "1PCEP1", "111111"],
        ["11111", "1PC01", "11111"],
        ["11111", "1PE01", "11111"],
        ["111111", "1PCEX1", "111111"],
    ],
)
def test_validate_map_rejects(grid):
    with pytest.raises(MapError):
        validate_map(grid)


def test_validate_map_several_exits_and_collectibles():
    grid = ["1111111", "1PCCEE1", "1111111"]
    assert validate_map(grid) == MapCounts(players=1, exits=2, collectibles=2)