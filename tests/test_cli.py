import pytest

from solong.cli import has_map_extension, main

VALID_MAP = "11111\n1PCE1\n11111\n"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.ber", True),
        ("level.ber", True),
        ("level.txt", False),
        ("level.ber.txt", False),
        ("level.be", False),
    ],
)
def test_has_map_extension(path, expected):
    assert has_map_extension(path) is expected


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_wrong_argument_count(argv, capsys):
    status = main(argv)
    assert capsys.readouterr().out == "Error\nChoose a valid number of arguments."
    assert status == 1


def test_missing_map_file(tmp_path, capsys):
    status = main([str(tmp_path / "missing.ber")])
    assert capsys.readouterr().out == "Error\nInvalid Map."
    assert status == 1


def test_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    status = main([str(path)])
    assert capsys.readouterr().out == "Error\nInvalid Map."
    assert status == 1


def test_valid_map_with_wrong_extension(tmp_path, capsys):
    path = tmp_path / "level.txt"
    path.write_text(VALID_MAP)
    status = main([str(path)])
    assert capsys.readouterr().out == "Error\nInvalid Map."
    assert status == 1


def test_open_map_without_walls(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    status = main([str(path)])
    assert capsys.readouterr().out == "Error\nInvalid Map."
    assert status == 1