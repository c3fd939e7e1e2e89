from solong.display import TILE_SIZE, tile_layout, window_size
from solong.game import Direction, Game

GRID = ["11111", "1PCE1", "11111"]


def test_window_size_uses_tile_size():
    assert window_size(GRID, 91) == (455, 273)


def test_window_size_unit_tiles_matches_grid_shape():
    assert window_size(GRID, 1) == (len(GRID[0]), len(GRID))


def test_layout_covers_every_known_tile():
    game = Game(GRID)
    layout = tile_layout(game, TILE_SIZE)
    assert len(layout) == sum(len(row) for row in GRID)
    width, height = window_size(GRID, TILE_SIZE)
    for px, py, _ in layout:
        assert px % TILE_SIZE == 0 and py % TILE_SIZE == 0
        assert 0 <= px < width and 0 <= py < height


def test_layout_places_player():
    game = Game(GRID)
    players = [(px, py) for px, py, name in tile_layout(game, TILE_SIZE) if name == "player"]
    assert players == [(game.x * TILE_SIZE, game.y * TILE_SIZE)]


def test_exit_opens_when_all_collected():
    game = Game(GRID)
    names = {name for _, _, name in tile_layout(game)}
    assert "exit" in names and "exit_open" not in names
    game.move(Direction.RIGHT)
    names = {name for _, _, name in tile_layout(game)}
    assert "exit_open" in names and "exit" not in names
    assert "collectible" not in names


def test_player_not_drawn_after_endgame():
    game = Game(GRID)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    names = [name for _, _, name in tile_layout(game)]
    assert "player" not in names
    assert names.count("exit_open") == 1


def test_unknown_tiles_are_skipped():
    game = Game(["11111", "1PX01", "11111"])
    layout = tile_layout(game, 1)
    assert (2, 1) not in [(px, py) for px, py, _ in layout]
    assert len(layout) == sum(len(row) for row in game.rows()) - 1