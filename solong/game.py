"""Game state and player movement on a tile map."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum

from .maps import count_tiles

KEY_ESC = 65307
KEY_Q = 113

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100

KEY_UP = 65362
KEY_LEFT = 65361
KEY_DOWN = 65364
KEY_RIGHT = 65363

QUIT_KEYS = frozenset({KEY_ESC, KEY_Q})


class Direction(Enum):
    """A step the player can take, as a column and row offset."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
}


def key_to_direction(keycode: int) -> Direction | None:
    """Return the direction bound to ``keycode``, or None if it has none."""
    return _KEY_DIRECTIONS.get(keycode)


class Game:
    """A running game: the map, the player's place and the score."""

    def __init__(self, grid: Sequence[str]) -> None:
        self._cells = [list(row) for row in grid]
        players = [
            (x, y)
            for y, row in enumerate(self._cells)
            for x, tile in enumerate(row)
            if tile == "P"
        ]
        if len(players) != 1:
            raise ValueError("the map must hold exactly one player")
        self.x, self.y = players[0]
        self.collectibles = count_tiles(list(grid)).collectibles
        self.moves = 0
        self.endgame = False

    def _tile(self, x: int, y: int) -> str:
        if 0 <= y < len(self._cells) and 0 <= x < len(self._cells[y]):
            return self._cells[y][x]
        return "1"

    def move(self, direction: Direction) -> bool:
        """Try to step the player; return True if the player moved."""
        if self.endgame:
            return False
        nx, ny = self.x + direction.dx, self.y + direction.dy
        target = self._tile(nx, ny)
        if target == "E" and self.collectibles == 0:
            self._cells[self.y][self.x] = "0"
            self.x, self.y = nx, ny
            self.moves += 1
            self.endgame = True
            return True
        if target in ("1", "E"):
            return False
        if target == "C":
            self.collectibles -= 1
        self._cells[ny][nx] = "P"
        self._cells[self.y][self.x] = "0"
        self.x, self.y = nx, ny
        self.moves += 1
        return True

    def press(self, keycode: int) -> bool:
        """Handle a key press; return False when the key asks to quit."""
        if keycode in QUIT_KEYS:
            return False
        if not self.endgame:
            direction = key_to_direction(keycode)
            if direction is not None:
                self.move(direction)
        return True

    def tiles(self) -> Iterator[tuple[int, int, str]]:
        """Yield ``(x, y, tile)`` for every cell, row by row."""
        for y, row in enumerate(self._cells):
            for x, tile in enumerate(row):
                yield x, y, tile

    def rows(self) -> list[str]:
        """Return the current map as a list of strings."""
        return ["".join(row) for row in self._cells]