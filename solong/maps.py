"""Reading and checking of game maps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

TILES = frozenset("01CEP")


class MapError(ValueError):
    """Raised when a map cannot be read or is not a playable map."""


@dataclass(frozen=True)
class MapCounts:
    """How many players, exits and collectibles a map holds."""

    players: int
    exits: int
    collectibles: int


def parse_map(text: str) -> list[str]:
    """Split map text into rows, dropping empty lines."""
    return [row for row in text.split("\n") if row]


def read_map(path: str | Path) -> list[str]:
    """Read the map file at ``path`` into a list of rows."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc}") from exc
    return parse_map(text)


def count_tiles(grid: list[str]) -> MapCounts:
    """Count the players, exits and collectibles in ``grid``."""
    text = "".join(grid)
    return MapCounts(text.count("P"), text.count("E"), text.count("C"))


def validate_map(grid: list[str]) -> MapCounts:
    """Check that ``grid`` is a playable map and return its tile counts."""
    if len(grid) < 2:
        raise MapError("map needs at least two rows")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise MapError("map is not rectangular")
    if set(grid[0]) != {"1"} or set(grid[-1]) != {"1"}:
        raise MapError("map is not closed by walls")
    if any(row[0] != "1" or row[-1] != "1" for row in grid[1:]):
        raise MapError("map is not closed by walls")
    counts = count_tiles(grid)
    if counts.players != 1 or counts.exits == 0 or counts.collectibles == 0:
        raise MapError("map needs one player, an exit and a collectible")
    if not set("".join(grid)) <= TILES:
        raise MapError("map holds an unknown tile")
    return counts