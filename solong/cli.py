"""Command line entry point: load a map and play it."""

from __future__ import annotations

import sys
from pathlib import Path

from .maps import MapError, read_map, validate_map

MAP_EXTENSION = ".ber"
ASSET_DIR = Path("img")


def has_map_extension(path: str) -> bool:
    """Return True if ``path`` names a map file by its extension."""
    return str(path).endswith(MAP_EXTENSION)


def main(argv: list[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write("Error\nChoose a valid number of arguments.")
        return 1
    path = args[0]
    try:
        grid = read_map(path)
        validate_map(grid)
    except MapError:
        grid = None
    if grid is None or not has_map_extension(path):
        sys.stdout.write("Error\nInvalid Map.")
        return 1

    from .display import run
    from .game import Game

    run(Game(grid), ASSET_DIR)
    return 0


if __name__ == "__main__":
    sys.exit(main())