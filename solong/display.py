"""Drawing the game in a window and feeding it key presses."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .game import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_Q,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Game,
)
from .xpm import TRANSPARENT, XpmImage, load_xpm

TILE_SIZE = 91
WINDOW_TITLE = "so_long"

ASSET_FILES = {
    "floor": "floor.xpm",
    "wall": "wall.xpm",
    "exit": "end.xpm",
    "exit_open": "exit.xpm",
    "collectible": "collectable.xpm",
    "player": "player.xpm",
}

_TILE_NAMES = {"1": "wall", "0": "floor", "P": "player", "C": "collectible"}


def window_size(grid: Sequence[str], tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Return the window's pixel size for a map: first row's width by row count."""
    return len(grid[0]) * tile_size, len(grid) * tile_size


def tile_layout(game: Game, tile_size: int = TILE_SIZE) -> list[tuple[int, int, str]]:
    """Return ``(px, py, asset)`` for every tile to draw."""
    layout = []
    for x, y, tile in game.tiles():
        if tile == "E":
            name = "exit_open" if game.collectibles == 0 else "exit"
        else:
            name = _TILE_NAMES.get(tile)
            if name is None:
                continue
        layout.append((x * tile_size, y * tile_size, name))
    return layout


def _to_surface(pygame, image: XpmImage):
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, pixel in enumerate(row):
            alpha = 0 if pixel == TRANSPARENT else 255
            surface.set_at(
                (x, y), ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF, alpha)
            )
    return surface


def run(game: Game, asset_dir: str | Path = "img") -> None:
    """Open the game window and play until the player quits."""
    import pygame

    keymap = {
        pygame.K_ESCAPE: KEY_ESC,
        pygame.K_q: KEY_Q,
        pygame.K_w: KEY_W,
        pygame.K_a: KEY_A,
        pygame.K_s: KEY_S,
        pygame.K_d: KEY_D,
        pygame.K_UP: KEY_UP,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_RIGHT: KEY_RIGHT,
    }
    asset_dir = Path(asset_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game.rows()))
        pygame.display.set_caption(WINDOW_TITLE)
        images = {
            name: _to_surface(pygame, load_xpm(asset_dir / filename))
            for name, filename in ASSET_FILES.items()
        }
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type != pygame.KEYDOWN:
                    continue
                keycode = keymap.get(event.key, event.key)
                was_over = game.endgame
                if not game.press(keycode):
                    running = False
                    break
                if not was_over:
                    print(f"Actual Movement: {game.moves}")
            screen.fill((0, 0, 0))
            for px, py, name in tile_layout(game):
                screen.blit(images[name], (px, py))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()