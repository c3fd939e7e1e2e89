"""A tile-based puzzle game: maps, game state, XPM tiles and a pygame window."""

__version__ = "0.1.0"