# solong

A small tile-based puzzle game. You steer the player around a walled map,
pick up every collectible, and then walk onto an exit to finish.

## Installing

```
pip install .
```

The game window uses `pygame`, which is installed along with the package.

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, the map file, whose name has to
end in `.ber`. If the argument count is wrong, or the map cannot be read,
has the wrong extension or breaks one of the rules below, the command
prints `Error` and a short reason, then exits with status 1.

The window is 91 pixels per tile: the width of the first row by the
number of rows. The tile images are read from an `img/` directory in the
current working directory. It must hold `floor.xpm`, `wall.xpm`,
`end.xpm`, `exit.xpm`, `collectable.xpm` and `player.xpm`. Exits are
drawn with `end.xpm` while collectibles remain, and with `exit.xpm` once
every one has been picked up.

### Controls

| Key                 | Action     |
|---------------------|------------|
| `W` / Up arrow      | move up    |
| `A` / Left arrow    | move left  |
| `S` / Down arrow    | move down  |
| `D` / Right arrow   | move right |
| `Esc` / `Q`         | quit       |

Closing the window quits as well.

Walls block the player. An exit also blocks the player until every
collectible has been taken; stepping onto it after that ends the game.
Until then, after each key press the terminal shows the move count as
`Actual Movement: N`. Once the game has ended, movement keys are ignored
and the window stays open until you quit.

## Map format

A map is plain text, one row per line, made only of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A valid map:

- has at least two rows;
- is rectangular, with every row the same length;
- is closed by walls on all four edges;
- has exactly one `P`, at least one `E` and at least one `C`;
- contains no other characters.

Blank lines are ignored.

```
1111111
1P0C0E1
1111111
```

## Using it from Python

The pieces behind the game can be used on their own:

- `solong.maps`: `read_map` and `parse_map` turn a file or text into a
  list of rows, `count_tiles` returns a `MapCounts` of players, exits and
  collectibles, and `validate_map` checks the rules above, returning the
  counts or raising `MapError`.
- `solong.game`: `Game` holds the board, the player position
  (`x`, `y`), `collectibles`, `moves` and `endgame`. `Game.move` takes a
  `Direction` and returns whether the player moved; `Game.press` takes a
  key code, turned into a direction with `key_to_direction`, and returns
  `False` for a quit key. `Game.rows` and `Game.tiles` give the current
  board.
- `solong.xpm`: `load_xpm` and `parse_xpm` read XPM images into an
  `XpmImage` of 0xRRGGBB pixels (colour `None` becomes `TRANSPARENT`), and
  raise `XpmError` on malformed input. `strip_comments`, `quoted_strings`
  and `split_words` are the text helpers they use.
- `solong.colors`: `parse_color` reads `#rrggbb` values and X11 colour
  names, ignoring case (`none` gives -1, an unknown name 0), and
  `convert_color` packs an RGB value for a display of a given depth and
  channel layout.
- `solong.display`: `window_size` and `tile_layout` compute what to draw,
  and `run` opens the window and runs the game loop.

```python
from solong.maps import parse_map, validate_map
from solong.game import Game, Direction

grid = parse_map("1111111\n1P0C0E1\n1111111\n")
validate_map(grid)
game = Game(grid)
game.move(Direction.RIGHT)
print("\n".join(game.rows()))
```

## What it does not do

Map checking covers shape, walls, tile counts and characters only; it
does not check that the collectibles and an exit can actually be reached
from the start. There is no level editor, no scaling of the window and no
on-screen move counter: moves are only printed to the terminal.

## Running the tests

```
pip install ".[test]"
pytest
```