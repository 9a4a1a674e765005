# seafloor

A small tile-based puzzle game. You steer a fish around a walled map on the
sea floor. Eat every piece of weed and the dead fish at the exit comes back
to life; swim onto it to win. Every step you take is counted and printed to
the terminal.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
seafloor maps/level1.ber
```

The `seafloor` command takes exactly one argument, the path of a map file;
with any other number of arguments it prints `Error` and a message and exits
with status 1.

Sprites are read as XPM files from the `image` directory under the current
working directory: `sea.xpm`, `wall.xpm`, `weed.xpm`, `deadf.xpm`,
`alive.xpm` and `character.xpm`. Each must exist and be openable for reading
and writing. Tiles are laid out on a 32-pixel grid, and the window is sized
to the map.

Keys:

- arrow keys: move up, down, left, right
- Esc: quit

Closing the window quits as well. Once the game is won the arrow keys do
nothing more; quit with Esc or by closing the window. Quitting ends the
program with status 1.

If a sprite file is missing, the map is refused, or a sprite cannot be read,
`Error` and a reason are printed and the program exits with status 1.

## Map files

A map is a text file whose name ends in `.ber`. It must not be empty, and it
must be a rectangle made of these characters:

| Char | Meaning                          |
|------|----------------------------------|
| `1`  | wall                             |
| `0`  | open sea                         |
| `C`  | weed to collect (at least one)   |
| `P`  | the player's start (exactly one) |
| `E`  | the exit (exactly one)           |

The map must be closed by walls on all sides, and every weed and the exit
must be reachable from the start. The exit blocks the player until all weed
has been eaten. Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from seafloor.mapfile import load_map
from seafloor.game import Game, Direction

game = Game(load_map("maps/level1.ber"))
game.move(Direction.RIGHT)   # True if the player moved
print(game.moves, game.collectibles_left, game.won)
```

- `seafloor.mapfile`: `check_mapfile`, `read_map_lines`, `validate_map`,
  `find_player`, `flood_fill`, `check_reachable` and `load_map`, which build a
  `GameMap` or raise `MapError`.
- `seafloor.game`: `Game` with `move(direction)`, `handle_key(keycode)`
  (arrow and Escape key codes; returns `True` when the key asks to quit) and
  `tiles()`; `Direction` holds the four steps.
- `seafloor.xpm`: `read_xpm_file(path)`, `xpm_from_data(lines)` and
  `parse_xpm(lines)` build a `seafloor.image.Image`, or raise `XpmError`.
  Colours may be given as `#RRGGBB` or as X11 colour names; `None` pixels
  become `0xFF000000`.
- `seafloor.image`: `Image(width, height, endian)` holds 32-bit pixels, with
  `put_pixel`, `get_pixel` and `rows()`.
- `seafloor.colors`: `lookup_color(name)` gives the RGB value of an X11 colour
  name, ignoring case; `"none"` gives -1 and unknown names give `None`.
- `seafloor.visual`: `mask_shifts(red_mask, green_mask, blue_mask)` and
  `get_color_value(color, depth, shifts)` turn an RGB colour into a pixel
  value for a visual of a given depth.
- `seafloor.display`: `check_images`, `load_sprites`, `tile_sprite`, `run`
  and `main`.

## What it does not do

- The move count is printed to the terminal only; nothing is written in the
  window.
- Transparent (`None`) pixels in sprites are drawn black, not see-through.
- The XPM reader understands only the `c` colour key; other keys are ignored.
- There is no mouse input, no level sequence and no saved progress.