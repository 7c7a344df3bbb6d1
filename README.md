# cub3d

A small first-person raycasting demo. The player stands in a walled
room. Each frame the ceiling is filled grey and the floor pale beige.
Then one ray is cast per 0.01 radian across a 60° field of view, and
each ray's wall is drawn as a 5-pixel-wide magenta column. The column's
height shrinks with the distance the ray travelled before it met a
wall. The window is 525 × 500 pixels.

## Installing

```
pip install .
```

The window is drawn with `pygame`, which is installed as a dependency.

## Running

```
cub3d
cub3d --fps 30     # cap the frame rate (default 60, 0 for no cap)
```

Controls:

| Key              | Action                  |
|------------------|-------------------------|
| `W` / `S`        | move forward / backward |
| `A` / `D`        | strafe left / right     |
| `Left` / `Right` | turn                    |
| `Escape`         | quit                    |

A movement continues for as long as its key is held down. Closing the
window also quits.

## Using the engine from Python

The rendering logic is in `cub3d.engine` and needs no window:

```python
from cub3d.engine import Game

game = Game()                    # the built-in 6 × 6 room
game.render()                    # draw one frame into game.frame
colour = game.frame.get_pixel(0, 0)
game.handle_key("w", True)       # start moving forward
game.tick()                      # render, then advance the player
game.handle_key("w", False)      # stop
```

`Game` takes an optional grid: rows of integers, where `1` is a wall and
`6` marks the spawn tile. `find_spawn` raises `ValueError` for a grid
without a spawn tile. A ray that leaves the grid also raises
`ValueError`, so the grid should be closed by walls.

The following can also be called on their own, with a `Framebuffer`:

- `cast_rays`
- `wall_height`
- `find_spawn`
- the drawing helpers: `draw_floor_ceiling`, `draw_wall_column`,
  `draw_walls`, `draw_rays`, `render_wall` and `render_player`

`draw_walls`, `draw_rays` and `render_player` draw a top-down minimap.
The game loop does not use them.

`cub3d.app.translate_key` maps pygame key codes to the key names that
`Game.handle_key` accepts.

## What it does not do

- **Map files.** There is no loading of map or scene files. The room is
  built in, and other layouts can only be passed to `Game` from Python.
- **Collision.** The player is not stopped by walls.
- **Textures and sprites.** Walls are drawn in a single flat colour, and
  there are no sprites.

## Helper modules

The package also ships small utilities:

- `cub3d.textops`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `strlcpy`, `strlcat`, `substr`, `strjoin`. These work on
  Python strings and return indices where a position is asked for.
- `cub3d.words`: `atoi`, `itoa`, `split`, `strtrim`, `strmapi`,
  `striteri`.
- `cub3d.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`. These take one-character strings
  or integer codes.
- `cub3d.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, working on `bytearray` buffers.
- `cub3d.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to file descriptors.
- `cub3d.linkedlist`: a singly linked `LinkedList` of `Node`s, with
  `add_front`, `add_back`, `last`, `clear`, `for_each` and `map`.
- `cub3d.lines`: `LineReader` and `read_lines`, for reading a file
  descriptor one line at a time.

```python
from cub3d.words import split, atoi

split("  a  b c ", " ")   # ['a', 'b', 'c']
atoi("  -42abc")          # -42
```

## Running the tests

```
pip install .[test]
pytest
```