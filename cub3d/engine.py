"""Raycasting engine: map, player state and software rendering."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

WIN_H = 500
WIN_W = 525
PI = 3.14159
TILE_S = 60

FOV_HALF = PI / 6
RAY_STEP = 0.01
COLUMN_WIDTH = 5
MOVE_STEP = 0.08
TURN_FACTOR = 0.02
START_DIRECTION = (30 + 90) * PI / 180

WALL = 1
SPAWN = 6

WALL_COLOR = 0xD10096
CEILING_COLOR = 0x808080
FLOOR_COLOR = 0xFFE4C4
RAY_COLOR = 0xFFFFFF
TILE_WALL_COLOR = 0x555555
TILE_FLOOR_COLOR = 0x808080
PLAYER_COLOR = 0xB32134

DEFAULT_MAP = (
    (1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 6, 1),
    (1, 1, 1, 1, 1, 1),
)

Grid = Sequence[Sequence[int]]


@dataclass
class Framebuffer:
    """A block of 0xRRGGBB pixels, stored row by row."""

    width: int = WIN_W
    height: int = WIN_H
    pixels: list = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pixels = [0] * (self.width * self.height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; pixels outside the buffer are dropped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the framebuffer")
        return self.pixels[y * self.width + x]


@dataclass
class Ray:
    """The point where a ray met a wall."""

    rx: float
    ry: float


@dataclass
class Movement:
    """Current movement input of the player."""

    left_right: float = 0.0
    up_down: float = 0.0
    dir_offset: float = 0.0
    is_moving: bool = True


def _cell(grid: Grid, x: float, y: float) -> int:
    row = int(int(y) / TILE_S)
    col = int(int(x) / TILE_S)
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"point ({x:.2f}, {y:.2f}) lies outside the map")
    return grid[row][col]


def _march(grid: Grid, px: float, py: float, angle: float) -> Iterator[tuple]:
    dy, dx = math.cos(angle), math.sin(angle)
    for step in itertools.count():
        x = px + dx * step
        y = py + dy * step
        yield x, y, _cell(grid, x, y)


def _angles(direction: float) -> Iterator[float]:
    angle = direction - FOV_HALF
    end = direction + FOV_HALF
    while angle < end:
        yield angle
        angle += RAY_STEP


def _off_grid_line(x: int, y: int) -> bool:
    return all((v + k) % TILE_S != 0 for v in (x, y) for k in (1, 2))


def find_spawn(grid: Grid) -> tuple:
    """Return the (px, py) centre of the spawn tile; the last one wins."""
    spawn: Optional[tuple] = None
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell == SPAWN:
                spawn = (float(col * TILE_S + 30), float(row * TILE_S + 30))
    if spawn is None:
        raise ValueError("map has no spawn tile")
    return spawn


def cast_rays(grid: Grid, px: float, py: float, direction: float) -> list:
    """Cast one ray per angle step across the field of view."""
    return [
        next(Ray(x, y) for x, y, cell in _march(grid, px, py, angle) if cell == WALL)
        for angle in _angles(direction)
    ]


def wall_height(px: float, py: float, ray: Ray) -> float:
    """Projected wall height for a ray, capped at the window height."""
    distance = math.hypot(px - ray.rx, py - ray.ry)
    if distance == 0:
        return float(WIN_H)
    height = (WIN_H * TILE_S) / distance
    if int(height) > WIN_H:
        return float(WIN_H)
    return height


def draw_floor_ceiling(frame: Framebuffer) -> None:
    half = frame.height // 2
    split = half * frame.width
    frame.pixels[:split] = [CEILING_COLOR] * split
    frame.pixels[split:] = [FLOOR_COLOR] * (len(frame.pixels) - split)


def draw_wall_column(frame: Framebuffer, height: float, column: int) -> None:
    """Draw a vertical wall strip centred on the horizon."""
    center = frame.height // 2
    for j in range(int(height) // 2):
        for dx in range(COLUMN_WIDTH):
            frame.put_pixel(column + dx, center - j, WALL_COLOR)
            frame.put_pixel(column + dx, center + j, WALL_COLOR)


def render_wall(frame: Framebuffer, x: int, y: int, color: int) -> None:
    """Draw one minimap tile, leaving a two pixel gap."""
    for i in range(TILE_S - 2):
        for j in range(TILE_S - 2):
            frame.put_pixel(x + i, y + j, color)


def draw_walls(frame: Framebuffer, grid: Grid) -> None:
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            color = TILE_WALL_COLOR if cell == WALL else TILE_FLOOR_COLOR
            render_wall(frame, col * TILE_S, row * TILE_S, color)


def draw_rays(frame: Framebuffer, grid: Grid, px: float, py: float,
              direction: float) -> None:
    """Trace the field of view onto the minimap."""
    for angle in _angles(direction):
        for x, y, cell in _march(grid, px, py, angle):
            if cell == WALL:
                break
            ix, iy = int(x), int(y)
            if _off_grid_line(ix, iy):
                frame.put_pixel(ix, iy, RAY_COLOR)


def render_player(frame: Framebuffer, x: int, y: int, color: int) -> None:
    """Draw the player's outline square on the minimap (x is the row)."""
    for i in range(9):
        for j in range(9):
            on_border = i in (0, 8) or j in (0, 8)
            if on_border and _off_grid_line(x - 5 + i, y - 5 + j):
                frame.put_pixel(y - 5 + j, x - 5 + i, color)


class Game:
    """Player state, input and the first-person view."""

    def __init__(self, grid: Optional[Grid] = None) -> None:
        source = DEFAULT_MAP if grid is None else grid
        self.grid = tuple(tuple(row) for row in source)
        self.px, self.py = find_spawn(self.grid)
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0
        self.direction = START_DIRECTION
        self.movement = Movement()
        self.frame = Framebuffer()
        self.rays: list = []
        self.running = True

    def handle_key(self, key: str, pressed: bool) -> None:
        """Apply a key press or release ('a', 'w', 'left', 'escape', ...)."""
        mode = MOVE_STEP if pressed else 0.0
        move = self.movement
        if key == "escape":
            self.running = False
        elif key == "a":
            move.left_right = -mode
        elif key == "s":
            move.up_down = mode
        elif key == "d":
            move.left_right = mode
        elif key == "w":
            move.up_down = -mode
        elif key == "left":
            move.dir_offset = -mode * TURN_FACTOR
        elif key == "right":
            move.dir_offset = mode * TURN_FACTOR

    def render(self) -> Framebuffer:
        """Draw the current view into the framebuffer and return it."""
        draw_floor_ceiling(self.frame)
        self.rays = cast_rays(self.grid, self.px, self.py, self.direction)
        for index, ray in enumerate(self.rays):
            draw_wall_column(self.frame, wall_height(self.px, self.py, ray),
                             index * COLUMN_WIDTH)
        return self.frame

    def tick(self) -> Framebuffer:
        """Render one frame, then advance the player by the current input."""
        frame = self.render()
        move = self.movement
        self.px += move.left_right
        self.py -= math.cos(self.direction) * move.up_down
        self.px -= math.sin(self.direction) * move.up_down
        self.direction += move.dir_offset
        return frame