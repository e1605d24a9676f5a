"""Ray casting against the grid and drawing into a frame buffer."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .camera import Camera

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WALL_COLOR = 0x808080
_MASK = 0xFFFFFFFF


class FrameBuffer:
    """A width x height image of 32-bit colours, stored row by row."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the frame are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & _MASK

    def get(self, x: int, y: int) -> int:
        """Return one pixel's colour."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return self.pixels[y * self.width + x]

    def _fill_column(self, x: int, top: int, bottom: int, color: int) -> None:
        """Colour rows ``top`` to ``bottom - 1`` of column ``x``, clipped to the frame."""
        top, bottom = max(top, 0), min(bottom, self.height)
        if not 0 <= x < self.width or top >= bottom:
            return
        w = self.width
        count = bottom - top
        self.pixels[top * w + x:(bottom - 1) * w + x + 1:w] = array("I", [color & _MASK]) * count


@dataclass(frozen=True)
class RayHit:
    """The wall cell a ray reached, which face it hit (0 = x, 1 = y) and its distance."""

    map_x: int
    map_y: int
    side: int
    perp_dist: float


def _cell(grid: Sequence[str], row: int, col: int) -> Optional[str]:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _delta(component: float) -> float:
    return abs(1 / component) if component else math.inf


def cast_ray(camera: Camera, grid: Sequence[str], x: int, width: int) -> RayHit:
    """Cast the ray for screen column ``x`` until it meets a wall.

    Leaving the grid counts as meeting a wall.
    """
    camera_x = 2 * x / width - 1
    ray_x = camera.dir_x + camera.plane_x * camera_x
    ray_y = camera.dir_y + camera.plane_y * camera_x
    map_x, map_y = int(camera.pos_x), int(camera.pos_y)
    delta_x, delta_y = _delta(ray_x), _delta(ray_y)
    if ray_x < 0:
        step_x, side_x = -1, (camera.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - camera.pos_x) * delta_x
    if ray_y < 0:
        step_y, side_y = -1, (camera.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - camera.pos_y) * delta_y
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _cell(grid, map_y, map_x) in (None, "1"):
            break
    perp = side_x - delta_x if side == 0 else side_y - delta_y
    return RayHit(map_x, map_y, side, perp)


def wall_span(perp_dist: float, height: int) -> Tuple[int, int]:
    """First and last row of a wall slice at ``perp_dist``, clipped to the screen."""
    if not perp_dist > 0:
        return 0, height - 1
    ratio = height / perp_dist
    if math.isinf(ratio):
        return 0, height - 1
    line = int(ratio)
    half = height // 2
    return max(0, -(line // 2) + half), min(height - 1, line // 2 + half)


def draw_column(
    frame: FrameBuffer, x: int, start: int, end: int, ceiling: int, floor: int
) -> None:
    """Paint ceiling above ``start``, wall from ``start`` to ``end``, floor below."""
    frame._fill_column(x, 0, start, ceiling)
    frame._fill_column(x, start, end + 1, WALL_COLOR)
    frame._fill_column(x, max(start, end + 1), frame.height, floor)


def render_frame(
    frame: FrameBuffer, camera: Camera, grid: Sequence[str], ceiling: int, floor: int
) -> FrameBuffer:
    """Draw the whole view from ``camera`` into ``frame`` and return it."""
    for x in range(frame.width):
        hit = cast_ray(camera, grid, x, frame.width)
        start, end = wall_span(hit.perp_dist, frame.height)
        draw_column(frame, x, start, end, ceiling, floor)
    return frame