"""Player camera and the movement keys that drive it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

MOVE_SPEED = 0.04
ROT_SPEED = 0.025
PLANE = 0.66

KEY_ESCAPE = (53, 65307)
KEY_W = (13, 119)
KEY_S = (1, 115)
KEY_A = (0, 97)
KEY_D = (2, 100)
KEY_LEFT = (123, 65361)
KEY_RIGHT = (124, 65363)

_BINDINGS = {
    code: name
    for name, codes in (
        ("w", KEY_W),
        ("s", KEY_S),
        ("a", KEY_A),
        ("d", KEY_D),
        ("left", KEY_LEFT),
        ("right", KEY_RIGHT),
    )
    for code in codes
}

_ORIENTATIONS = {
    "N": (0.0, -1.0, PLANE, 0.0),
    "S": (0.0, 1.0, -PLANE, 0.0),
    "E": (1.0, 0.0, 0.0, PLANE),
    "W": (-1.0, 0.0, 0.0, -PLANE),
}


@dataclass
class Keys:
    """Which movement keys are held down."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    left: bool = False
    right: bool = False

    def _set(self, keycode: int, state: bool) -> None:
        name = _BINDINGS.get(keycode)
        if name is not None:
            setattr(self, name, state)

    def press(self, keycode: int) -> bool:
        """Record a key press; return True when the key asks to quit."""
        if keycode in KEY_ESCAPE:
            return True
        self._set(keycode, True)
        return False

    def release(self, keycode: int) -> None:
        """Record a key release."""
        self._set(keycode, False)


def _cell(grid: Sequence[str], row: int, col: int) -> Optional[str]:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


@dataclass
class Camera:
    """Position, viewing direction and camera plane of the player."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def from_orientation(cls, x: float, y: float, orientation: str) -> "Camera":
        """A camera at ``(x, y)`` facing ``N``, ``S``, ``E`` or ``W``."""
        try:
            dir_x, dir_y, plane_x, plane_y = _ORIENTATIONS[orientation]
        except KeyError:
            raise ValueError(f"unknown orientation {orientation!r}") from None
        return cls(x, y, dir_x, dir_y, plane_x, plane_y)

    def _step(self, grid: Sequence[str], dx: float, dy: float) -> None:
        new_x = self.pos_x + dx * MOVE_SPEED
        new_y = self.pos_y + dy * MOVE_SPEED
        if _cell(grid, int(new_y), int(new_x)) not in (None, "1"):
            self.pos_x, self.pos_y = new_x, new_y

    def move(self, grid: Sequence[str], keys: Keys) -> None:
        """Walk or strafe for the held keys, refusing to enter walls."""
        if keys.w:
            self._step(grid, self.dir_x, self.dir_y)
        if keys.s:
            self._step(grid, -self.dir_x, -self.dir_y)
        if keys.a:
            self._step(grid, -self.plane_x, -self.plane_y)
        if keys.d:
            self._step(grid, self.plane_x, self.plane_y)

    def _turn(self, angle: float) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def rotate(self, keys: Keys) -> None:
        """Turn left and/or right for the held arrow keys."""
        if keys.left:
            self._turn(-ROT_SPEED)
        if keys.right:
            self._turn(ROT_SPEED)