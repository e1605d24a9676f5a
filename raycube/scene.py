"""Reading and validating scene description files (``.cub``).

A scene file holds six elements (four wall textures, a floor and a ceiling
colour) followed by a map made of walls ``1``, floor ``0``, spaces and one
player start ``N``, ``S``, ``E`` or ``W``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .charclass import is_space
from .lines import read_lines
from .numbers import atoi
from .textops import split

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
COLOR_KEYS = ("F", "C")
_ELEMENT_PREFIXES = tuple(f"{key} " for key in TEXTURE_KEYS + COLOR_KEYS)
_TRIM = " \t\n"
_PLAYER_MARKS = frozenset("NSEW")
_TILES = frozenset("10") | _PLAYER_MARKS


class SceneError(Exception):
    """A scene file that cannot be read or is not valid."""


@dataclass(frozen=True)
class PlayerStart:
    """Where the player starts: the centre of a cell, and the facing letter."""

    x: float
    y: float
    orientation: str


@dataclass
class Scene:
    """A validated scene, with the player's start cell turned into floor."""

    grid: List[str]
    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    player: PlayerStart


def parse_color(line: str) -> Optional[int]:
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into ``0xRRGGBB``.

    Returns None when there are not exactly three components or one lies
    outside 0-255.
    """
    parts = split(line[2:].strip(_TRIM), ",")
    if len(parts) != 3:
        return None
    red, green, blue = (atoi(part) for part in parts)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        return None
    return (red << 16) | (green << 8) | blue


def parse_texture(line: str) -> Optional[str]:
    """Return the path given on an ``NO``/``SO``/``WE``/``EA`` line, or None if blank."""
    path = line[3:].strip(_TRIM)
    return path or None


def is_element_line(line: str) -> bool:
    """True for a line that declares one of the six scene elements."""
    return bool(line) and not is_space(line[0]) and line.startswith(_ELEMENT_PREFIXES)


def parse_elements(lines: Iterable[str]) -> Dict[str, Union[str, int]]:
    """Collect the six elements from the lines of a scene file.

    Reading stops as soon as all six are known. A line that fails to parse
    leaves its element open for a later line; declaring an element that is
    already known is an error.
    """
    found: Dict[str, Union[str, int]] = {}
    for line in lines:
        if len(found) == len(TEXTURE_KEYS) + len(COLOR_KEYS):
            break
        if not is_element_line(line):
            continue
        key = line.split(" ", 1)[0]
        if key in found:
            raise SceneError("Élément dup ou invalide")
        value = parse_texture(line) if key in TEXTURE_KEYS else parse_color(line)
        if value is not None:
            found[key] = value
    if any(key not in found for key in TEXTURE_KEYS):
        raise SceneError("Texture manquante")
    if any(key not in found for key in COLOR_KEYS):
        raise SceneError("Couleur manquante")
    return {key: found[key] for key in TEXTURE_KEYS + COLOR_KEYS}


def is_map_start(line: str) -> bool:
    """True when the first non-blank character is ``1``, or the line is blank."""
    first = next((char for char in line if not is_space(char)), None)
    return first is None or first == "1"


def extract_map(lines: Sequence[str]) -> List[str]:
    """Return the map rows: every non-empty line from the first map-start line on."""
    lines = list(lines)
    start = next((index for index, line in enumerate(lines) if is_map_start(line)), None)
    if start is None:
        raise SceneError("Carte manquante")
    return split("".join(lines[start:]), "\n")


def check_extension(file_name: str) -> bool:
    """True when the name ends in ``.cub`` and has something before the dot."""
    dot = file_name.rfind(".")
    return dot > 0 and file_name[dot:] == ".cub"


def check_tiles(grid: Sequence[str]) -> bool:
    """True when the map holds only walls, floor, player marks and blanks."""
    return all(char in _TILES or is_space(char) for row in grid for char in row)


def find_player(grid: Sequence[str]) -> Tuple[PlayerStart, List[str]]:
    """Locate the single player mark.

    Returns the start and a copy of the grid with the mark replaced by ``0``.
    """
    start: Optional[PlayerStart] = None
    found_at: Optional[Tuple[int, int]] = None
    for row_index, row in enumerate(grid):
        for col_index, char in enumerate(row):
            if char in _PLAYER_MARKS:
                if start is not None:
                    raise SceneError("/!\\ Plusieurs joueurs")
                start = PlayerStart(col_index + 0.5, row_index + 0.5, char)
                found_at = (row_index, col_index)
    if start is None or found_at is None:
        raise SceneError("/!\\ Aucun joueur")
    rows = list(grid)
    row_index, col_index = found_at
    row = rows[row_index]
    rows[row_index] = row[:col_index] + "0" + row[col_index + 1:]
    return start, rows


def _cell(grid: Sequence[str], row: int, col: int) -> Optional[str]:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _open_cell(grid: Sequence[str]) -> Optional[Tuple[int, int]]:
    """Return the first walkable cell that touches the outside, or None."""
    for row_index, row in enumerate(grid):
        for col_index, char in enumerate(row):
            if char == "1" or is_space(char):
                continue
            if (
                row_index == 0
                or col_index == 0
                or row_index + 1 >= len(grid)
                or col_index + 1 >= len(row)
            ):
                return row_index, col_index
            for d_row in (-1, 0, 1):
                for d_col in (-1, 0, 1):
                    if d_row == d_col == 0:
                        continue
                    neighbour = _cell(grid, row_index + d_row, col_index + d_col)
                    if neighbour is None or is_space(neighbour):
                        return row_index, col_index
    return None


def check_walls(grid: Sequence[str]) -> bool:
    """True when no walkable cell touches a blank or the map's edge.

    All eight neighbours are checked; positions beyond the end of a shorter
    row count as outside the map.
    """
    return _open_cell(grid) is None


def load_scene(path: Union[str, "os.PathLike[str]"]) -> Scene:
    """Read, parse and validate the scene file at ``path``."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise SceneError("Impossible d'ouvrir le fichier") from exc
    elements = parse_elements(lines)
    grid = extract_map(lines)
    if not check_extension(os.fspath(path)):
        raise SceneError("Format de fichier invalide")
    if not check_tiles(grid):
        raise SceneError("Caractères invalides dans la carte")
    player, grid = find_player(grid)
    open_cell = _open_cell(grid)
    if open_cell is not None:
        row, col = open_cell
        raise SceneError(f"Murs invalides: {grid[row][col]!r} at {row}|{col}")
    return Scene(
        grid=grid,
        north=str(elements["NO"]),
        south=str(elements["SO"]),
        west=str(elements["WE"]),
        east=str(elements["EA"]),
        floor=int(elements["F"]),
        ceiling=int(elements["C"]),
        player=player,
    )