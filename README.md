# raycube

A small first-person maze explorer. It reads a `.cub` scene file that gives
wall textures, floor and ceiling colours and a map. It checks that the map is
closed and holds exactly one player, then opens a 1280x720 window titled
"Cub3D" and raycasts the walls in real time with pygame.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
raycube path/to/level.cub
```

With no argument or more than one, the command prints
`Error: usage raycube <map>` to standard error and exits with status 1. If the
scene cannot be read or is not valid, it prints the reason and then
`Error: invalid map`, and exits with status 1.

Controls:

| Key          | Action                  |
|--------------|-------------------------|
| W / S        | move forward / backward |
| A / D        | strafe left / right     |
| Left / Right | turn                    |
| Escape       | quit                    |

Closing the window also quits. You cannot walk into a wall cell.

## Scene files

The file name must end in `.cub` and have something before the dot. A scene
starts with six elements, in any order, each on its own line at the very
start of the line:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

`F` is the floor colour and `C` the ceiling colour, written `R,G,B` with each
part from 0 to 255. Declaring an element a second time is an error. A line
that does not parse (a blank texture path, a colour with the wrong number of
parts or a part out of range) leaves that element open for a later line; any
element still missing at the end is an error.

The map starts at the first line that is blank or whose first non-blank
character is `1`, and runs to the end of the file; empty lines within it are
dropped. Keep the element lines together at the top, with no blank lines
between them, so that none of them is read as part of the map.

The map may use `1` (wall), `0` (floor), whitespace, and exactly one of `N`,
`S`, `E`, `W` for the player's start cell and facing. Every cell that is not a
wall or blank must have all eight neighbours present and non-blank, so the
map has to be closed by walls.

```
111111
100101
101001
1100N1
111111
```

## Using it as a library

```python
from raycube.scene import load_scene, SceneError
from raycube.app import Game

try:
    scene = load_scene("level.cub")
except SceneError as err:
    print("invalid map:", err)
else:
    game = Game(scene)
    game.key_down(119)      # hold W
    frame = game.step()     # move, turn and render one frame
    print(hex(frame.get(640, 360)))
```

The modules:

- `raycube.scene`: `load_scene`, the `Scene` and `PlayerStart` records, the
  `SceneError` exception, and the individual steps (`parse_elements`,
  `parse_color`, `parse_texture`, `extract_map`, `check_extension`,
  `check_tiles`, `find_player`, `check_walls`).
- `raycube.camera`: `Camera` (`from_orientation`, `move`, `rotate`) and
  `Keys` (`press`, `release`), which accepts both the X11 key codes (`w` 119,
  `s` 115, `a` 97, `d` 100, arrows 65361/65363, Escape 65307) and the macOS
  ones (13, 1, 0, 2, 123/124, 53).
- `raycube.render`: `FrameBuffer` (`put`, `get`), `cast_ray`, `RayHit`,
  `wall_span`, `draw_column` and `render_frame`, for drawing without a
  window.
- `raycube.app`: `Game` (`step`, `key_down`, `key_up`) and `main`.
- Text helpers used by the parser: `raycube.lines` (`LineReader`,
  `read_lines`), `raycube.charclass`, `raycube.numbers`, `raycube.strings`,
  `raycube.textops` and `raycube.wordtab`, plus `raycube.linkedlist`
  (`LinkedList`, `Node`).

## What it does not do

The texture paths in a scene are read and kept on the `Scene`, but no images
are loaded: every wall is drawn in flat grey (`0x808080`), whatever its side
or texture. There is no sound, no minimap and no mouse look.