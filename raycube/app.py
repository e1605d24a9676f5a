"""The game: a scene, a camera, held keys, a frame, and the window loop."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .camera import Camera, Keys
from .render import WINDOW_HEIGHT, WINDOW_WIDTH, FrameBuffer, render_frame
from .scene import Scene, SceneError, load_scene

WINDOW_TITLE = "Cub3D"
USAGE = "usage raycube <map>"


def _report(message: Optional[str], stream: Optional[TextIO] = None) -> None:
    text = f"Error: {message}" if message else "Error"
    print(text, file=sys.stderr if stream is None else stream)


class Game:
    """Game state advanced one frame at a time."""

    def __init__(
        self, scene: Scene, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
    ) -> None:
        self.scene = scene
        start = scene.player
        self.camera = Camera.from_orientation(start.x, start.y, start.orientation)
        self.keys = Keys()
        self.frame = FrameBuffer(width, height)

    def step(self) -> FrameBuffer:
        """Move and turn for the held keys, then render and return the frame."""
        self.camera.move(self.scene.grid, self.keys)
        self.camera.rotate(self.keys)
        return render_frame(
            self.frame, self.camera, self.scene.grid, self.scene.ceiling, self.scene.floor
        )

    def key_down(self, keycode: int) -> bool:
        """Handle a key press; True means the player asked to quit."""
        return self.keys.press(keycode)

    def key_up(self, keycode: int) -> None:
        """Handle a key release."""
        self.keys.release(keycode)


def _run_window(game: Game) -> None:
    import pygame

    keymap = {
        pygame.K_w: 119,
        pygame.K_s: 115,
        pygame.K_a: 97,
        pygame.K_d: 100,
        pygame.K_ESCAPE: 65307,
        pygame.K_LEFT: 65361,
        pygame.K_RIGHT: 65363,
    }
    layout = "BGRA" if sys.byteorder == "little" else "ARGB"
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption(WINDOW_TITLE)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                code = keymap.get(getattr(event, "key", None))
                if code is None:
                    continue
                if event.type == pygame.KEYDOWN and game.key_down(code):
                    return
                if event.type == pygame.KEYUP:
                    game.key_up(code)
            frame = game.step()
            image = pygame.image.frombuffer(
                frame.pixels.tobytes(), (frame.width, frame.height), layout
            )
            screen.blit(image.convert(), (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it in a window."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _report(USAGE)
        return 1
    try:
        scene = load_scene(args[0])
    except SceneError as exc:
        _report(str(exc))
        _report("invalid map")
        return 1
    _run_window(Game(scene))
    return 0


if __name__ == "__main__":
    sys.exit(main())