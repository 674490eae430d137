"""Command-line entry point: load a map and show it in a window."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import pygame

from wirefdf.heightmap import MapError, parse_map
from wirefdf.viewer import Key, Viewer

USAGE = "fdf: invalid arguments \nUsage: fdf <file_path.fdf>\n"

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_EQUALS: Key.PLUS,
    pygame.K_KP_MINUS: Key.MINUS_NUM,
    pygame.K_KP_PLUS: Key.PLUS_NUM,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_1: Key.ONE,
    pygame.K_2: Key.TWO,
    pygame.K_3: Key.THREE,
    pygame.K_4: Key.FOUR,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_q: Key.Q,
    pygame.K_e: Key.E,
    pygame.K_z: Key.Z,
    pygame.K_x: Key.X,
}


def translate_key(pygame_key: int) -> Key | None:
    """Map a pygame key constant to a viewer key, or None if unused."""
    return _KEYMAP.get(pygame_key)


def load(path: str | os.PathLike[str]) -> Viewer:
    """Read a map file and build a viewer for it."""
    return Viewer(parse_map(path))


def run(viewer: Viewer) -> None:
    """Open a window and show the viewer until it is closed."""
    size = (viewer.canvas.width, viewer.canvas.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("fdf")
        pygame.key.set_repeat(200, 30)
        clock = pygame.time.Clock()
        viewer.redraw()
        shown = -1
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYDOWN:
                    key = translate_key(event.key)
                    if key is not None and not viewer.handle_key(key):
                        running = False
                        break
            if running and shown != viewer.frames:
                image = pygame.image.frombuffer(bytes(viewer.canvas.data), size, "RGB")
                screen.blit(image, (0, 0))
                pygame.display.flip()
                shown = viewer.frames
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(USAGE)
        return 1
    try:
        viewer = load(args[0])
    except MapError:
        print("fdf: invalid map", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"fdf: error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    run(viewer)
    print("fdf: program exited successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())