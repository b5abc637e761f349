"""The interactive wire-frame viewer."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .controls import Key, Quit, key_press
from .mapfile import MapError, read_map
from .render import Scene

__all__ = ["run", "main"]

_TITLE = "FDF"
_FRAME_RATE = 60


def _key_table() -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_KP_PLUS: Key.NUM_PLUS,
        pygame.K_KP_MINUS: Key.NUM_MINUS,
        pygame.K_LEFT: Key.ARROW_LEFT,
        pygame.K_RIGHT: Key.ARROW_RIGHT,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_UP: Key.ARROW_UP,
        pygame.K_a: Key.KEY_A,
        pygame.K_s: Key.KEY_S,
        pygame.K_d: Key.KEY_D,
        pygame.K_z: Key.KEY_Z,
        pygame.K_x: Key.KEY_X,
        pygame.K_c: Key.KEY_C,
        pygame.K_1: Key.KEY_1,
        pygame.K_EQUALS: Key.KEY_PLUS,
        pygame.K_MINUS: Key.KEY_MINUS,
    }


def _show(screen: pygame.Surface, scene: Scene) -> None:
    image = scene.image
    surface = pygame.image.frombuffer(
        image.to_rgb_bytes(), (image.width, image.height), "RGB"
    )
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(scene: Scene) -> None:
    """Open a window showing the scene and react to keys until asked to quit."""
    keys = _key_table()
    pygame.init()
    try:
        screen = pygame.display.set_mode((scene.image.width, scene.image.height))
        pygame.display.set_caption(_TITLE)
        clock = pygame.time.Clock()
        scene.draw()
        _show(screen, scene)
        while True:
            changed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and event.key in keys:
                    try:
                        key_press(scene, keys[event.key])
                    except Quit:
                        return
                    changed = True
            if changed:
                _show(screen, scene)
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def _fail() -> int:
    sys.stdout.write("Error")
    sys.stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read the map named on the command line and show it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail()
    try:
        scene = Scene(read_map(args[0]))
    except (MapError, ValueError):
        return _fail()
    run(scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())