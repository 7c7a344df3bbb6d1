"""Window and event loop for the raycaster."""

from __future__ import annotations

import argparse
import sys
from array import array
from typing import Optional

import pygame

from cub3d.engine import WIN_H, WIN_W, Framebuffer, Game

_KEYS = {
    pygame.K_ESCAPE: "escape",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_w: "w",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


def translate_key(key: int) -> Optional[str]:
    """Map a pygame key code to the engine's key name, or None."""
    return _KEYS.get(key)


def _surface(frame: Framebuffer) -> pygame.Surface:
    data = array("I", (pixel | 0xFF000000 for pixel in frame.pixels))
    if sys.byteorder == "little":
        data.byteswap()
    return pygame.image.frombuffer(data.tobytes(), (frame.width, frame.height), "ARGB")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="cub3d", description="First-person raycaster.")
    parser.add_argument("--fps", type=int, default=60,
                        help="frame rate cap, 0 for none (default: 60)")
    args = parser.parse_args(argv)

    game = Game()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Cub3d test")
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    name = translate_key(event.key)
                    if name is not None:
                        game.handle_key(name, event.type == pygame.KEYDOWN)
            if not game.running:
                break
            frame = game.tick()
            screen.blit(_surface(frame), (0, 0))
            pygame.display.flip()
            if args.fps > 0:
                clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())