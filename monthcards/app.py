"""Window and main loop of the card game."""

from __future__ import annotations

import argparse

import pygame

from monthcards.screens import Session

DEFAULT_WIDTH = 1366
DEFAULT_HEIGHT = 768
TITLE = "Card Game"
FRAMES_PER_SECOND = 60


def run(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, title=TITLE):
    """Open a window and play until it is closed; return the final session."""
    pygame.init()
    try:
        pygame.display.set_caption(title)
        pygame.display.set_mode((width, height))

        def resize(new_width, new_height):
            pygame.display.set_mode((new_width, new_height))

        session = Session(resize=resize)
        clock = pygame.time.Clock()
        while True:
            keys = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return session
                if event.type == pygame.KEYDOWN:
                    keys.add(event.key)
            session.update(pygame.display.get_surface(), keys)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="monthcards", description="A card game of the twelve months.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    try:
        run(args.width, args.height)
    except SystemExit as stop:
        return stop.code or 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())