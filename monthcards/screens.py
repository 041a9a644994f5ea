"""The screens of the game and the session that moves between them."""

from __future__ import annotations

from enum import Enum, auto

import pygame

from monthcards.menus import BLACK, build_main_menu, build_options_menu, build_screensize_menu
from monthcards.play import new_table

RESOLUTIONS = {
    "640x480": (640, 480),
    "800x600": (800, 600),
    "1024x768": (1024, 768),
    "1280x720": (1280, 720),
    "1366x768": (1366, 768),
    "1440x1080": (1440, 1080),
    "1600x900": (1600, 900),
    "1600x1200": (1600, 1200),
    "1920x1080": (1920, 1080),
    "1920x1200": (1920, 1200),
}


class GameState(Enum):
    TITLE = auto()
    OPTIONS = auto()
    SCREENSIZE = auto()
    PLAY = auto()


def calc_ratio(width, height):
    return width / height


def resolution_for(name):
    """Width and height for a screen size menu entry."""
    try:
        return RESOLUTIONS[name]
    except KeyError:
        raise ValueError(f"unknown screen size {name!r}") from None


class Session:
    """The state of a running game: current screen, menus and table."""

    def __init__(self, rng=None, resize=None):
        self.state = GameState.TITLE
        self.main_menu = build_main_menu()
        self.options_menu = build_options_menu()
        self.screensize_menu = build_screensize_menu()
        self.best_ratio = 1.0
        self.table = None
        self.rng = rng
        self.resize = resize

    def update(self, surface, keys):
        """Advance one frame given the keys just pressed."""
        surface.fill(BLACK)
        handler = {
            GameState.TITLE: self.update_title,
            GameState.OPTIONS: self.update_options,
            GameState.SCREENSIZE: self.update_screensize,
            GameState.PLAY: self.update_play,
        }[self.state]
        handler(surface, set(keys))

    @staticmethod
    def _navigate(menu, keys):
        if pygame.K_UP in keys:
            menu.decrement_selected()
        if pygame.K_DOWN in keys:
            menu.increment_selected()

    def update_title(self, surface, keys):
        keys = set(keys)
        menu = self.main_menu
        menu.set_scale(self.best_ratio)
        self._navigate(menu, keys)
        if pygame.K_RETURN in keys:
            choice = menu.selected_item()
            if choice == "play":
                self.table = new_table(rng=self.rng)
                self.state = GameState.PLAY
            elif choice == "options":
                self.state = GameState.OPTIONS
            elif choice == "quit":
                raise SystemExit(0)
            return
        menu.draw(surface)

    def update_options(self, surface, keys):
        keys = set(keys)
        menu = self.options_menu
        menu.set_scale(self.best_ratio)
        self._navigate(menu, keys)
        if pygame.K_ESCAPE in keys:
            self.state = GameState.TITLE
            return
        if pygame.K_RETURN in keys:
            if menu.selected_item() == "screensize":
                self.state = GameState.SCREENSIZE
            return
        menu.draw(surface)

    def update_screensize(self, surface, keys):
        keys = set(keys)
        menu = self.screensize_menu
        menu.set_scale(self.best_ratio)
        self._navigate(menu, keys)
        if pygame.K_ESCAPE in keys:
            self.state = GameState.OPTIONS
            return
        if pygame.K_RETURN in keys:
            width, height = resolution_for(menu.selected_item())
            self.best_ratio = min(width / menu.width, height / menu.height)
            menu.set_scale(self.best_ratio)
            if self.resize is not None:
                self.resize(width, height)
        menu.draw(surface)

    def update_play(self, surface, keys):
        if self.table is None:
            raise RuntimeError("no game in progress")
        if self.table.handle_keys(set(keys)):
            self.state = GameState.TITLE
            return
        self.table.draw(surface)