"""Vertical list menus and the menus the game shows."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from monthcards.cards import Colour

WHITE: Colour = (0xFF, 0xFF, 0xFF, 0xFF)
PINK: Colour = (0xFF, 0x69, 0xB4, 0xFF)
BLACK: Colour = (0x00, 0x00, 0x00, 0xFF)

MENU_WIDTH = 180
ITEM_HEIGHT = 36
OFFSET_Y = 40
FONT_SIZE = 24


@dataclass(frozen=True)
class MenuItem:
    """One entry of a list menu: an identifying name and the text shown."""

    name: str
    text: str
    text_x: int
    text_y: int
    bg_colour: Colour = WHITE
    text_colour: Colour = BLACK


class ListMenu:
    """A column of items, one of which is selected at a time."""

    def __init__(self, items, width, item_height, offset_y, selected_bg, selected_text):
        self.items = tuple(items)
        if not self.items:
            raise ValueError("a menu needs at least one item")
        if width <= 0 or item_height <= 0:
            raise ValueError("menu width and item height must be positive")
        self.width = width
        self.item_height = item_height
        self.offset_y = offset_y
        self.selected_bg = selected_bg
        self.selected_text = selected_text
        self.selected_index = 0
        self.scale = 1.0

    @property
    def height(self):
        """Unscaled height of the column of items."""
        return self.item_height * len(self.items)

    def increment_selected(self):
        if self.selected_index < len(self.items) - 1:
            self.selected_index += 1

    def decrement_selected(self):
        if self.selected_index > 0:
            self.selected_index -= 1

    def selected_item(self):
        """Name of the item currently selected."""
        return self.items[self.selected_index].name

    def set_scale(self, scale):
        if scale <= 0:
            raise ValueError(f"scale must be positive, not {scale!r}")
        self.scale = scale

    def draw(self, surface):
        """Paint the menu, centred horizontally, onto a pygame surface."""
        scale = self.scale
        width = round(self.width * scale)
        item_height = round(self.item_height * scale)
        left = (surface.get_width() - width) // 2
        top = round(self.offset_y * scale)

        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, max(1, round(FONT_SIZE * scale)))
        ascent = font.get_ascent()

        for index, item in enumerate(self.items):
            selected = index == self.selected_index
            rect = pygame.Rect(left, top + index * item_height, width, item_height)
            surface.fill(self.selected_bg if selected else item.bg_colour, rect)
            colour = self.selected_text if selected else item.text_colour
            label = font.render(item.text, True, colour)
            surface.blit(
                label,
                (rect.x + round(item.text_x * scale), rect.y + round(item.text_y * scale) - ascent),
            )


def _menu(items):
    return ListMenu(items, MENU_WIDTH, ITEM_HEIGHT, OFFSET_Y, PINK, WHITE)


def build_main_menu():
    return _menu([
        MenuItem("play", "PLAY", 60, 25),
        MenuItem("options", "OPTIONS", 40, 25),
        MenuItem("quit", "QUIT", 60, 25),
    ])


def build_options_menu():
    return _menu([MenuItem("screensize", "SCREEN SIZE", 20, 25)])


_SCREEN_SIZES = (
    ("640x480", "640 x 480"),
    ("800x600", "800 x 600"),
    ("1024x768", "1024 x 768"),
    ("1280x720", "1280 x 720"),
    ("1366x768", "1336 x 768"),
    ("1440x1080", "1440 x 1080"),
    ("1600x900", "1600 x 900"),
    ("1600x1200", "1600 x 1200"),
    ("1920x1080", "1920 x 1080"),
    ("1920x1200", "1920 x 1200"),
)


def build_screensize_menu():
    return _menu([MenuItem(name, text, 20, 25) for name, text in _SCREEN_SIZES])