"""Cards and the zones of the table that hold them."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import pygame

Colour = tuple[int, int, int, int]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    """A card, described by its face colour and its two border colours."""

    colour: Colour
    selected_colour: Colour
    unselected_colour: Colour


class CardZoneError(Exception):
    """Raised when a card cannot be added to or taken from a zone."""


class CardZone:
    """A region of the table laid out as a grid of cards."""

    def __init__(self, x, y, card_width, card_height, max_cards, cards_wide, border_size):
        self.x = x
        self.y = y
        self.card_width = card_width
        self.card_height = card_height
        self.max_cards = max_cards
        self.cards_wide = cards_wide
        self.border_size = border_size
        self.cards: list[Card] = []
        self.selected_index = 0
        self.selection_active = False

    def __len__(self):
        return len(self.cards)

    def add_card(self, card):
        """Append a card, raising CardZoneError if the zone is full."""
        if len(self.cards) >= self.max_cards:
            raise CardZoneError("cardZone is full")
        self.cards.append(card)

    def remove_card(self, index):
        """Take out and return the card at ``index``."""
        if not self.cards:
            raise CardZoneError("no removable cards")
        if not 0 <= index < len(self.cards):
            raise CardZoneError("index out of range")
        return self.cards.pop(index)

    def shuffle(self, rng=None):
        """Shuffle the cards in place."""
        if len(self.cards) < 2:
            return
        (rng or random.Random()).shuffle(self.cards)

    def increment_selected(self):
        if self.selected_index < len(self.cards) - 1:
            self.selected_index += 1

    def decrement_selected(self):
        if self.selected_index > 0:
            self.selected_index -= 1

    def _positions(self):
        x, y = self.x, self.y
        for position, card in enumerate(self.cards, start=1):
            yield x, y, card
            x += self.card_width
            if position % self.cards_wide == 0:
                x -= self.card_width * self.cards_wide
                y += self.card_height

    def draw(self, surface):
        """Paint every card of the zone onto a pygame surface."""
        border = self.border_size
        inner_width = max(0, self.card_width - 2 * border)
        inner_height = max(0, self.card_height - 2 * border)
        for index, (x, y, card) in enumerate(self._positions()):
            selected = self.selection_active and self.selected_index == index
            border_colour = card.selected_colour if selected else card.unselected_colour
            surface.fill(border_colour, pygame.Rect(x, y, self.card_width, self.card_height))
            surface.fill(card.colour, pygame.Rect(x + border, y + border, inner_width, inner_height))


def move_card(source, destination, index):
    """Move a card between zones; return whether it moved.

    If the destination is full, the card goes back to the end of the source.
    """
    try:
        card = source.remove_card(index)
    except CardZoneError as error:
        logger.info("%s", error)
        return False
    try:
        destination.add_card(card)
    except CardZoneError as error:
        logger.info("%s", error)
        try:
            source.add_card(card)
        except CardZoneError as restore_error:
            logger.info("%s", restore_error)
        return False
    return True