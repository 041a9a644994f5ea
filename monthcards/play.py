"""The card table: the deck, the play area, hands and discard piles."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from monthcards.cards import Card, CardZone, move_card

UNSELECTED_BORDER = (0x44, 0x44, 0x44, 0xFF)
SELECTED_BORDER = (0xFF, 0x00, 0xFF, 0xFF)

JANUARY = (0x81, 0xC1, 0xFF, 0xFF)
FEBRUARY = (0xFC, 0xB5, 0xB3, 0xFF)
MARCH = (0xAF, 0xFE, 0x88, 0xFF)
APRIL = (0xFE, 0xFF, 0x99, 0xFF)
MAY = (0xC3, 0xA8, 0xFF, 0xFF)
JUNE = (0x7A, 0xFF, 0xD5, 0xFF)
JULY = (0x22, 0x3E, 0xCD, 0xFF)
AUGUST = (0x9F, 0x22, 0xCD, 0xFF)
SEPTEMBER = (0xFF, 0xD0, 0x00, 0xFF)
OCTOBER = (0xFF, 0x8D, 0x28, 0xFF)
NOVEMBER = (0xFF, 0x46, 0x28, 0xFF)
DECEMBER = (0xFF, 0xFF, 0xFF, 0xFF)

MONTH_COLOURS = (
    JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE,
    JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER,
)

CARDS_PER_MONTH = 4
DECK_SIZE = 48
CARD_WIDTH = 90
CARD_HEIGHT = 150
BORDER_SIZE = 2
DEALING_ROUNDS = 2
CARDS_PER_DEAL = 4


def initialise_cards(zone):
    """Fill a zone with four cards of each month's colour, in month order."""
    zone.cards.extend(
        Card(colour, SELECTED_BORDER, UNSELECTED_BORDER)
        for colour in MONTH_COLOURS
        for _ in range(CARDS_PER_MONTH)
    )


def _hands_for(dealer, player1_hand, player2_hand):
    if dealer == 1:
        return player1_hand, player2_hand
    if dealer == 2:
        return player2_hand, player1_hand
    raise ValueError(f"dealer must be 1 or 2, not {dealer!r}")


def deal_cards(dealer, deck, play_area, player1_hand, player2_hand):
    """Deal from the top of the deck: opponent, play area, then dealer, twice."""
    dealer_hand, opponent_hand = _hands_for(dealer, player1_hand, player2_hand)
    for _ in range(DEALING_ROUNDS):
        for target in (opponent_hand, play_area, dealer_hand):
            for _ in range(CARDS_PER_DEAL):
                move_card(deck, target, len(deck) - 1)


def _zone(x, y, max_cards, cards_wide, height=CARD_HEIGHT):
    return CardZone(x, y, CARD_WIDTH, height, max_cards, cards_wide, BORDER_SIZE)


@dataclass
class Table:
    """Every zone of a game in progress and the hand being played."""

    deck: CardZone
    play_area: CardZone
    player1_discard: CardZone
    player2_discard: CardZone
    player1_hand: CardZone
    player2_hand: CardZone
    active_hand: CardZone

    def handle_keys(self, keys):
        """Act on the keys just pressed; return True if the player asked to leave."""
        pressed = set(keys)
        if pygame.K_RIGHT in pressed:
            self.active_hand.increment_selected()
        if pygame.K_LEFT in pressed:
            self.active_hand.decrement_selected()
        if pygame.K_d in pressed:
            move_card(self.deck, self.player1_hand, len(self.deck) - 1)
        if pygame.K_e in pressed:
            move_card(self.deck, self.player2_hand, len(self.deck) - 1)
        if pygame.K_r in pressed:
            move_card(self.player2_hand, self.player2_discard, len(self.player2_hand) - 1)
        if pygame.K_f in pressed:
            move_card(self.player1_hand, self.player1_discard, len(self.player1_hand) - 1)
        return pygame.K_ESCAPE in pressed

    def draw(self, surface):
        for zone in (
            self.deck,
            self.play_area,
            self.player1_discard,
            self.player2_discard,
            self.player1_hand,
            self.player2_hand,
        ):
            zone.draw(surface)


def new_table(dealer=1, rng=None):
    """Lay out a table, shuffle a full deck and deal it."""
    deck = _zone(0, 200, DECK_SIZE, 1, height=10)
    initialise_cards(deck)
    deck.shuffle(rng)

    player1_hand = _zone(40, 600, 8, 8)
    player2_hand = _zone(40, 0, 8, 8)
    play_area = _zone(200, 200, 8, 4)
    player1_discard = _zone(450, 450, DECK_SIZE, 8)
    player2_discard = _zone(450, 0, DECK_SIZE, 8)

    deal_cards(dealer, deck, play_area, player1_hand, player2_hand)
    active_hand, _ = _hands_for(dealer, player1_hand, player2_hand)
    active_hand.selection_active = True

    return Table(
        deck=deck,
        play_area=play_area,
        player1_discard=player1_discard,
        player2_discard=player2_discard,
        player1_hand=player1_hand,
        player2_hand=player2_hand,
        active_hand=active_hand,
    )