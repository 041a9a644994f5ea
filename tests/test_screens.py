import random

import pygame
import pytest

from monthcards.menus import PINK
from monthcards.screens import GameState, Session, calc_ratio, resolution_for


@pytest.fixture
def surface():
    return pygame.Surface((1366, 768))


@pytest.fixture
def resizes():
    return []


@pytest.fixture
def session(resizes):
    return Session(rng=random.Random(7), resize=lambda w, h: resizes.append((w, h)))


def test_calc_ratio():
    assert calc_ratio(800, 600) == 1.3333333333333333


def test_resolution_for_known_name():
    assert resolution_for("1920x1080") == (1920, 1080)


def test_resolution_for_unknown_name():
    with pytest.raises(ValueError):
        resolution_for("1x1")


def test_every_screensize_item_resolves(session):
    for item in session.screensize_menu.items:
        width, height = resolution_for(item.name)
        assert f"{width}x{height}" == item.name


def test_title_play_starts_a_game(session, surface):
    session.update(surface, {pygame.K_RETURN})
    assert session.state is GameState.PLAY
    assert len(session.table.deck) == 24
    assert session.table.active_hand is session.table.player1_hand


def test_title_options(session, surface):
    session.update(surface, {pygame.K_DOWN})
    session.update(surface, {pygame.K_RETURN})
    assert session.state is GameState.OPTIONS


def test_title_quit_exits(session, surface):
    session.update(surface, {pygame.K_DOWN})
    session.update(surface, {pygame.K_DOWN})
    with pytest.raises(SystemExit) as stop:
        session.update(surface, {pygame.K_RETURN})
    assert stop.value.code == 0


def test_title_draws_menu(session, surface):
    session.update(surface, set())
    left = (surface.get_width() - session.main_menu.width) // 2
    assert surface.get_at((left + 2, session.main_menu.offset_y + 1)) == PINK


def test_options_escape_returns_to_title(session, surface):
    session.state = GameState.OPTIONS
    session.update(surface, {pygame.K_ESCAPE})
    assert session.state is GameState.TITLE


def test_options_enter_opens_screensize(session, surface):
    session.state = GameState.OPTIONS
    session.update(surface, {pygame.K_RETURN})
    assert session.state is GameState.SCREENSIZE


def test_screensize_escape_returns_to_options(session, surface):
    session.state = GameState.SCREENSIZE
    session.update(surface, {pygame.K_ESCAPE})
    assert session.state is GameState.OPTIONS


def test_screensize_enter_resizes_and_scales(session, surface, resizes):
    session.state = GameState.SCREENSIZE
    session.update(surface, {pygame.K_DOWN})
    session.update(surface, {pygame.K_RETURN})
    assert resizes == [(800, 600)]
    menu = session.screensize_menu
    assert menu.scale == session.best_ratio
    assert session.best_ratio * menu.width <= 800 + 1e-9
    assert session.best_ratio * menu.height <= 600 + 1e-9
    assert (
        session.best_ratio * menu.width == pytest.approx(800)
        or session.best_ratio * menu.height == pytest.approx(600)
    )
    assert session.state is GameState.SCREENSIZE


def test_scale_carries_to_title_menu(session, surface):
    session.state = GameState.SCREENSIZE
    session.update(surface, {pygame.K_RETURN})
    session.update(surface, {pygame.K_ESCAPE})
    session.update(surface, {pygame.K_ESCAPE})
    session.update(surface, set())
    assert session.state is GameState.TITLE
    assert session.main_menu.scale == session.best_ratio


def test_play_escape_returns_to_title(session, surface):
    session.update(surface, {pygame.K_RETURN})
    session.update(surface, {pygame.K_ESCAPE})
    assert session.state is GameState.TITLE


def test_play_draws_over_black(session, surface):
    session.update(surface, {pygame.K_RETURN})
    surface.fill((255, 0, 0))
    session.update(surface, set())
    assert surface.get_at((1360, 760)) == (0, 0, 0, 255)
    hand = session.table.player1_hand
    assert surface.get_at((hand.x + hand.border_size + 1, hand.y + hand.border_size + 1)) == hand.cards[0].colour


def test_play_keys_move_cards(session, surface):
    session.update(surface, {pygame.K_RETURN})
    session.update(surface, {pygame.K_f})
    assert len(session.table.player1_hand) == 7
    assert len(session.table.player1_discard) == 1


def test_play_without_table_fails(session, surface):
    session.state = GameState.PLAY
    with pytest.raises(RuntimeError):
        session.update(surface, set())