from unittest.mock import patch

import pygame
import pytest

from draughtsboard.app import main, run
from draughtsboard.game import Game, GameMode, GameState


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")


def test_run_stops_after_max_frames():
    game = Game()
    assert run(game, 2) == 2
    assert game.state is GameState.IN_MENU


def test_key_one_starts_single_player():
    game = Game()
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1)]
    with patch("pygame.event.get", return_value=events):
        frames = run(game, 1)
    assert frames == 1
    assert game.state is GameState.IN_GAME
    assert game.game_mode is GameMode.SINGLE_PLAYER


def test_quit_event_closes_before_drawing():
    game = Game()
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert run(game, 5) == 0


def test_escape_in_menu_closes():
    game = Game()
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    with patch("pygame.event.get", return_value=events):
        frames = run(game, 5)
    assert frames == 0
    assert game.quit_requested is True


def test_left_click_selects_pawn():
    game = Game()
    game.start_game(GameMode.MULTI_PLAYER)
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 550))]
    with patch("pygame.event.get", return_value=events):
        run(game, 1)
    assert game.selected is game.board.at(0, 5)


def test_right_click_is_ignored():
    game = Game()
    game.start_game(GameMode.MULTI_PLAYER)
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(50, 550))]
    with patch("pygame.event.get", return_value=events):
        run(game, 1)
    assert game.selected is None


def test_main_runs_limited_frames():
    assert main(["--frames", "1"]) == 0


def test_main_rejects_unknown_level():
    with pytest.raises(SystemExit):
        main(["--level", "bogus"])