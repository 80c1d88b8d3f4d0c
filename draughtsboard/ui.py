"""Text screens: main menu, pause menu and game over."""

from __future__ import annotations

from .board import GRAY
from .pawn import Color

TITLE_SIZE = 40
TEXT_SIZE = 20
MARGIN = 20

TextLine = tuple[str, int, int, int, tuple[int, int, int]]

_WHITE = Color.WHITE.value


def menu_lines() -> list[TextLine]:
    """Lines of the main menu as (text, x, y, size, colour)."""
    return [
        ("CHECKER", MARGIN, 20, TITLE_SIZE, _WHITE),
        ("Press 1 to play in singleplayer mode", MARGIN, 80, TEXT_SIZE, _WHITE),
        ("Press 2 to play in multiplayer mode", MARGIN, 110, TEXT_SIZE, _WHITE),
    ]


def pause_lines() -> list[TextLine]:
    """Lines of the pause menu as (text, x, y, size, colour)."""
    return [
        ("PAUSE", MARGIN, 20, TITLE_SIZE, _WHITE),
        ("Press enter to play return", MARGIN, 80, TEXT_SIZE, _WHITE),
        ("Press escape to exit to the main menu", MARGIN, 110, TEXT_SIZE, _WHITE),
    ]


def game_over_lines(winning_color: Color | None) -> list[TextLine]:
    """Lines of the game-over screen; no winner means a draw."""
    if winning_color is Color.WHITE:
        verdict: TextLine = ("WHITE WINS!", MARGIN, 110, TEXT_SIZE, _WHITE)
    elif winning_color is Color.BLACK:
        verdict = ("BLACK WINS!", MARGIN, 110, TEXT_SIZE, _WHITE)
    else:
        verdict = ("DRAW!", MARGIN, 110, TEXT_SIZE, GRAY)
    return [
        ("GAME OVER", MARGIN, 20, TITLE_SIZE, _WHITE),
        ("Press escape to exit to the main menu", MARGIN, 80, TEXT_SIZE, _WHITE),
        verdict,
    ]


def _render(surface, lines: list[TextLine]) -> None:
    import pygame

    if not pygame.font.get_init():
        pygame.font.init()
    fonts: dict[int, pygame.font.Font] = {}
    for text, x, y, size, color in lines:
        font = fonts.get(size)
        if font is None:
            font = fonts[size] = pygame.font.Font(None, size)
        surface.blit(font.render(text, True, color), (x, y))


def draw_menu(surface) -> None:
    """Paint the main menu."""
    _render(surface, menu_lines())


def draw_pause_menu(surface) -> None:
    """Paint the pause menu."""
    _render(surface, pause_lines())


def draw_game_over(surface, winning_color: Color | None) -> None:
    """Paint the game-over screen."""
    _render(surface, game_over_lines(winning_color))