"""Window and frame loop for playing draughts."""

from __future__ import annotations

import argparse

from .ai import Ai, Level
from .game import KEY_ENTER, KEY_ESCAPE, KEY_ONE, KEY_TWO, Game

SCREEN_SIZE = (800, 800)
TITLE = "Checker"
FPS = 60
_LEFT_BUTTON = 1


def _key_map(pygame) -> dict[int, str]:
    return {
        pygame.K_ESCAPE: KEY_ESCAPE,
        pygame.K_1: KEY_ONE,
        pygame.K_KP1: KEY_ONE,
        pygame.K_2: KEY_TWO,
        pygame.K_KP2: KEY_TWO,
        pygame.K_RETURN: KEY_ENTER,
        pygame.K_KP_ENTER: KEY_ENTER,
    }


def _dispatch(game: Game, events, keys: dict[int, str], pygame) -> bool:
    """Feed events to the game; return False when the window is closed."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key in keys:
            game.handle_key(keys[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == _LEFT_BUTTON:
            game.handle_click(event.pos)
        if game.quit_requested:
            return False
    return True


def run(game: Game | None = None, max_frames: int | None = None) -> int:
    """Open the window and play until closed; return the number of frames drawn."""
    import pygame

    game = game if game is not None else Game()
    pygame.display.init()
    pygame.font.init()
    frames = 0
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        keys = _key_map(pygame)
        while max_frames is None or frames < max_frames:
            if not _dispatch(game, pygame.event.get(), keys, pygame):
                break
            game.update()
            screen.fill((0, 0, 0))
            game.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
            frames += 1
    finally:
        pygame.quit()
    return frames


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="draughtsboard", description="Play draughts.")
    parser.add_argument(
        "--level",
        choices=[level.value for level in Level],
        default=Level.EASY.value,
        help="strength of the computer opponent",
    )
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    run(Game(ai=Ai(Level(args.level))), args.frames)
    return 0