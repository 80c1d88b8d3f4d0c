"""Game state machine: menus, turns, selection and player moves."""

from __future__ import annotations

from enum import Enum

from . import ui
from .ai import Ai, Level
from .beatings import is_inside_board, legal_moves, where_is_beating_available
from .board import BOARD_CELLS, Board
from .pawn import CELL_SIZE, Color, Pawn, Position, _cell_of

KEY_ESCAPE = "escape"
KEY_ONE = "1"
KEY_TWO = "2"
KEY_ENTER = "enter"

YELLOW = (253, 249, 0)
SELECTION_WIDTH = 5
BEATING_OVERLAY = (255, 0, 0, 100)
MOVE_OVERLAY = (0, 255, 0, 100)


class GameState(Enum):
    """Which screen is active."""

    IN_GAME = "in_game"
    IN_MENU = "in_menu"
    IN_PAUSE = "in_pause"
    IN_GAME_OVER = "in_game_over"


class GameMode(Enum):
    """Against the computer or two people at one board."""

    SINGLE_PLAYER = "single_player"
    MULTI_PLAYER = "multi_player"


class Player(Enum):
    """Whose turn it is."""

    PLAYER = "player"
    ENEMY = "enemy"


class Game:
    """One session: menus plus the match being played."""

    def __init__(self, ai: Ai | None = None) -> None:
        self.state = GameState.IN_MENU
        self.game_mode: GameMode | None = None
        self.board = Board()
        self.ai = ai if ai is not None else Ai(Level.EASY)
        self.turn = Player.PLAYER
        self.selected: Pawn | None = None
        self.player_color = Color.WHITE
        self.enemy_color = Color.BLACK
        self.winning_color: Color | None = None
        self.is_finished = False
        self.quit_requested = False

    @property
    def current_color(self) -> Color:
        """Colour of the side to move."""
        return self.player_color if self.turn is Player.PLAYER else self.enemy_color

    def change_game_state(self, new_state: GameState) -> None:
        """Switch to another screen."""
        self.state = new_state

    def start_game(self, mode: GameMode) -> None:
        """Set up a fresh match in the given mode."""
        self.change_game_state(GameState.IN_GAME)
        self.board.fill_pawns()
        self.game_mode = mode
        self.turn = Player.PLAYER
        self.is_finished = False
        self.selected = None
        self.winning_color = None

    def handle_key(self, key: str) -> None:
        """React to a key press: one of the KEY_* names."""
        if self.state is GameState.IN_GAME:
            if key == KEY_ESCAPE:
                self.change_game_state(GameState.IN_PAUSE)
        elif self.state is GameState.IN_MENU:
            if key == KEY_ONE:
                self.start_game(GameMode.SINGLE_PLAYER)
            elif key == KEY_TWO:
                self.start_game(GameMode.MULTI_PLAYER)
            elif key == KEY_ESCAPE:
                self.quit_requested = True
        elif self.state is GameState.IN_PAUSE:
            if key == KEY_ENTER:
                self.change_game_state(GameState.IN_GAME)
            elif key == KEY_ESCAPE:
                self.change_game_state(GameState.IN_MENU)
        elif self.state is GameState.IN_GAME_OVER:
            if key == KEY_ESCAPE:
                self.change_game_state(GameState.IN_MENU)

    def handle_click(self, pos: Position) -> None:
        """React to a left click at a pixel position during a match."""
        if self.state is not GameState.IN_GAME:
            return
        gx, gy = _cell_of(pos)
        if not is_inside_board(gx, gy):
            return
        clicked = self.board.at(gx, gy)

        if self.selected is not None and clicked is self.selected:
            self.selected = None
        elif self.selected is not None and clicked is None:
            if not self.any_pawn_has_beating(self.selected.color) and self._step(gx, gy):
                return
            self._capture(gx, gy)
        elif clicked is not None and clicked.is_alive:
            self._select(clicked)
        else:
            self.selected = None

    def update(self) -> None:
        """Advance the match by one frame: game over, computer move, forced selection."""
        if self.state is not GameState.IN_GAME:
            return
        if self.is_finished:
            self.change_game_state(GameState.IN_GAME_OVER)
            return
        if self.turn is Player.ENEMY and self.game_mode is GameMode.SINGLE_PLAYER:
            self.ai.move(self.board)
            self.turn = Player.PLAYER
        player_out = self.is_finished_for(self.player_color)
        if player_out or self.is_finished_for(self.enemy_color):
            self.is_finished = True
            self.winning_color = self.enemy_color if player_out else self.player_color
        if self.selected is None:
            forced = self.pawn_with_beating(self.current_color)
            if forced is not None:
                self.selected = forced

    def draw(self, surface) -> None:
        """Paint the active screen."""
        if self.state is GameState.IN_GAME:
            self.board.draw_board(surface)
            self.board.draw_pawns(surface)
            if self.selected is not None:
                self._draw_selection(surface, self.selected)
        elif self.state is GameState.IN_MENU:
            ui.draw_menu(surface)
        elif self.state is GameState.IN_PAUSE:
            ui.draw_pause_menu(surface)
        else:
            ui.draw_game_over(surface, self.winning_color)

    def is_finished_for(self, color: Color) -> bool:
        """Tell whether the side of this colour has no living pawns left."""
        return not any(p.is_alive and p.color is color for p in self.board.pawns())

    def pawn_with_beating(self, color: Color) -> Pawn | None:
        """Return the first pawn of this colour that can capture, row by row."""
        for pawn in self.board.pawns():
            if pawn.is_alive and pawn.color is color and where_is_beating_available(pawn, self.board):
                return pawn
        return None

    def any_pawn_has_beating(self, color: Color) -> bool:
        """Tell whether any pawn of this colour can capture."""
        return self.pawn_with_beating(color) is not None

    def _select(self, clicked: Pawn) -> None:
        color = self.current_color
        if clicked.color is not color:
            self.selected = None
            return
        if self.any_pawn_has_beating(color) and not where_is_beating_available(clicked, self.board):
            self.selected = self.pawn_with_beating(color)
        else:
            self.selected = clicked

    def _relocate(self, pawn: Pawn, target: Position) -> tuple[int, int]:
        old_x, old_y = pawn.cell()
        new_x, new_y = _cell_of(target)
        self.board.remove(old_x, old_y)
        self.board.place(new_x, new_y, pawn)
        pawn.change_position(target)
        if not pawn.is_queen and new_y in (0, BOARD_CELLS - 1):
            pawn.is_queen = True
        return new_x, new_y

    def _end_turn(self) -> None:
        self.selected = None
        if self.game_mode is GameMode.MULTI_PLAYER:
            self.turn = Player.ENEMY if self.turn is Player.PLAYER else Player.PLAYER
        else:
            self.turn = Player.ENEMY

    def _step(self, gx: int, gy: int) -> bool:
        pawn = self.selected
        for move in legal_moves(pawn, self.board):
            if len(move) == 2 and _cell_of(move[1]) == (gx, gy):
                self._relocate(pawn, move[1])
                self._end_turn()
                return True
        return False

    def _capture(self, gx: int, gy: int) -> bool:
        pawn = self.selected
        for target in where_is_beating_available(pawn, self.board):
            if _cell_of(target) != (gx, gy):
                continue
            self._take_between(pawn, gx, gy)
            self._relocate(pawn, target)
            if not where_is_beating_available(pawn, self.board):
                self._end_turn()
            return True
        return False

    def _take_between(self, pawn: Pawn, new_x: int, new_y: int) -> None:
        old_x, old_y = pawn.cell()
        dx = 1 if new_x > old_x else -1
        dy = 1 if new_y > old_y else -1
        x, y = old_x + dx, old_y + dy
        while x != new_x and y != new_y:
            victim = self.board.at(x, y)
            if victim is not None and victim.is_alive and victim.color is not pawn.color:
                self.winning_color = pawn.color
                self.is_finished = self.is_finished_for(victim.color)
                victim.is_alive = False
                self.board.remove(x, y)
                return
            x += dx
            y += dy

    def _draw_selection(self, surface, pawn: Pawn) -> None:
        import pygame

        if pawn.is_alive:
            px, py = pawn.position
            half = CELL_SIZE // 2
            rect = (int(px) - half, int(py) - half, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(surface, YELLOW, rect, width=SELECTION_WIDTH)
        for target in where_is_beating_available(pawn, self.board):
            self._overlay(surface, target, BEATING_OVERLAY)
        for move in legal_moves(pawn, self.board):
            if len(move) == 2:
                self._overlay(surface, move[1], MOVE_OVERLAY)

    @staticmethod
    def _overlay(surface, center: Position, rgba: tuple[int, int, int, int]) -> None:
        import pygame

        patch = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)
        patch.fill(rgba)
        half = CELL_SIZE // 2
        surface.blit(patch, (int(center[0]) - half, int(center[1]) - half))