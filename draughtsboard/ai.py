"""Computer opponent playing the black pawns."""

from __future__ import annotations

import random
from enum import Enum

from .beatings import legal_moves, where_is_beating_available
from .board import BOARD_CELLS, Board
from .pawn import Color, Pawn, Position, _cell_of, _center

_PROMOTION_ROW = BOARD_CELLS - 1


class Level(Enum):
    """How the opponent picks its move."""

    EASY = "easy"
    HARD = "hard"


class Ai:
    """Makes one move for black each time :meth:`move` is called."""

    def __init__(self, level: Level = Level.EASY, rng: random.Random | None = None) -> None:
        self.level = level
        self._rng = rng if rng is not None else random.Random()

    def move(self, board: Board) -> None:
        """Play one move for black on the board, if any move exists."""
        if self.level is Level.EASY:
            self._move_easy(board)
        else:
            self._move_hard(board)

    def evaluate_board(self, board: Board) -> int:
        """Score the material: white pieces count up, black ones down; queens count five."""
        score = 0
        for pawn in board.pawns():
            if not pawn.is_alive:
                continue
            value = 5 if pawn.is_queen else 1
            score += value if pawn.color is Color.WHITE else -value
        return score

    @staticmethod
    def _own_pawns(board: Board) -> list[Pawn]:
        return [p for p in board.pawns() if p.is_alive and p.color is not Color.WHITE]

    @staticmethod
    def _relocate(board: Board, pawn: Pawn, target: Position) -> tuple[int, int]:
        old_x, old_y = pawn.cell()
        new_x, new_y = _cell_of(target)
        board.remove(old_x, old_y)
        board.place(new_x, new_y, pawn)
        pawn.change_position(target)
        return new_x, new_y

    def _move_easy(self, board: Board) -> None:
        captures: list[tuple[Pawn, Position]] = []
        steps: list[tuple[Pawn, Position]] = []
        for pawn in self._own_pawns(board):
            captures.extend((pawn, target) for target in where_is_beating_available(pawn, board))
            steps.extend((pawn, move[1]) for move in legal_moves(pawn, board) if len(move) == 2)

        if captures:
            pawn, target = self._rng.choice(captures)
            self._take_between(board, pawn, target)
        elif steps:
            pawn, target = self._rng.choice(steps)
        else:
            return
        _, new_y = self._relocate(board, pawn, target)
        if not pawn.is_queen and new_y == _PROMOTION_ROW:
            pawn.is_queen = True

    @staticmethod
    def _take_between(board: Board, pawn: Pawn, target: Position) -> None:
        old_x, old_y = pawn.cell()
        new_x, new_y = _cell_of(target)
        dx = 1 if new_x > old_x else -1
        dy = 1 if new_y > old_y else -1
        x, y = old_x + dx, old_y + dy
        while x != new_x and y != new_y:
            victim = board.at(x, y)
            if victim is not None and victim.is_alive and victim.color is not pawn.color:
                victim.is_alive = False
                board.remove(x, y)
                break
            x += dx
            y += dy

    def _move_hard(self, board: Board) -> None:
        best_score: int | None = None
        best_move: list[Position] = []
        for pawn in self._own_pawns(board):
            for move in legal_moves(pawn, board):
                old_x, old_y = pawn.cell()
                new_x, new_y = self._relocate(board, pawn, move[-1])
                score = self.evaluate_board(board)
                if best_score is None or score > best_score:
                    best_score = score
                    best_move = move
                board.remove(new_x, new_y)
                board.place(old_x, old_y, pawn)
                pawn.change_position(_center(old_x, old_y))

        if best_move:
            old_x, old_y = _cell_of(best_move[0])
            pawn = board.at(old_x, old_y)
            if pawn is not None:
                self._relocate(board, pawn, best_move[-1])